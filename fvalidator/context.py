"""
Context manager for validation configuration.
"""

from contextlib import contextmanager
from contextvars import ContextVar

# Context variables for validation settings
_catch_exceptions: ContextVar[bool] = ContextVar("catch_exceptions", default=False)
_max_received_length: ContextVar[int | None] = ContextVar(
    "max_received_length", default=None
)


def catches_exceptions() -> bool:
    """Check if raising validators are currently turned into errors."""
    return _catch_exceptions.get()


def max_received_length() -> int | None:
    """Current limit on rendered `received` text in messages, if any."""
    return _max_received_length.get()


@contextmanager
def validation_context(
    *, catch_exceptions: bool = False, max_received_length: int | None = None
):
    """
    Context manager for validation configuration.

    Args:
        catch_exceptions: If True, a validator that raises while being run by
            a combinator produces a ValidationError instead of propagating.
        max_received_length: If set, the JSON text of `received` in
            synthesized messages is cut to this many characters.

    Example:
        from fvalidator import error, object_of, validation_context

        def brittle(value, path=()):
            return None if value.startswith("id-") else error(path, "id", value)

        schema = object_of({"id": brittle})

        # Normal: brittle(42) raises AttributeError
        schema({"id": 42})

        # Caught: returns an error at path ("id",)
        with validation_context(catch_exceptions=True):
            schema({"id": 42})
    """
    if max_received_length is not None and max_received_length < 0:
        raise ValueError(
            f"max_received_length must be >= 0, got {max_received_length}"
        )

    catch_token = _catch_exceptions.set(catch_exceptions)
    length_token = _max_received_length.set(max_received_length)
    try:
        yield
    finally:
        _max_received_length.reset(length_token)
        _catch_exceptions.reset(catch_token)
