"""
Core building blocks for fvalidator.

Provides the error builder, runtime type tagging and the helpers every
combinator uses to name and invoke its children.
"""

from __future__ import annotations

import datetime
import logging
import math
import numbers
import re
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Callable, TypeVar

from .context import catches_exceptions
from .lib.rendering import render_received
from .types import UNDEFINED, Kind, Path, ValidationError, Validator

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def error(
    path: Path | list | None,
    expected: str,
    received: Any,
    message: str | None = None,
) -> ValidationError:
    """
    Build a ValidationError.

    Args:
        path: Keys/indices leading to the offending value
        expected: Description of the expected shape
        received: The offending value, kept by reference
        message: Summary text; synthesized from the other fields when omitted

    Usage:
        def even(value, path=()):
            if isinstance(value, int) and value % 2 == 0:
                return None
            return error(path, "an even number", value)
    """
    path = tuple(path) if path else ()
    if not message:
        joined = ".".join(str(key) for key in path)
        message = (
            f"Path:'{joined}', Expected: {expected}, "
            f"Received: '{render_received(received)}'"
        )
    return ValidationError(
        path=path, expected=expected, received=received, message=message
    )


def type_of(value: Any) -> Kind:
    """
    Classify a value into one of the kind tags validators check against.

    NaN gets its own tag because it never compares equal to itself.
    """
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    # bool is a subclass of int
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, float) and math.isnan(value):
        return "nan"
    if isinstance(value, Decimal) and value.is_nan():
        return "nan"
    if isinstance(value, (numbers.Real, Decimal)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, datetime.date):
        return "date"
    if isinstance(value, re.Pattern):
        return "regexp"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, type):
        return "unknown"
    if callable(value):
        return "function"
    return "unknown"


def describe(validator: Validator) -> str:
    """Identifying name of a validator, used inside composite descriptions."""
    return getattr(validator, "__name__", None) or repr(validator)


def named(name: str) -> Callable[[F], F]:
    """Decorator giving a generated validator a readable name."""

    def decorator(fn: F) -> F:
        fn.__name__ = name
        fn.__qualname__ = name
        return fn

    return decorator


def ensure_validators(*validators: Any) -> None:
    """Raise TypeError unless every argument can be called as a validator."""
    for v in validators:
        if isinstance(v, type):
            raise TypeError(
                f"Cannot use class {v.__name__} as a validator, use like({v.__name__})"
            )
        if not callable(v):
            raise TypeError(f"Validator must be callable, got {type(v).__name__}")


def run(validator: Validator, value: Any, path: Path) -> ValidationError | None:
    """
    Invoke a child validator.

    Exceptions propagate unless validation_context(catch_exceptions=True) is
    active, in which case they become a ValidationError at `path`.
    """
    if not catches_exceptions():
        return validator(value, path)

    try:
        return validator(value, path)
    except Exception as e:
        name = describe(validator)
        logger.debug("Validator %s raised at path %r", name, path, exc_info=True)
        joined = ".".join(str(key) for key in path)
        return error(
            path,
            f"{name} without raising",
            value,
            f"Path:'{joined}', Validation error: {e}",
        )
