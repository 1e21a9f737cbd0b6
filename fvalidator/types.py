"""
Type definitions for fvalidator.

Provides the validator contract, the error record and the UNDEFINED sentinel.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Protocol

# Type aliases
Path = tuple[str | int, ...]
Kind = Literal[
    "string",
    "number",
    "boolean",
    "object",
    "array",
    "date",
    "regexp",
    "null",
    "undefined",
    "nan",
    "function",
    "unknown",
]


class _Undefined:
    """
    Marker for a value that is absent rather than None.

    `object_of` hands UNDEFINED to a field validator when the key is missing,
    so `is_null` and `is_undefined` can tell {"a": None} apart from {}.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        # copy/pickle hand back the module-level singleton
        return "UNDEFINED"


UNDEFINED = _Undefined()


@dataclass(frozen=True, slots=True)
class ValidationError:
    """
    The first mismatch found by a validator.

    Attributes:
        path: Keys/indices leading to the offending value
        expected: Description of what was expected, possibly nested
            (e.g. "or(null or undefined, string)")
        received: The offending value itself (not a copy)
        message: Human-readable summary built from the fields above
    """

    path: Path
    expected: str
    received: Any
    message: str

    def __str__(self) -> str:
        return self.message


class Validator(Protocol):
    """
    Anything callable as `validator(value, path=())`.

    Returns None when the value passes, a ValidationError otherwise.
    """

    def __call__(self, value: Any, path: Path = ()) -> ValidationError | None: ...
