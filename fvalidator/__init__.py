"""
fvalidator - Functional data validation built from composable validators.

Usage:
    from fvalidator import array_of, number, object_of, optional, or_, string

    schema = object_of({
        "a": or_(string, number),
        "b": object_of({"c": optional(string)}),
    })

    err = array_of(schema)([{"a": 5, "b": {"c": 42}}])
    err.path      # (0, "b", "c")
    err.expected  # "or(null or undefined, string)"
"""

from .context import validation_context
from .core import error, type_of
from .schema import like, validate
from .types import UNDEFINED, Path, ValidationError, Validator
from .validators import (
    and_,
    any_,
    array,
    array_of,
    boolean,
    date,
    empty,
    instance_of,
    is_,
    is_null,
    is_undefined,
    json_string,
    not_,
    number,
    object_,
    object_of,
    one_of,
    optional,
    or_,
    regex,
    regexp,
    string,
)

__all__ = [
    # Contract
    "Validator",
    "ValidationError",
    "Path",
    "UNDEFINED",
    "error",
    "type_of",
    # Primitives
    "object_",
    "array",
    "string",
    "number",
    "boolean",
    "date",
    "regexp",
    "is_null",
    "is_undefined",
    "empty",
    "regex",
    # Logical
    "not_",
    "any_",
    "and_",
    "or_",
    "optional",
    # Equality
    "is_",
    "one_of",
    # Structural
    "object_of",
    "array_of",
    # Inference
    "like",
    "validate",
    # Helpers
    "json_string",
    "instance_of",
    # Configuration
    "validation_context",
]
