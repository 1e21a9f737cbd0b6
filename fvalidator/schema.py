"""
Schema-by-example for fvalidator.

Provides like() and validate() functions.
"""

from __future__ import annotations

from typing import Any

from .core import run, type_of
from .types import UNDEFINED, ValidationError, Validator
from .validators import (
    array,
    array_of,
    boolean,
    date,
    empty,
    instance_of,
    is_,
    is_null,
    number,
    object_,
    object_of,
    regexp,
    string,
)

_CLASS_VALIDATORS: dict[type, Validator] = {
    str: string,
    bool: boolean,
    int: number,
    float: number,
    dict: object_,
    list: array,
    tuple: array,
    type(None): is_null,
}


def like(reference: Any) -> Validator:
    """
    Derive a validator from an example value.

    Conversion rules:
        class -> kind check for builtins (str -> string, ...), else instance_of
        callable -> used as-is, so validators can sit inside the example
        number/str/bool/date/pattern -> kind check, the value itself is ignored
        None/UNDEFINED -> empty
        mapping -> object_of with each value converted recursively
        list/tuple -> array_of(like(reference[0])); bare array if empty
        anything else -> is_(reference)

    Usage:
        user = like({"name": "Ada", "age": 36, "tags": ["x"], "id": is_(7)})
        user({"name": "Bob", "age": 41, "tags": [], "id": 7})  # None
    """
    if isinstance(reference, type):
        return _CLASS_VALIDATORS.get(reference) or instance_of(reference)

    match type_of(reference):
        case "function":
            return reference
        case "number" | "nan":
            return number
        case "string":
            return string
        case "boolean":
            return boolean
        case "date":
            return date
        case "regexp":
            return regexp
        case "null" | "undefined":
            return empty
        case "object":
            return object_of({key: like(value) for key, value in reference.items()})
        case "array":
            if len(reference) == 0 or reference[0] is None or reference[0] is UNDEFINED:
                return array
            return array_of(like(reference[0]))

    return is_(reference)


def validate(value: Any, schema: Any) -> ValidationError | None:
    """
    Validate a value against a validator or an example document.

    Args:
        value: The value to check
        schema: A validator, or an example passed through like()

    Returns:
        None if validation passes
        ValidationError for the first mismatch otherwise

    Usage:
        schema = {
            "name": str,
            "email": optional(string),
            "age": int,
        }
        err = validate({"name": "Alice", "age": 30}, schema)  # None
    """
    return run(like(schema), value, ())
