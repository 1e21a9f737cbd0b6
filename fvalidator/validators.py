"""
Built-in validators for fvalidator.

Primitive kind checks are ready-made validators; everything else is a
factory returning a new validator.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from typing import Any

from .core import describe, ensure_validators, error, named, run, type_of
from .lib.equality import deep_equal
from .lib.rendering import render
from .types import UNDEFINED, Path, ValidationError, Validator


def _kind(expected: str, *kinds: str) -> Validator:
    """Validator passing iff type_of(value) is one of `kinds`."""
    accepted = frozenset(kinds or (expected,))

    @named(expected)
    def validator(value: Any, path: Path = ()) -> ValidationError | None:
        if type_of(value) in accepted:
            return None
        return error(path, expected, value)

    return validator


# Primitive validators
string = _kind("string")
number = _kind("number", "number", "nan")
boolean = _kind("boolean")
object_ = _kind("object")
array = _kind("array")
date = _kind("date")
regexp = _kind("regexp")
is_null = _kind("null")
is_undefined = _kind("undefined")


def empty(value: Any, path: Path = ()) -> ValidationError | None:
    """Pass for None or UNDEFINED."""
    if value is None or value is UNDEFINED:
        return None
    return error(path, "null or undefined", value)


# Logical combinators


@named("any")
def any_(value: Any, path: Path = ()) -> ValidationError | None:
    """Pass for everything."""
    return None


def not_(v: Validator) -> Validator:
    """
    Invert a validator.

    Usage:
        not_(array)     # anything but a list/tuple
    """
    ensure_validators(v)
    expected = f"not({describe(v)})"

    @named(expected)
    def validator(value: Any, path: Path = ()) -> ValidationError | None:
        if run(v, value, path) is None:
            return error(path, expected, value)
        return None

    return validator


def and_(*vs: Validator) -> Validator:
    """
    All validators must pass; the first failure is returned.

    Usage:
        and_(string, regex(r"^\\d+$"))
    """
    ensure_validators(*vs)

    @named(f"and({', '.join(describe(v) for v in vs)})")
    def validator(value: Any, path: Path = ()) -> ValidationError | None:
        for v in vs:
            err = run(v, value, path)
            if err is not None:
                return err
        return None

    return validator


def or_(*vs: Validator) -> Validator:
    """
    At least one validator must pass, tried in order.

    On failure the expectations of every operand are combined, e.g.
    or_(string, number)([]) expects "or(string, number)".
    """
    ensure_validators(*vs)

    @named(f"or({', '.join(describe(v) for v in vs)})")
    def validator(value: Any, path: Path = ()) -> ValidationError | None:
        errors: list[ValidationError] = []
        for v in vs:
            err = run(v, value, path)
            if err is None:
                return None
            errors.append(err)
        return error(path, f"or({', '.join(e.expected for e in errors)})", value)

    return validator


def optional(v: Validator) -> Validator:
    """Allow None/UNDEFINED, validate otherwise."""
    return named(f"optional({describe(v)})")(or_(empty, v))


# Equality combinators


def is_(reference: Any) -> Validator:
    """
    Validate deep equality with a fixed reference.

    Usage:
        is_("active")
        is_({"kind": "user", "tags": []})
    """
    expected = f"is({render(reference)})"

    @named(expected)
    def validator(value: Any, path: Path = ()) -> ValidationError | None:
        if deep_equal(value, reference):
            return None
        return error(path, expected, value)

    return validator


def one_of(*references: Any) -> Validator:
    """Validate deep equality with any of the references."""
    return named(f"one_of({', '.join(render(r) for r in references)})")(
        or_(*(is_(r) for r in references))
    )


# Structural combinators


def _field(key: str, v: Validator) -> Validator:
    @named(f"{key}: {describe(v)}")
    def validator(value: Mapping, path: Path = ()) -> ValidationError | None:
        return run(v, value.get(key, UNDEFINED), (*path, key))

    return validator


def object_of(schema: Mapping[str, Validator]) -> Validator:
    """
    Validate a mapping field by field.

    Fields are checked in schema order and the first failure wins. Keys
    missing from the value are passed on as UNDEFINED; keys not named in the
    schema are ignored.

    Usage:
        object_of({
            "name": string,
            "email": optional(regex(r"@")),
            "address": object_of({"city": string}),
        })
    """
    if not isinstance(schema, Mapping):
        raise TypeError(f"Schema must be a mapping, got {type(schema).__name__}")
    ensure_validators(*schema.values())

    fields = [_field(key, v) for key, v in schema.items()]
    return named(f"object_of({{{', '.join(describe(f) for f in fields)}}})")(
        and_(object_, *fields)
    )


def array_of(v: Validator) -> Validator:
    """Validate a list/tuple and each of its items, in index order."""
    ensure_validators(v)

    @named(f"array_of({describe(v)})")
    def validator(value: Any, path: Path = ()) -> ValidationError | None:
        err = array(value, path)
        if err is not None:
            return err
        for i, item in enumerate(value):
            err = run(v, item, (*path, i))
            if err is not None:
                return err
        return None

    return validator


# Other commonly used validators

_REGEX_FLAGS = (
    (re.IGNORECASE, "i"),
    (re.MULTILINE, "m"),
    (re.DOTALL, "s"),
    (re.VERBOSE, "x"),
)


def regex(pattern: str | re.Pattern[str]) -> Validator:
    """
    Validate a string containing a match for `pattern` (re.search semantics).

    Usage:
        regex(r"^[a-z]+$")
        regex(re.compile(r"\\d{3}-\\d{4}"))
    """
    if isinstance(pattern, str):
        compiled = re.compile(pattern)
    elif isinstance(pattern, re.Pattern) and isinstance(pattern.pattern, str):
        compiled = pattern
    else:
        raise TypeError(f"Pattern must be a str or str pattern, got {pattern!r}")

    flags = "".join(
        letter for flag, letter in _REGEX_FLAGS if compiled.flags & flag
    )
    expected = f"match regex(/{compiled.pattern}/{flags})"

    @named(expected)
    def validator(value: Any, path: Path = ()) -> ValidationError | None:
        if isinstance(value, str) and compiled.search(value) is not None:
            return None
        return error(path, expected, value)

    return validator


def json_string(v: Validator) -> Validator:
    """
    Parse a JSON document from text and validate the result.

    Usage:
        json_string(object_of({"id": number}))('{"id": 42}')
    """
    ensure_validators(v)
    expected = f"json string of ({describe(v)})"

    @named(expected)
    def validator(value: Any, path: Path = ()) -> ValidationError | None:
        if not isinstance(value, (str, bytes, bytearray)):
            return error(path, expected, value)
        try:
            parsed = json.loads(value)
        except ValueError:
            return error(path, expected, value)
        return run(v, parsed, path)

    return validator


def instance_of(cls: type) -> Validator:
    """Validate isinstance(value, cls)."""
    if not isinstance(cls, type):
        raise TypeError(f"Expected a class, got {type(cls).__name__}")

    expected = cls.__name__

    @named(expected)
    def validator(value: Any, path: Path = ()) -> ValidationError | None:
        if isinstance(value, cls):
            return None
        return error(path, expected, value)

    return validator
