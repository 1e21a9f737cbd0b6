"""
Deep structural equality used by `is_` and `one_of`.
"""

from collections.abc import Iterable, Sequence
from typing import Any, Hashable

from ..core import type_of
from ..types import UNDEFINED
from .rendering import to_json_text

# Kinds whose == is trusted as-is; containers are compared key by key
_SCALARS = frozenset(
    ["string", "number", "boolean", "date", "regexp", "null", "function", "unknown"]
)
_CONTAINERS = frozenset(["object", "array"])


def union_keys(a: Iterable[Hashable], b: Iterable[Hashable]) -> list[Hashable]:
    """Keys of both iterables, each once, in first-seen order."""
    keys = dict.fromkeys(a)
    keys.update(dict.fromkeys(b))
    return list(keys)


def _at(items: Sequence[Any], index: int) -> Any:
    return items[index] if index < len(items) else UNDEFINED


def deep_equal(a: Any, b: Any) -> bool:
    """
    Check two values for structural equality.

    Equal when any of these holds, tried in order:
        1. identical, or scalars of the same kind that compare ==
        2. identical compact JSON text, for non-containers of the same kind
        3. both mappings (or both arrays) whose keys (or indices) all hold
           deep-equal values, a missing entry reading as UNDEFINED

    Kinds must match at step 1, so True and 1 are not equal while 1 and 1.0
    are.
    """
    if a is b:
        return True

    kind_a, kind_b = type_of(a), type_of(b)
    if kind_a == kind_b and kind_a in _SCALARS and a == b:
        return True

    # Decimal, Enum and UUID values render as JSON strings, so text only
    # decides between non-container values of one kind
    if kind_a == kind_b and kind_a not in _CONTAINERS:
        text_a = to_json_text(a)
        if text_a is not None and text_a == to_json_text(b):
            return True

    if kind_a != kind_b:
        return False

    if kind_a == "object":
        return all(
            deep_equal(a.get(key, UNDEFINED), b.get(key, UNDEFINED))
            for key in union_keys(a, b)
        )

    if kind_a == "array":
        return all(
            deep_equal(_at(a, i), _at(b, i)) for i in range(max(len(a), len(b)))
        )

    return False
