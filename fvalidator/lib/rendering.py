"""
Helpers for rendering arbitrary values as JSON text.
"""

import logging
import re
from typing import Any

from pydantic_core import to_json

from ..context import max_received_length
from ..types import UNDEFINED

logger = logging.getLogger(__name__)

PLACEHOLDER = "<unserializable>"


def _fallback(value: Any) -> Any:
    """Stand-in for values pydantic has no serializer for."""
    if value is UNDEFINED:
        return None
    if isinstance(value, re.Pattern):
        return value.pattern
    return str(value)


def to_json_text(value: Any) -> str | None:
    """
    Compact JSON text of a value.

    Returns None for UNDEFINED (which has no JSON form) and for values the
    serializer rejects, e.g. containers that reference themselves.
    """
    if value is UNDEFINED:
        return None
    try:
        return to_json(value, fallback=_fallback).decode()
    except (ValueError, RecursionError) as e:
        logger.debug("Cannot render %s as JSON: %s", type(value).__name__, e)
        return None


def render(value: Any) -> str:
    """JSON text for descriptions, with readable stand-ins when there is none."""
    if value is UNDEFINED:
        return "undefined"
    text = to_json_text(value)
    return PLACEHOLDER if text is None else text


def render_received(value: Any) -> str:
    """Like render(), cut to the configured max_received_length."""
    text = render(value)
    limit = max_received_length()
    if limit is not None and len(text) > limit:
        return f"{text[:limit]}..."
    return text
