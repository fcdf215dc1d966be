"""
Small string and list helpers shared by the auth client.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any, Iterable

__all__ = [
    "is_empty",
    "starts_with",
    "ends_with",
    "trim_array_entries",
    "remove_empty_strings_from_array",
    "json_parse_helper",
]

logger = logging.getLogger(__name__)


def is_empty(value) -> bool:
    """Check whether *value* is ``None`` or renders as a zero-length string."""
    if value is None:
        return True
    if isinstance(value, (Sequence, bytes, bytearray)):
        return len(value) == 0
    try:
        return str(value) == ""
    except Exception as e:
        logger.debug("Could not render %s as text: %s", type(value).__name__, e)
        return False


def starts_with(text: str, search: str) -> bool:
    """Check whether *text* begins with *search*."""
    return text.startswith(search)


def ends_with(text: str, search: str) -> bool:
    """Check whether *text* ends with *search*."""
    return len(text) >= len(search) and text.endswith(search)


def trim_array_entries(entries: Iterable[str]) -> list[str]:
    """Return a new list with surrounding whitespace stripped from each entry."""
    return [entry.strip() for entry in entries]


def remove_empty_strings_from_array(entries: Iterable[Any]) -> list[Any]:
    """Return a new list without the entries :func:`is_empty` rejects.

    Whitespace-only strings are kept; trim first if they should go too.
    """
    return [entry for entry in entries if not is_empty(entry)]


def _reject_constant(name: str) -> None:
    """Reject NaN and Infinity, which are not valid JSON."""
    raise ValueError(f"Invalid JSON constant: {name}")


def json_parse_helper(text: str | bytes | None) -> Any | None:
    """Parse *text* as JSON, returning ``None`` if it cannot be parsed.

    A literal JSON ``null`` also comes back as ``None``; callers treat
    both as unusable.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (ValueError, TypeError, RecursionError) as e:
        logger.debug("Could not parse JSON: %s", e)
        return None
