"""
Query-string parsing for values returned to the auth client.

Producers double-encode some values, so every key and value is
percent-decoded twice after ``+`` is turned into a space.
"""

from __future__ import annotations

import re
from urllib.parse import unquote_to_bytes

from .errors import QueryStringDecodeError

__all__ = ["query_string_to_object"]

# key=value pair; keys may not contain '&' or '=', values may be empty.
_PAIR_RE = re.compile(r"([^&=]+)=([^&]*)")

# A '%' not followed by two hex digits.
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _percent_decode(text: str) -> str:
    """Strict URI-component decode: bad escapes and non-UTF-8 bytes are errors."""
    bad = _BAD_ESCAPE_RE.search(text)
    if bad:
        raise QueryStringDecodeError(
            f"Invalid percent-escape at position {bad.start()} in {text!r}"
        )
    try:
        return unquote_to_bytes(text).decode("utf-8")
    except UnicodeError as e:
        raise QueryStringDecodeError(
            f"Percent-escapes in {text!r} do not decode to UTF-8: {e}"
        ) from e


def _decode_component(text: str) -> str:
    """Turn '+' into a space, then percent-decode twice."""
    return _percent_decode(_percent_decode(text.replace("+", " ")))


def query_string_to_object(query: str) -> dict[str, str]:
    """
    Parse ``key=value&key=value`` into a dict.

    Pairs without ``=`` are skipped and a leading ``?`` is kept as part of
    the first key. Later duplicates overwrite earlier ones.

    Raises:
        QueryStringDecodeError: If a key or value has a malformed escape.
    """
    result: dict[str, str] = {}
    for match in _PAIR_RE.finditer(query):
        key, value = match.groups()
        result[_decode_component(key)] = _decode_component(value)
    return result
