"""
String helpers for the auth client.

Split into submodules:
  - string_utils: Emptiness, prefix/suffix, list and JSON helpers
  - query: Query-string parsing
  - decoder: Compact token splitting
  - errors: Error types
"""

__version__ = "1.0.0"

from .string_utils import (
    ends_with,
    is_empty,
    json_parse_helper,
    remove_empty_strings_from_array,
    starts_with,
    trim_array_entries,
)
from .query import query_string_to_object
from .decoder import DecodedToken, decode_auth_token
from .errors import (
    MalformedTokenError,
    NullOrEmptyTokenError,
    QueryStringDecodeError,
    TokenError,
)

__all__ = [
    "DecodedToken",
    "MalformedTokenError",
    "NullOrEmptyTokenError",
    "QueryStringDecodeError",
    "TokenError",
    "decode_auth_token",
    "ends_with",
    "is_empty",
    "json_parse_helper",
    "query_string_to_object",
    "remove_empty_strings_from_array",
    "starts_with",
    "trim_array_entries",
]
