"""
Structural splitting of compact auth tokens.

Splits a token into its header, payload and signature segments and checks
that it is well-formed. The segments are returned still encoded. Neither
base64url decoding nor signature verification is performed here.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass

from .errors import MalformedTokenError, NullOrEmptyTokenError
from .string_utils import is_empty

__all__ = ["DecodedToken", "decode_auth_token"]

# header.payload.signature -- no dots or whitespace inside a segment,
# payload must be non-empty. Used with fullmatch so "\n" at the end is rejected.
_TOKEN_PARTS_RE = re.compile(r"([^.\s]*)\.([^.\s]+)\.([^.\s]*)")


@dataclass(frozen=True)
class DecodedToken:
    """Holds the three raw segments of a compact token."""

    header: str
    payload: str
    signature: str


def decode_auth_token(token: str | None) -> DecodedToken:
    """
    Split a compact token string into its three segments.

    Header and signature may be empty; the payload may not.

    Raises:
        NullOrEmptyTokenError: If the token is ``None`` or empty.
        MalformedTokenError: If the token does not have exactly three
            dot-separated segments free of whitespace.
    """
    if is_empty(token):
        raise NullOrEmptyTokenError(token)

    match = _TOKEN_PARTS_RE.fullmatch(token)
    if not match:
        quoted = json.dumps(token, ensure_ascii=False)
        raise MalformedTokenError(token, f"Given token is malformed: {quoted}")

    header, payload, signature = match.groups()
    return DecodedToken(header=header, payload=payload, signature=signature)
