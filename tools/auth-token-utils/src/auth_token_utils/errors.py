"""
Error types raised by the token and query-string helpers.

Token errors carry a stable ``error_code`` alongside a human-readable
message so callers in the auth client can branch on the code without
parsing text.
"""

from __future__ import annotations

__all__ = [
    "TokenError",
    "NullOrEmptyTokenError",
    "MalformedTokenError",
    "QueryStringDecodeError",
]


class TokenError(Exception):
    """Base class for failures while splitting a compact token."""

    error_code = "token_error"
    description = "Error occurred while handling token."

    def __init__(self, token, detail: str) -> None:
        self.token = token
        self.error_message = f"{self.description} {detail}"
        super().__init__(f"{self.error_code}: {self.error_message}")


class NullOrEmptyTokenError(TokenError):
    """Raised when the token is ``None`` or an empty string."""

    error_code = "null_or_empty_token"
    description = (
        "The token is null or empty. "
        "Please review the trace to determine the root cause."
    )

    def __init__(self, token) -> None:
        super().__init__(token, f"Raw Token Value: {token}")


class MalformedTokenError(TokenError):
    """Raised when the token is not of the form ``header.payload.signature``."""

    error_code = "token_parsing_error"
    description = "Error occurred while parsing token."

    def __init__(self, token, reason: str) -> None:
        super().__init__(token, f"Failed with error: {reason}")


class QueryStringDecodeError(ValueError):
    """Raised when a query-string component has an invalid percent-escape."""
