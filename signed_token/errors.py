"""Exception hierarchy for token encoding and verification."""

from __future__ import annotations


class TokenError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgumentError(TokenError, ValueError):
    """Caller passed a missing or malformed argument."""


class CryptoUnavailableError(TokenError, RuntimeError):
    """The HMAC-SHA256 signer could not be constructed."""


class MalformedTokenError(TokenError):
    """Token string is not structurally a valid signed token."""


class SignatureMismatchError(TokenError):
    """Token is well formed but its signature does not match."""
