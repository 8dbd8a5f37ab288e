"""signed-token package.

Compact HS256 signed tokens binding a subject identifier to an expiration
instant, with a dependency-free codec and caller-side issue/verify helpers.
"""

from .config import TokenConfig
from .errors import (
    CryptoUnavailableError,
    InvalidArgumentError,
    MalformedTokenError,
    SignatureMismatchError,
    TokenError,
)
from .token import Token, TokenCodec, TokenIssuer, TokenVerifier, decode, encode

__all__ = [
    "Token",
    "TokenCodec",
    "TokenIssuer",
    "TokenVerifier",
    "TokenConfig",
    "encode",
    "decode",
    "TokenError",
    "InvalidArgumentError",
    "CryptoUnavailableError",
    "MalformedTokenError",
    "SignatureMismatchError",
]
