"""Signed token encoding, issuance and verification."""

from .codec import DEFAULT_CODEC, TokenCodec, decode, encode
from .issuer import TokenIssuer
from .types import IssuedToken, Token, VerificationResult
from .verifier import TokenVerifier

__all__ = [
    "DEFAULT_CODEC",
    "TokenCodec",
    "encode",
    "decode",
    "Token",
    "TokenIssuer",
    "TokenVerifier",
    "IssuedToken",
    "VerificationResult",
]
