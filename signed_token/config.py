"""Process-wide configuration for token issuance and verification."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from .errors import InvalidArgumentError
from .token.codec import coerce_secret_key
from .token.issuer import DEFAULT_TTL_MS, TokenIssuer
from .token.verifier import TokenVerifier


def _env_int(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise InvalidArgumentError(f"{name} must be an integer, got {raw!r}") from exc


@dataclass(frozen=True)
class TokenConfig:
    """Secret key and lifetime settings shared by issuer and verifier."""

    secret_key: bytes = field(repr=False)
    ttl_ms: int = DEFAULT_TTL_MS
    leeway_ms: int = 0
    max_lifetime_ms: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "secret_key", coerce_secret_key(self.secret_key))
        if self.ttl_ms <= 0:
            raise InvalidArgumentError("ttl_ms must be positive")
        if self.leeway_ms < 0:
            raise InvalidArgumentError("leeway_ms must not be negative")
        if self.max_lifetime_ms is not None and self.max_lifetime_ms <= 0:
            raise InvalidArgumentError("max_lifetime_ms must be positive")

    @classmethod
    def from_env(cls) -> "TokenConfig":
        """Build configuration from ``SIGNED_TOKEN_*`` environment variables."""
        return cls(
            secret_key=os.getenv("SIGNED_TOKEN_SECRET", "dev-secret"),
            ttl_ms=_env_int("SIGNED_TOKEN_TTL_MS", DEFAULT_TTL_MS),
            leeway_ms=_env_int("SIGNED_TOKEN_LEEWAY_MS", 0),
            max_lifetime_ms=_env_int("SIGNED_TOKEN_MAX_LIFETIME_MS", None),
        )

    def issuer(self) -> TokenIssuer:
        return TokenIssuer(secret_key=self.secret_key, ttl_ms=self.ttl_ms)

    def verifier(self) -> TokenVerifier:
        return TokenVerifier(
            secret_key=self.secret_key,
            leeway_ms=self.leeway_ms,
            max_lifetime_ms=self.max_lifetime_ms,
        )
