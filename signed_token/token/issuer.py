"""Token issuer used after a successful credential check."""

from __future__ import annotations

import os
from datetime import datetime, timedelta
from typing import Any

from ..utils.time import require_aware, truncate_to_ms, utc_now
from .codec import DEFAULT_CODEC, SecretKey, TokenCodec, coerce_secret_key
from .types import IssuedToken

DEFAULT_TTL_MS = 3_600_000


class TokenIssuer:
    """Mint signed tokens that expire ``ttl_ms`` after issuance."""

    def __init__(
        self,
        *,
        secret_key: SecretKey | None = None,
        ttl_ms: int = DEFAULT_TTL_MS,
        codec: TokenCodec = DEFAULT_CODEC,
    ) -> None:
        if secret_key is None:
            secret_key = os.getenv("SIGNED_TOKEN_SECRET", "dev-secret")
        self._secret = coerce_secret_key(secret_key)
        self.ttl_ms = ttl_ms
        self.codec = codec

    def issue(self, subject_id: Any, *, now: datetime | None = None) -> IssuedToken:
        now = utc_now() if now is None else require_aware(now, "now")
        expiration = truncate_to_ms(now + timedelta(milliseconds=self.ttl_ms))
        token = self.codec.encode(subject_id, expiration, self._secret)
        return IssuedToken(token=token, subject_id=str(subject_id), expiration=expiration, ttl_ms=self.ttl_ms)
