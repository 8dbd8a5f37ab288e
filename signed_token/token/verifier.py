"""Token verification with the caller-side expiry check."""

from __future__ import annotations

import logging
import os
from datetime import datetime, timedelta

from ..utils.time import require_aware, utc_now
from .codec import DEFAULT_CODEC, SecretKey, TokenCodec, coerce_secret_key
from .types import VerificationResult

logger = logging.getLogger(__name__)


class TokenVerifier:
    """Verify signed tokens presented on incoming requests."""

    def __init__(
        self,
        *,
        secret_key: SecretKey | None = None,
        leeway_ms: int = 0,
        max_lifetime_ms: int | None = None,
        codec: TokenCodec = DEFAULT_CODEC,
    ) -> None:
        if secret_key is None:
            secret_key = os.getenv("SIGNED_TOKEN_SECRET", "dev-secret")
        self._secret = coerce_secret_key(secret_key)
        self.leeway_ms = leeway_ms
        self.max_lifetime_ms = max_lifetime_ms
        self.codec = codec

    def verify(self, token: str, *, now: datetime | None = None) -> VerificationResult:
        now = utc_now() if now is None else require_aware(now, "now")
        if not isinstance(token, str):
            return VerificationResult(False, "invalid_token")

        decoded = self.codec.decode(token, self._secret)
        if decoded is None:
            return VerificationResult(False, "invalid_token")

        if decoded.is_expired(now - timedelta(milliseconds=self.leeway_ms)):
            logger.debug("Rejected token: expired at %s", decoded.expiration.isoformat())
            return VerificationResult(False, "token_expired", token=decoded)

        if self.max_lifetime_ms is not None and decoded.expiration > now + timedelta(milliseconds=self.max_lifetime_ms):
            logger.debug("Rejected token: expiration %s exceeds max lifetime", decoded.expiration.isoformat())
            return VerificationResult(False, "expiration_too_far", token=decoded)

        return VerificationResult(True, "ok", token=decoded)
