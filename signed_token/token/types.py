"""Signed token datatypes."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from ..errors import InvalidArgumentError
from ..utils.time import from_epoch_ms, require_aware, to_epoch_ms, truncate_to_ms, utc_now


@dataclass(frozen=True)
class Token:
    """Subject identifier bound to a millisecond-precision expiration instant.

    The subject is kept in its ``str()`` form, which is what travels on the wire.
    """

    subject_id: str
    expiration: datetime

    def __post_init__(self) -> None:
        if self.subject_id is None:
            raise InvalidArgumentError("subject_id is required")
        if not isinstance(self.expiration, datetime):
            raise InvalidArgumentError("expiration must be a timezone-aware datetime")
        require_aware(self.expiration, "expiration")
        object.__setattr__(self, "subject_id", str(self.subject_id))
        object.__setattr__(self, "expiration", truncate_to_ms(self.expiration))

    @classmethod
    def from_epoch_ms(cls, subject_id: Any, expiration_ms: int) -> "Token":
        return cls(subject_id=subject_id, expiration=from_epoch_ms(expiration_ms))

    @property
    def expiration_ms(self) -> int:
        return to_epoch_ms(self.expiration)

    def is_expired(self, now: datetime | None = None) -> bool:
        """Return True once ``now`` has reached the expiration instant."""
        now = utc_now() if now is None else require_aware(now, "now")
        return now >= self.expiration

    def encode(self, secret_key: bytes | str) -> str:
        """Serialize this token to its signed wire form."""
        from .codec import DEFAULT_CODEC

        return DEFAULT_CODEC.encode(self.subject_id, self.expiration, secret_key)


@dataclass(frozen=True)
class IssuedToken:
    token: str
    subject_id: str
    expiration: datetime
    ttl_ms: int


@dataclass(frozen=True)
class VerificationResult:
    valid: bool
    reason: str
    token: Token | None = None
