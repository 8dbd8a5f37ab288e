"""HMAC-SHA256 signing helpers."""

from __future__ import annotations

import hmac
from hashlib import sha256

from ..errors import CryptoUnavailableError


def hmac_sha256(key: bytes, message: str) -> bytes:
    """Return the raw HMAC-SHA256 tag of the UTF-8 encoded message."""
    try:
        mac = hmac.new(key, digestmod=sha256)
    except (TypeError, ValueError) as exc:
        raise CryptoUnavailableError("HMAC-SHA256 signer could not be initialized") from exc
    mac.update(message.encode("utf-8"))
    return mac.digest()


def signatures_match(expected: bytes, actual: bytes) -> bool:
    """Compare two signatures without short-circuiting on the first difference."""
    return hmac.compare_digest(expected, actual)
