"""Strict base64url helpers without padding."""

from __future__ import annotations

import base64
import re

_ALPHABET_RE = re.compile(r"[A-Za-z0-9_-]*")


def b64url_encode(raw: bytes) -> str:
    """Encode bytes as base64url with the trailing ``=`` padding removed."""
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def b64url_decode(value: str) -> bytes:
    """Decode unpadded base64url, rejecting anything that is not canonical.

    Raises ``ValueError`` for characters outside the URL-safe alphabet, for
    impossible lengths, and for encodings with non-zero unused trailing bits.
    """
    if _ALPHABET_RE.fullmatch(value) is None:
        raise ValueError("invalid base64url character")
    if len(value) % 4 == 1:
        raise ValueError("invalid base64url length")
    raw = base64.urlsafe_b64decode(value + "=" * (-len(value) % 4))
    if b64url_encode(raw) != value:
        raise ValueError("non-canonical base64url encoding")
    return raw
