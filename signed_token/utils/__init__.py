"""Utility helpers for encoding, signing and time operations."""

from .encoding import b64url_decode, b64url_encode
from .hashing import hmac_sha256, signatures_match
from .minijson import dump_object, load_object
from .time import from_epoch_ms, require_aware, to_epoch_ms, truncate_to_ms, utc_now

__all__ = [
    "b64url_encode",
    "b64url_decode",
    "hmac_sha256",
    "signatures_match",
    "dump_object",
    "load_object",
    "utc_now",
    "to_epoch_ms",
    "from_epoch_ms",
    "truncate_to_ms",
    "require_aware",
]
