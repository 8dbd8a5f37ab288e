"""HS256 compact token encoding and verification."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import Any, Callable

from ..errors import InvalidArgumentError, MalformedTokenError, SignatureMismatchError
from ..utils.encoding import b64url_decode, b64url_encode
from ..utils.hashing import hmac_sha256, signatures_match
from ..utils.minijson import dump_object, load_object
from ..utils.time import from_epoch_ms, require_aware, to_epoch_ms
from .types import Token

logger = logging.getLogger(__name__)

HEADER = {"alg": "HS256", "typ": "JWT"}

SubjectParser = Callable[[str], Any]
SecretKey = bytes | str


def uuid_subject(value: str) -> str:
    """Accept UUID-formatted subjects, returning the text unchanged."""
    uuid.UUID(value)
    return value


def coerce_secret_key(secret_key: SecretKey | None) -> bytes:
    """Return the key as bytes, encoding ``str`` keys as UTF-8."""
    if secret_key is None:
        raise InvalidArgumentError("secret_key is required")
    if isinstance(secret_key, str):
        secret_key = secret_key.encode("utf-8")
    elif isinstance(secret_key, (bytearray, memoryview)):
        secret_key = bytes(secret_key)
    elif not isinstance(secret_key, bytes):
        raise InvalidArgumentError(f"secret_key must be bytes or str, got {type(secret_key).__name__}")
    if not secret_key:
        raise InvalidArgumentError("secret_key must not be empty")
    return secret_key


def _expiration_ms(expiration: datetime | int | None) -> int:
    if expiration is None:
        raise InvalidArgumentError("expiration is required")
    if isinstance(expiration, datetime):
        return to_epoch_ms(require_aware(expiration, "expiration"))
    if isinstance(expiration, int) and not isinstance(expiration, bool):
        return expiration
    raise InvalidArgumentError(f"expiration must be a datetime or epoch milliseconds, got {type(expiration).__name__}")


class TokenCodec:
    """Encode and verify ``header.payload.signature`` tokens signed with HMAC-SHA256.

    Subjects travel as their ``str()`` form. ``subject_parser`` validates that
    text on both sides and returns the subject stored on the decoded token;
    it signals rejection with ``ValueError`` or ``TypeError``.

    The codec holds no key material and no mutable state; one instance can be
    shared across threads.
    """

    def __init__(self, *, subject_parser: SubjectParser = uuid_subject) -> None:
        self.subject_parser = subject_parser

    def encode(self, subject_id: Any, expiration: datetime | int, secret_key: SecretKey) -> str:
        if subject_id is None:
            raise InvalidArgumentError("subject_id is required")
        sub = str(subject_id)
        try:
            self.subject_parser(sub)
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(f"subject_id {sub!r} is not a valid subject identifier") from exc
        iat = _expiration_ms(expiration)
        key = coerce_secret_key(secret_key)

        encoded_header = b64url_encode(dump_object(HEADER).encode("utf-8"))
        payload = dump_object({"sub": sub, "iat": iat})
        encoded_payload = b64url_encode(payload.encode("utf-8"))
        signing_input = f"{encoded_header}.{encoded_payload}"
        signature = hmac_sha256(key, signing_input)
        return f"{signing_input}.{b64url_encode(signature)}"

    def decode(self, token: str, secret_key: SecretKey) -> Token | None:
        """Return the verified token, or ``None`` if it is invalid for any reason."""
        try:
            return self.decode_or_raise(token, secret_key)
        except (MalformedTokenError, SignatureMismatchError) as exc:
            logger.debug("Rejected token: %s", exc)
            return None

    def decode_or_raise(self, token: str, secret_key: SecretKey) -> Token:
        """Like :meth:`decode` but raises the specific rejection error."""
        if token is None:
            raise InvalidArgumentError("token is required")
        if not isinstance(token, str):
            raise InvalidArgumentError(f"token must be str, got {type(token).__name__}")
        key = coerce_secret_key(secret_key)

        components = token.strip().split(".")
        if len(components) != 3 or not all(components):
            raise MalformedTokenError("token must have three non-empty segments")
        encoded_header, encoded_payload, encoded_signature = components

        try:
            payload_text = b64url_decode(encoded_payload).decode("utf-8")
        except ValueError as exc:
            raise MalformedTokenError(f"payload segment is not valid base64url text: {exc}") from exc
        try:
            signature = b64url_decode(encoded_signature)
        except ValueError as exc:
            raise MalformedTokenError(f"signature segment is not valid base64url: {exc}") from exc

        expected = hmac_sha256(key, f"{encoded_header}.{encoded_payload}")
        if not signatures_match(expected, signature):
            raise SignatureMismatchError("signature does not match")

        return self._token_from_payload(payload_text)

    def _token_from_payload(self, payload_text: str) -> Token:
        try:
            claims = load_object(payload_text)
        except ValueError as exc:
            raise MalformedTokenError(f"payload is not a JSON object: {exc}") from exc

        sub = claims.get("sub")
        iat = claims.get("iat")
        if not isinstance(sub, str):
            raise MalformedTokenError("payload field 'sub' must be a string")
        if not isinstance(iat, (int, float)) or isinstance(iat, bool):
            raise MalformedTokenError("payload field 'iat' must be a number")

        try:
            subject_id = self.subject_parser(sub)
        except (TypeError, ValueError) as exc:
            raise MalformedTokenError("payload field 'sub' is not a valid subject identifier") from exc

        try:
            expiration = from_epoch_ms(int(iat))
        except (OverflowError, ValueError) as exc:
            raise MalformedTokenError("payload field 'iat' is out of range") from exc

        try:
            return Token(subject_id=subject_id, expiration=expiration)
        except InvalidArgumentError as exc:
            raise MalformedTokenError(f"payload does not form a token: {exc}") from exc


DEFAULT_CODEC = TokenCodec()


def encode(subject_id: Any, expiration: datetime | int, secret_key: SecretKey) -> str:
    """Encode with the shared default codec."""
    return DEFAULT_CODEC.encode(subject_id, expiration, secret_key)


def decode(token: str, secret_key: SecretKey) -> Token | None:
    """Decode with the shared default codec."""
    return DEFAULT_CODEC.decode(token, secret_key)
