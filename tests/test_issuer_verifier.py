import uuid
from datetime import datetime, timedelta, timezone

import pytest

from signed_token import InvalidArgumentError, Token, TokenIssuer, TokenVerifier, decode

NOW = datetime(2030, 6, 1, 12, 0, 0, 123_456, tzinfo=timezone.utc)
SUBJECT = uuid.UUID("22222222-2222-2222-2222-222222222222")


def test_issue_sets_expiration_from_ttl() -> None:
    issuer = TokenIssuer(secret_key="unit-secret", ttl_ms=60_000)
    issued = issuer.issue(SUBJECT, now=NOW)

    assert issued.expiration == datetime(2030, 6, 1, 12, 1, 0, 123_000, tzinfo=timezone.utc)
    assert issued.ttl_ms == 60_000
    assert decode(issued.token, b"unit-secret") == Token(SUBJECT, issued.expiration)


def test_verify_accepts_fresh_token() -> None:
    issued = TokenIssuer(secret_key="unit-secret", ttl_ms=60_000).issue(SUBJECT, now=NOW)
    result = TokenVerifier(secret_key="unit-secret").verify(issued.token, now=NOW)

    assert result.valid is True
    assert result.reason == "ok"
    assert result.token is not None
    assert result.token.subject_id == str(SUBJECT)


def test_verify_rejects_expired_token() -> None:
    issued = TokenIssuer(secret_key="unit-secret", ttl_ms=1_000).issue(SUBJECT, now=NOW)
    verifier = TokenVerifier(secret_key="unit-secret")

    result = verifier.verify(issued.token, now=NOW + timedelta(seconds=2))

    assert result.valid is False
    assert result.reason == "token_expired"
    assert result.token is not None


def test_leeway_extends_acceptance_window() -> None:
    issued = TokenIssuer(secret_key="unit-secret", ttl_ms=1_000).issue(SUBJECT, now=NOW)
    verifier = TokenVerifier(secret_key="unit-secret", leeway_ms=5_000)

    assert verifier.verify(issued.token, now=NOW + timedelta(seconds=2)).valid is True
    assert verifier.verify(issued.token, now=NOW + timedelta(seconds=7)).reason == "token_expired"


def test_max_lifetime_rejects_far_future_expiration() -> None:
    issued = TokenIssuer(secret_key="unit-secret", ttl_ms=86_400_000).issue(SUBJECT, now=NOW)
    verifier = TokenVerifier(secret_key="unit-secret", max_lifetime_ms=3_600_000)

    result = verifier.verify(issued.token, now=NOW)

    assert result.valid is False
    assert result.reason == "expiration_too_far"


def test_invalid_tokens_share_one_reason() -> None:
    issued = TokenIssuer(secret_key="unit-secret").issue(SUBJECT, now=NOW)
    verifier = TokenVerifier(secret_key="other-secret")

    reasons = {
        verifier.verify(issued.token, now=NOW).reason,
        verifier.verify("garbage", now=NOW).reason,
        verifier.verify(issued.token + "x", now=NOW).reason,
        verifier.verify(None, now=NOW).reason,  # type: ignore[arg-type]
    }

    assert reasons == {"invalid_token"}


def test_secret_falls_back_to_environment(monkeypatch) -> None:
    monkeypatch.setenv("SIGNED_TOKEN_SECRET", "env-secret")
    issued = TokenIssuer().issue(SUBJECT, now=NOW)

    assert TokenVerifier().verify(issued.token, now=NOW).valid is True
    assert decode(issued.token, b"env-secret") is not None


@pytest.mark.parametrize("secret", [b"", ""])
def test_explicit_empty_secret_is_rejected(monkeypatch, secret) -> None:
    monkeypatch.setenv("SIGNED_TOKEN_SECRET", "env-secret")
    with pytest.raises(InvalidArgumentError):
        TokenIssuer(secret_key=secret)
    with pytest.raises(InvalidArgumentError):
        TokenVerifier(secret_key=secret)


def test_naive_now_is_rejected() -> None:
    naive = datetime(2030, 6, 1, 12, 0, 0)
    issued = TokenIssuer(secret_key="unit-secret").issue(SUBJECT, now=NOW)

    with pytest.raises(InvalidArgumentError):
        TokenIssuer(secret_key="unit-secret").issue(SUBJECT, now=naive)
    with pytest.raises(InvalidArgumentError):
        TokenVerifier(secret_key="unit-secret").verify(issued.token, now=naive)


def test_issued_subject_is_wire_form() -> None:
    issued = TokenIssuer(secret_key="unit-secret").issue(SUBJECT, now=NOW)
    assert issued.subject_id == "22222222-2222-2222-2222-222222222222"
