"""Example login and request authorization flow using signed tokens."""

from __future__ import annotations

import logging
import uuid

from signed_token import TokenConfig

ACCOUNTS = {
    "admin@example.com": {"account_id": uuid.UUID("11111111-1111-1111-1111-111111111111"), "password": "fake-password"},
}


def authenticate(config: TokenConfig, email_address: str, password: str) -> dict:
    account = ACCOUNTS.get(email_address)
    if account is None or account["password"] != password:
        return {"status": 401}
    issued = config.issuer().issue(account["account_id"])
    return {"status": 200, "token": issued.token, "expires_at": issued.expiration.isoformat()}


def authorize(config: TokenConfig, authorization_header: str | None) -> dict:
    if not authorization_header or not authorization_header.startswith("Bearer "):
        return {"status": 401}
    result = config.verifier().verify(authorization_header[len("Bearer "):])
    if not result.valid:
        return {"status": 401, "reason": result.reason}
    return {"status": 200, "account_id": str(result.token.subject_id)}


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)
    config = TokenConfig.from_env()

    login = authenticate(config, "admin@example.com", "fake-password")
    print("LOGIN:", login)
    print("AUTHORIZED:", authorize(config, f"Bearer {login['token']}"))
    print("TAMPERED:", authorize(config, f"Bearer {login['token']}x"))
    print("BAD LOGIN:", authenticate(config, "fake@example.com", "fake-password"))


if __name__ == "__main__":
    main()
