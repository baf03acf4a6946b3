from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from notekeeper.application.services.token_issuer import JwtTokenIssuer

TEST_SECRET = "test-signing-key-0123456789abcdef-0123456789"


def test_issue_encodes_identity_claims() -> None:
    issuer = JwtTokenIssuer(secret_key=TEST_SECRET, ttl=timedelta(minutes=5))

    session = issuer.issue(7, "alice12")
    claims = issuer.decode(session.token)

    assert claims["id"] == 7
    assert claims["username"] == "alice12"
    assert claims["exp"] - claims["iat"] == 300
    assert session.account_id == 7
    assert session.expires_at - session.issued_at == timedelta(minutes=5)


def test_token_header_names_algorithm() -> None:
    issuer = JwtTokenIssuer(secret_key=TEST_SECRET, algorithm="HS512")

    token = issuer.issue(1, "alice12").token

    assert jwt.get_unverified_header(token)["alg"] == "HS512"


def test_token_signed_with_other_key_is_rejected() -> None:
    issuer = JwtTokenIssuer(secret_key=TEST_SECRET)
    other = JwtTokenIssuer(secret_key="another-signing-key-0123456789abcdef")

    token = other.issue(1, "alice12").token

    with pytest.raises(jwt.InvalidSignatureError):
        issuer.decode(token)


def test_expired_token_is_rejected() -> None:
    past = datetime(2020, 1, 1, tzinfo=UTC)
    issuer = JwtTokenIssuer(secret_key=TEST_SECRET, ttl=timedelta(minutes=1), clock=lambda: past)

    token = issuer.issue(1, "alice12").token

    with pytest.raises(jwt.ExpiredSignatureError):
        issuer.decode(token)


def test_empty_key_is_refused() -> None:
    with pytest.raises(ValueError):
        JwtTokenIssuer(secret_key="")
