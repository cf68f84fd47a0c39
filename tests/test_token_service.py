"""Tests for bearer token issuing and verification."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import jwt
import pytest

from photosphere.domain.errors import InvalidTokenError
from photosphere.domain.models import UserRecord
from photosphere.services.tokens import TokenService
from tests.conftest import TEST_SECRET


def _user(role: str = "creator") -> UserRecord:
    return UserRecord(
        id=uuid4(), name="alice", email="a@x.com", role=role, password_hash="hash"
    )


def test_issue_and_verify_round_trip(token_service: TokenService) -> None:
    user = _user()

    identity = token_service.verify(token_service.issue(user))

    assert identity.user_id == user.id
    assert identity.name == "alice"
    assert identity.role == "creator"


def test_issued_token_expires_after_ttl() -> None:
    service = TokenService(secret=TEST_SECRET, ttl_minutes=120)

    payload = jwt.decode(service.issue(_user()), TEST_SECRET, algorithms=["HS256"])

    assert payload["exp"] - payload["iat"] == 120 * 60


def test_verify_rejects_wrong_signature(token_service: TokenService) -> None:
    other = TokenService(secret="another-secret-with-at-least-32-bytes")

    with pytest.raises(InvalidTokenError):
        token_service.verify(other.issue(_user()))


def test_verify_rejects_expired_token(token_service: TokenService) -> None:
    past = datetime.now(tz=UTC) - timedelta(hours=3)
    token = jwt.encode(
        {
            "sub": str(uuid4()),
            "name": "alice",
            "role": "creator",
            "iat": int(past.timestamp()),
            "exp": int((past + timedelta(hours=2)).timestamp()),
        },
        TEST_SECRET,
        algorithm="HS256",
    )

    with pytest.raises(InvalidTokenError, match="expired"):
        token_service.verify(token)


def test_verify_rejects_token_without_expiry(token_service: TokenService) -> None:
    token = jwt.encode(
        {"sub": str(uuid4()), "name": "alice", "role": "creator", "iat": 0},
        TEST_SECRET,
        algorithm="HS256",
    )

    with pytest.raises(InvalidTokenError):
        token_service.verify(token)


@pytest.mark.parametrize("token", ["", "not-a-jwt", "a.b.c"])
def test_verify_rejects_malformed_tokens(token_service: TokenService, token) -> None:
    with pytest.raises(InvalidTokenError):
        token_service.verify(token)


def test_blank_secret_is_rejected() -> None:
    with pytest.raises(ValueError, match="jwt_secret_blank"):
        TokenService(secret="")
