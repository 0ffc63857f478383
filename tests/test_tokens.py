"""Bearer token tests."""

from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt

from src.config import get_settings
from src.errors import TokenExpiredError, TokenInvalidError
from src.services.tokens import create_access_token, decode_access_token


def test_create_access_token():
    """Test creating access token."""
    token = create_access_token(42)

    assert isinstance(token, str)
    assert len(token) > 50  # JWT tokens are long


def test_decode_access_token():
    """A freshly issued token verifies to the same user id."""
    assert decode_access_token(create_access_token(42)) == 42


def test_token_expires_after_lifetime():
    settings = get_settings()
    issued = datetime.now(UTC) - timedelta(minutes=settings.jwt_expiration_minutes + 1)
    token = create_access_token(42, now=issued)

    with pytest.raises(TokenExpiredError):
        decode_access_token(token)


def test_token_still_valid_before_expiry():
    settings = get_settings()
    issued = datetime.now(UTC) - timedelta(minutes=settings.jwt_expiration_minutes - 1)

    assert decode_access_token(create_access_token(42, now=issued)) == 42


def test_token_with_wrong_signature():
    token = jwt.encode(
        {"sub": "42", "exp": datetime.now(UTC) + timedelta(hours=1)},
        "some-other-secret",
        algorithm="HS256",
    )

    with pytest.raises(TokenInvalidError):
        decode_access_token(token)


def test_tampered_token():
    """A payload swapped under another token's signature is rejected."""
    header, _, signature = create_access_token(42).split(".")
    _, payload, _ = create_access_token(43).split(".")

    with pytest.raises(TokenInvalidError):
        decode_access_token(".".join([header, payload, signature]))


@pytest.mark.parametrize("token", ["", "not-a-token", "a.b.c"])
def test_malformed_token(token):
    with pytest.raises(TokenInvalidError):
        decode_access_token(token)


def test_token_without_user_id():
    settings = get_settings()
    token = jwt.encode(
        {"sub": "someone", "exp": datetime.now(UTC) + timedelta(hours=1)},
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )

    with pytest.raises(TokenInvalidError):
        decode_access_token(token)
