"""Password hashing and JWT helpers."""

from datetime import timedelta

import pytest
from jose import jwt

from app.core.config import get_settings
from app.infrastructure.security import (
    BcryptPasswordHasher,
    JwtTokenIssuer,
    create_access_token,
    get_password_hash,
    verify_password,
    verify_token,
)


def test_hash_and_verify_password() -> None:
    hashed = get_password_hash("secret123")
    assert hashed != "secret123"
    assert verify_password("secret123", hashed)
    assert not verify_password("wrong", hashed)


def test_long_passwords_are_not_truncated() -> None:
    """Passwords differing only after byte 72 must not verify against each other."""
    base = "a" * 80
    hashed = get_password_hash(base + "x")
    assert not verify_password(base + "y", hashed)


def test_verify_password_with_malformed_hash_returns_false() -> None:
    assert verify_password("secret123", "not-a-bcrypt-hash") is False


async def test_async_hasher_rejects_missing_hash() -> None:
    hasher = BcryptPasswordHasher()
    hashed = await hasher.hash("secret123")
    assert await hasher.verify("secret123", hashed)
    assert await hasher.verify("secret123", None) is False


def test_token_round_trip_carries_sub_and_email() -> None:
    issuer = JwtTokenIssuer()
    payload = issuer.decode(issuer.issue("user-1", "a@example.com"))
    assert payload["sub"] == "user-1"
    assert payload["email"] == "a@example.com"
    assert "exp" in payload


def test_expired_token_is_rejected() -> None:
    token = create_access_token({"sub": "user-1"}, expires_delta=timedelta(seconds=-5))
    with pytest.raises(ValueError):
        verify_token(token)


def test_token_without_sub_is_rejected() -> None:
    settings = get_settings()
    token = jwt.encode(
        {"email": "a@example.com", "exp": 9999999999},
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
    )
    with pytest.raises(ValueError):
        verify_token(token)


def test_token_signed_with_other_key_is_rejected() -> None:
    token = jwt.encode({"sub": "user-1", "exp": 9999999999}, "other", algorithm="HS256")
    with pytest.raises(ValueError):
        verify_token(token)
