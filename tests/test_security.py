"""Tests for password hashing."""

import pytest

from user_api.security import hash_password, verify_password


def test_hash_password_is_not_plaintext() -> None:
    hashed = hash_password("secret")
    assert hashed != "secret"
    assert hashed.startswith("$2b$")


def test_hash_password_is_salted() -> None:
    assert hash_password("secret") != hash_password("secret")


def test_verify_password_round_trip() -> None:
    hashed = hash_password("secret")
    assert verify_password("secret", hashed)
    assert not verify_password("Secret", hashed)


def test_hash_password_uses_configured_rounds(monkeypatch) -> None:
    from user_api import security

    monkeypatch.setattr(security.settings, "bcrypt_rounds", 5)
    assert hash_password("secret").startswith("$2b$05$")


def test_hash_password_rejects_non_string() -> None:
    with pytest.raises((TypeError, AttributeError)):
        hash_password(None)  # type: ignore[arg-type]


def test_hash_password_rejects_credentials_over_72_bytes() -> None:
    with pytest.raises(ValueError):
        hash_password("x" * 73)
