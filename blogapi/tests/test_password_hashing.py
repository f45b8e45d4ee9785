from __future__ import annotations

from blogapi.application.services.password_hashing import WerkzeugPasswordHasher


def test_hash_is_salted_and_verifiable() -> None:
    hasher = WerkzeugPasswordHasher(method="pbkdf2:sha256:1000")

    first = hasher.hash("password")
    second = hasher.hash("password")

    assert first != second
    assert "password" not in first
    assert hasher.verify("password", first)
    assert not hasher.verify("Password", first)


def test_unreadable_hash_fails_verification() -> None:
    hasher = WerkzeugPasswordHasher()

    assert not hasher.verify("password", "not-a-werkzeug-hash")
