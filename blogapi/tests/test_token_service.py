from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from blogapi.application.services.token_service import TokenService
from blogapi.shared.errors import InvalidTokenError, MissingTokenError, UnauthorizedError

SECRET = "unit-test-signing-key-with-enough-length"


@pytest.fixture()
def tokens() -> TokenService:
    return TokenService(secret_key=SECRET, lifetime_seconds=3600)


def test_issued_token_validates_to_identity(tokens: TokenService) -> None:
    token = tokens.issue(7)

    assert tokens.validate(token) == 7


def test_token_embeds_identity_and_expiry(tokens: TokenService) -> None:
    before = datetime.now(UTC)
    claims = jwt.decode(tokens.issue(3), SECRET, algorithms=["HS256"])

    assert claims["user_id"] == 3
    assert claims["authorized"] is True
    expires_at = datetime.fromtimestamp(claims["exp"], UTC)
    assert before + timedelta(minutes=59) < expires_at <= before + timedelta(hours=1, seconds=5)


@pytest.mark.parametrize("value", ["", None])
def test_missing_token(tokens: TokenService, value: str | None) -> None:
    with pytest.raises(MissingTokenError):
        tokens.validate(value)


@pytest.mark.parametrize("value", ["token", "not.a.jwt", "a.b"])
def test_malformed_token(tokens: TokenService, value: str) -> None:
    with pytest.raises(InvalidTokenError):
        tokens.validate(value)


def test_token_signed_with_other_key_is_rejected(tokens: TokenService) -> None:
    other = TokenService(secret_key="another-signing-key-of-decent-length", lifetime_seconds=3600)

    with pytest.raises(InvalidTokenError) as excinfo:
        tokens.validate(other.issue(1))

    assert excinfo.value.reason == "invalid_token"


def test_expired_token_is_rejected() -> None:
    past = TokenService(
        secret_key=SECRET,
        lifetime_seconds=60,
        clock=lambda: datetime.now(UTC) - timedelta(hours=2),
    )
    current = TokenService(secret_key=SECRET, lifetime_seconds=60)

    with pytest.raises(InvalidTokenError) as excinfo:
        current.validate(past.issue(1))

    assert excinfo.value.reason == "expired_token"


def test_unsigned_token_is_rejected(tokens: TokenService) -> None:
    unsigned = jwt.encode(
        {"user_id": 1, "exp": datetime.now(UTC) + timedelta(hours=1)}, None, algorithm="none"
    )

    with pytest.raises(InvalidTokenError):
        tokens.validate(unsigned)


def test_token_without_expiry_is_rejected(tokens: TokenService) -> None:
    token = jwt.encode({"user_id": 1}, SECRET, algorithm="HS256")

    with pytest.raises(InvalidTokenError):
        tokens.validate(token)


@pytest.mark.parametrize("identity", ["1", 0, -4, True, None])
def test_bad_identity_claim_is_rejected(tokens: TokenService, identity: object) -> None:
    token = jwt.encode(
        {"user_id": identity, "exp": datetime.now(UTC) + timedelta(hours=1)},
        SECRET,
        algorithm="HS256",
    )

    with pytest.raises(InvalidTokenError):
        tokens.validate(token)


def test_token_errors_surface_as_unauthorized() -> None:
    error = InvalidTokenError()

    assert isinstance(error, UnauthorizedError)
    assert error.to_dict() == {"error": "Unauthorized"}
    assert int(error.status) == 401
