# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Stateless bearer tokens.

A token is a signed JWT carrying the user id and an expiry. Nothing is stored
server-side: a token is valid exactly when its signature checks out against
the configured key and ``exp`` is still in the future.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt

from blogapi.shared.errors.base import InvalidTokenError, MissingTokenError
from blogapi.shared.logging import logger


def _utcnow() -> datetime:
    return datetime.now(UTC)


class TokenService:
    def __init__(
        self,
        *,
        secret_key: str,
        lifetime_seconds: int,
        algorithm: str = "HS256",
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._secret_key = secret_key
        self._lifetime = timedelta(seconds=lifetime_seconds)
        self._algorithm = algorithm
        self._clock = clock

    def issue(self, identity: int) -> str:
        expires_at = self._clock() + self._lifetime
        claims = {
            "authorized": True,
            "user_id": identity,
            "exp": expires_at,
        }
        token = jwt.encode(claims, self._secret_key, algorithm=self._algorithm)
        logger.info(f"Issued token for user={identity} exp={expires_at.isoformat()}")
        return token

    def validate(self, token: str | None) -> int:
        if not token:
            raise MissingTokenError()

        try:
            claims = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["exp"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise InvalidTokenError("expired_token") from exc
        except jwt.InvalidTokenError as exc:
            raise InvalidTokenError("invalid_token") from exc

        identity = claims.get("user_id")
        if isinstance(identity, bool) or not isinstance(identity, int) or identity < 1:
            raise InvalidTokenError("invalid_identity_claim")
        return identity


__all__ = ["TokenService"]
