# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from blogapi.application.dto.users import UserPayload
from blogapi.domain.ownership import OwnershipGuard
from blogapi.domain.users.entities import User
from blogapi.domain.users.exceptions import UserNotFoundError
from blogapi.domain.users.repositories import PasswordHasher, UserRepository
from blogapi.shared.errors.validation import parse_payload


class UpdateUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
        guard: OwnershipGuard,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._guard = guard

    def execute(self, caller_id: int, user_id: int, payload: Mapping[str, Any]) -> User:
        # A user record owns itself: the path id is the owner.
        self._guard.ensure(caller_id, user_id, resource="user")
        data = parse_payload(UserPayload, payload)
        updated = self._users.update(
            user_id,
            nickname=data.nickname,
            email=data.email,
            password_hash=self._password_hasher.hash(data.password),
        )
        if updated is None:
            raise UserNotFoundError(user_id)
        return updated
