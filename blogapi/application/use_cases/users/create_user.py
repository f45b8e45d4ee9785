# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from blogapi.application.dto.users import UserPayload
from blogapi.domain.users.entities import User
from blogapi.domain.users.repositories import PasswordHasher, UserRepository
from blogapi.shared.errors.validation import parse_payload


class CreateUserUseCase:
    def __init__(self, *, users: UserRepository, password_hasher: PasswordHasher) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, payload: Mapping[str, Any]) -> User:
        data = parse_payload(UserPayload, payload)
        # Nickname/email uniqueness is left to the store's constraints.
        return self._users.add(
            nickname=data.nickname,
            email=data.email,
            password_hash=self._password_hasher.hash(data.password),
        )
