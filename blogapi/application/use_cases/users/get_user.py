# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from blogapi.domain.users.entities import User
from blogapi.domain.users.exceptions import UserNotFoundError
from blogapi.domain.users.repositories import UserRepository


class GetUserUseCase:
    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def execute(self, user_id: int) -> User:
        user = self._users.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user
