# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from blogapi.domain.ownership import OwnershipGuard
from blogapi.domain.users.exceptions import UserNotFoundError
from blogapi.domain.users.repositories import UserRepository


class DeleteUserUseCase:
    def __init__(self, *, users: UserRepository, guard: OwnershipGuard) -> None:
        self._users = users
        self._guard = guard

    def execute(self, caller_id: int, user_id: int) -> None:
        self._guard.ensure(caller_id, user_id, resource="user")
        if not self._users.delete(user_id):
            raise UserNotFoundError(user_id)
