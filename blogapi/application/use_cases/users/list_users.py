# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from blogapi.domain.users.entities import User
from blogapi.domain.users.repositories import UserRepository


class ListUsersUseCase:
    def __init__(self, *, users: UserRepository, limit: int) -> None:
        self._users = users
        self._limit = limit

    def execute(self) -> Sequence[User]:
        return self._users.list(self._limit)
