# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import User


class UserRepository(Protocol):
    def list(self, limit: int) -> Sequence[User]: ...
    def find_by_id(self, user_id: int) -> User | None: ...
    def find_by_email(self, email: str) -> User | None: ...
    def add(self, *, nickname: str, email: str, password_hash: str) -> User: ...
    def update(
        self, user_id: int, *, nickname: str, email: str, password_hash: str
    ) -> User | None: ...
    def delete(self, user_id: int) -> bool: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...
