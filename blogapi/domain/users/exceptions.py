# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from blogapi.shared.errors.base import DomainError, NotFoundError


class AuthenticationError(DomainError):
    code = "Incorrect Details"
    status = HTTPStatus.UNPROCESSABLE_ENTITY


class UserNotFoundError(NotFoundError):
    def __init__(self, user_id: int) -> None:
        super().__init__("User", user_id)
