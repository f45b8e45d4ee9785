# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .ownership import Decision, OwnershipGuard
from .posts import Post, PostNotFoundError, PostRepository
from .users import (
    AuthenticationError,
    PasswordHasher,
    User,
    UserNotFoundError,
    UserRepository,
)

__all__ = [
    "AuthenticationError",
    "Decision",
    "OwnershipGuard",
    "PasswordHasher",
    "Post",
    "PostNotFoundError",
    "PostRepository",
    "User",
    "UserNotFoundError",
    "UserRepository",
]
