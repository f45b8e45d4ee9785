# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from blogapi.domain.users.entities import User


@dataclass(slots=True, frozen=True)
class Post:
    """A post owned by ``author_id``; the owner never changes after creation."""

    id: int
    title: str
    content: str
    author_id: int
    created_at: datetime
    updated_at: datetime
    author: User | None = None
