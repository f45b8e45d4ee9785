# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Post


class PostRepository(Protocol):
    def list(self, limit: int) -> Sequence[Post]: ...
    def find_by_id(self, post_id: int) -> Post | None: ...
    def add(self, *, title: str, content: str, author_id: int) -> Post: ...
    def update(self, post_id: int, *, title: str, content: str) -> Post | None: ...
    def delete(self, post_id: int) -> bool: ...
