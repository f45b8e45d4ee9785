# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from blogapi.domain.posts.entities import Post
from blogapi.domain.posts.repositories import PostRepository


class ListPostsUseCase:
    def __init__(self, *, posts: PostRepository, limit: int) -> None:
        self._posts = posts
        self._limit = limit

    def execute(self) -> Sequence[Post]:
        return self._posts.list(self._limit)
