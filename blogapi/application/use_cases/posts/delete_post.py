# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from blogapi.domain.ownership import OwnershipGuard
from blogapi.domain.posts.exceptions import PostNotFoundError
from blogapi.domain.posts.repositories import PostRepository


class DeletePostUseCase:
    def __init__(self, *, posts: PostRepository, guard: OwnershipGuard) -> None:
        self._posts = posts
        self._guard = guard

    def execute(self, caller_id: int, post_id: int) -> None:
        post = self._posts.find_by_id(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        self._guard.ensure(caller_id, post.author_id, resource="post")
        if not self._posts.delete(post_id):
            raise PostNotFoundError(post_id)
