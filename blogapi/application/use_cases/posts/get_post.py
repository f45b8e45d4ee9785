# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from blogapi.domain.posts.entities import Post
from blogapi.domain.posts.exceptions import PostNotFoundError
from blogapi.domain.posts.repositories import PostRepository


class GetPostUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, post_id: int) -> Post:
        post = self._posts.find_by_id(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post
