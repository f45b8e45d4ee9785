# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from blogapi.application.dto.posts import PostPayload
from blogapi.domain.ownership import OwnershipGuard
from blogapi.domain.posts.entities import Post
from blogapi.domain.posts.exceptions import PostNotFoundError
from blogapi.domain.posts.repositories import PostRepository
from blogapi.shared.errors.validation import parse_payload


class UpdatePostUseCase:
    def __init__(self, *, posts: PostRepository, guard: OwnershipGuard) -> None:
        self._posts = posts
        self._guard = guard

    def execute(self, caller_id: int, post_id: int, payload: Mapping[str, Any]) -> Post:
        post = self._posts.find_by_id(post_id)
        if post is None:
            raise PostNotFoundError(post_id)

        self._guard.ensure(caller_id, post.author_id, resource="post")
        claimed_author = payload.get("author_id")
        if claimed_author is not None:
            self._guard.ensure(caller_id, claimed_author, resource="post")

        data = parse_payload(PostPayload, payload)
        updated = self._posts.update(post_id, title=data.title, content=data.content)
        if updated is None:
            raise PostNotFoundError(post_id)
        return updated
