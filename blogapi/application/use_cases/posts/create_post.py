# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from blogapi.application.dto.posts import PostCreatePayload
from blogapi.domain.ownership import OwnershipGuard
from blogapi.domain.posts.entities import Post
from blogapi.domain.posts.repositories import PostRepository
from blogapi.shared.errors.validation import parse_payload


class CreatePostUseCase:
    def __init__(self, *, posts: PostRepository, guard: OwnershipGuard) -> None:
        self._posts = posts
        self._guard = guard

    def execute(self, caller_id: int, payload: Mapping[str, Any]) -> Post:
        # No path target yet, so the validated author_id is the owner to check.
        data = parse_payload(PostCreatePayload, payload)
        self._guard.ensure(caller_id, data.author_id, resource="post")
        return self._posts.add(
            title=data.title,
            content=data.content,
            author_id=data.author_id,
        )
