# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from blogapi.shared.errors.base import NotFoundError


class PostNotFoundError(NotFoundError):
    def __init__(self, post_id: int) -> None:
        super().__init__("Post", post_id)
