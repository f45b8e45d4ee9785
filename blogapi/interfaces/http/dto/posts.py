from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from blogapi.domain.posts.entities import Post

from .users import UserResponseDTO


class PostResponseDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: str
    author_id: int
    author: UserResponseDTO | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def render(cls, post: Post) -> dict:
        return cls.model_validate(post).model_dump(mode="json")
