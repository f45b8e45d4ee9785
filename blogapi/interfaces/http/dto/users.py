from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from blogapi.domain.users.entities import User


class UserResponseDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nickname: str
    email: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def render(cls, user: User) -> dict:
        return cls.model_validate(user).model_dump(mode="json")
