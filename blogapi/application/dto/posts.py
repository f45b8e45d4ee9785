# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from .fields import coerce_text, prepare_text, require


class PostPayload(BaseModel):
    """Update body for a post. ``author_id`` is not editable."""

    model_config = ConfigDict(extra="ignore", validate_default=True)

    title: str = ""
    content: str = ""

    @field_validator("title", "content", mode="before")
    @classmethod
    def _coerce(cls, value: Any, info: ValidationInfo) -> str:
        return coerce_text(value, info.field_name or "value")

    @field_validator("title", "content")
    @classmethod
    def _required(cls, value: str, info: ValidationInfo) -> str:
        return require(prepare_text(value), info.field_name or "value")


class PostCreatePayload(PostPayload):
    author_id: int = 0

    @field_validator("author_id", mode="before")
    @classmethod
    def _coerce_author(cls, value: Any) -> int:
        if value is None:
            return 0
        if isinstance(value, bool) or not isinstance(value, int):
            raise PydanticCustomError("invalid_type", "Invalid Author")
        return value

    @field_validator("author_id")
    @classmethod
    def _author(cls, value: int) -> int:
        if value < 1:
            raise PydanticCustomError("missing", "Required Author")
        return value
