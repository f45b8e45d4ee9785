# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

from .fields import check_email, coerce_text, prepare_text, require


class UserPayload(BaseModel):
    """Create/update body for a user. Field order is report order."""

    model_config = ConfigDict(extra="ignore", validate_default=True)

    nickname: str = ""
    password: str = ""
    email: str = ""

    @field_validator("nickname", "password", "email", mode="before")
    @classmethod
    def _coerce(cls, value: Any, info: ValidationInfo) -> str:
        return coerce_text(value, info.field_name or "value")

    @field_validator("nickname")
    @classmethod
    def _nickname(cls, value: str) -> str:
        return require(prepare_text(value), "nickname")

    @field_validator("password")
    @classmethod
    def _password(cls, value: str) -> str:
        return require(value, "password")

    @field_validator("email")
    @classmethod
    def _email(cls, value: str) -> str:
        return check_email(prepare_text(value))


class SignInPayload(BaseModel):
    model_config = ConfigDict(extra="ignore", validate_default=True)

    password: str = ""
    email: str = ""

    @field_validator("password", "email", mode="before")
    @classmethod
    def _coerce(cls, value: Any, info: ValidationInfo) -> str:
        return coerce_text(value, info.field_name or "value")

    @field_validator("password")
    @classmethod
    def _password(cls, value: str) -> str:
        return require(value, "password")

    @field_validator("email")
    @classmethod
    def _email(cls, value: str) -> str:
        return check_email(prepare_text(value))
