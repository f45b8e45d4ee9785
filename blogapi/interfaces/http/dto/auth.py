from __future__ import annotations

from pydantic import BaseModel


class TokenDTO(BaseModel):
    token: str


class WelcomeDTO(BaseModel):
    message: str = "Welcome To This Awesome API"
