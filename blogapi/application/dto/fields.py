# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Shared field rules for request payloads.

Every message produced here is the exact text returned to the client, so the
wording ("Required Nickname", "Invalid Email") is part of the API.
"""

from __future__ import annotations

import html
from typing import Any

from email_validator import EmailNotValidError, validate_email
from pydantic_core import PydanticCustomError


def label(field_name: str) -> str:
    return field_name.replace("_", " ").title()


def coerce_text(value: Any, field_name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise PydanticCustomError("invalid_type", f"Invalid {label(field_name)}")
    return value


def prepare_text(value: str) -> str:
    return html.escape(value.strip(), quote=True)


def require(value: str, field_name: str) -> str:
    if not value:
        raise PydanticCustomError("missing", f"Required {label(field_name)}")
    return value


def check_email(value: str) -> str:
    require(value, "email")
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise PydanticCustomError("email_invalid", "Invalid Email") from exc
    return value
