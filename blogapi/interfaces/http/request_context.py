# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Per-request helpers shared by the controllers."""

from __future__ import annotations

import re
from typing import Any

from flask import g, request

from blogapi.application.services.token_service import TokenService
from blogapi.shared.errors.base import MalformedIdentifierError, UnauthorizedError
from blogapi.shared.logging import bind_identity, logger

_NUMERIC_ID = re.compile(r"[0-9]{1,19}", re.ASCII)
# Largest id the store can hold (signed 64-bit).
_MAX_IDENTIFIER = 2**63 - 1


def parse_identifier(raw_id: str) -> int:
    if not _NUMERIC_ID.fullmatch(raw_id):
        raise MalformedIdentifierError(raw_id)
    value = int(raw_id)
    if value > _MAX_IDENTIFIER:
        raise MalformedIdentifierError(raw_id)
    return value


def bearer_token() -> str:
    parts = request.headers.get("Authorization", "").split(" ")
    if len(parts) == 2:
        return parts[1]
    if "Authorization" not in request.headers:
        return request.args.get("token", "")
    return ""


def authenticate(tokens: TokenService) -> int:
    try:
        user_id = tokens.validate(bearer_token())
    except UnauthorizedError as exc:
        logger.warning(
            f"Auth failed ({exc.reason}) on {request.method} {request.path} "
            f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
        )
        raise
    g.user_id = user_id
    bind_identity(user_id)
    logger.debug(f"Auth OK: user={user_id} {request.method} {request.path}")
    return user_id


def json_body() -> dict[str, Any]:
    payload = request.get_json(force=True, silent=True)
    return payload if isinstance(payload, dict) else {}
