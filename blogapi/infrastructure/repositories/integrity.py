# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Translate store constraint violations into API conflicts."""

from __future__ import annotations

import re
from collections.abc import Sequence
from http import HTTPStatus

from sqlalchemy.exc import IntegrityError

from blogapi.shared.errors.base import AppError, ConflictError, InfrastructureError


def _column_pattern(table: str, column: str) -> re.Pattern[str]:
    # sqlite: "UNIQUE constraint failed: users.email"
    # postgres: 'constraint "users_email_key"' / "Key (email)=(...)"
    return re.compile(
        rf"\b{table}\.{column}\b|\b{table}_{column}_key\b|\({column}\)=",
        re.IGNORECASE,
    )


def conflict_from_integrity(
    exc: IntegrityError,
    *,
    table: str,
    fields: Sequence[tuple[str, str]],
    status: HTTPStatus,
) -> AppError:
    message = str(exc.orig)
    for column, label in fields:
        if _column_pattern(table, column).search(message):
            return ConflictError(label, status=status)
    return InfrastructureError(code="integrity_error", context={"table": table})
