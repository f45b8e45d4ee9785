# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, cast


@dataclass(slots=True)
class AppError(Exception):
    code: str
    status: HTTPStatus
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.code)

    def to_dict(self) -> dict[str, Any]:
        # Context stays server-side; clients only ever see the message.
        return {"error": self.code}


class DomainError(AppError):
    def __init__(
        self,
        *,
        code: str | None = None,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_code = code or cast(str, getattr(self, "code", "domain_error"))
        resolved_status = status or cast(
            HTTPStatus, getattr(self, "status", HTTPStatus.BAD_REQUEST)
        )
        super().__init__(code=resolved_code, status=resolved_status, context=context)


class InfrastructureError(AppError):
    def __init__(
        self,
        code: str = "infrastructure_error",
        *,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_status = status or HTTPStatus.INTERNAL_SERVER_ERROR
        super().__init__(code=code, status=resolved_status, context=context)


class ValidationError(AppError):
    def __init__(
        self,
        code: str = "validation_error",
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=code,
            status=HTTPStatus.UNPROCESSABLE_ENTITY,
            context=context,
        )


class MalformedIdentifierError(AppError):
    def __init__(self, raw_id: str) -> None:
        super().__init__(
            code="Invalid Identifier",
            status=HTTPStatus.BAD_REQUEST,
            context={"raw_id": raw_id},
        )


class UnauthorizedError(AppError):
    def __init__(self, reason: str = "unauthorized") -> None:
        super().__init__(
            code="Unauthorized",
            status=HTTPStatus.UNAUTHORIZED,
            context={"reason": reason},
        )

    @property
    def reason(self) -> str:
        return str((self.context or {}).get("reason", "unauthorized"))


class MissingTokenError(UnauthorizedError):
    def __init__(self) -> None:
        super().__init__(reason="missing_token")


class InvalidTokenError(UnauthorizedError):
    def __init__(self, detail: str = "invalid_token") -> None:
        super().__init__(reason=detail)


class NotFoundError(AppError):
    def __init__(self, resource: str, resource_id: int) -> None:
        super().__init__(
            code=f"{resource} Not Found",
            status=HTTPStatus.NOT_FOUND,
            context={"id": resource_id},
        )


class ConflictError(AppError):
    def __init__(
        self, field: str, *, status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR
    ) -> None:
        super().__init__(
            code=f"{field} Already Taken",
            status=status,
            context={"field": field},
        )


__all__ = [
    "AppError",
    "ConflictError",
    "DomainError",
    "InfrastructureError",
    "InvalidTokenError",
    "MalformedIdentifierError",
    "MissingTokenError",
    "NotFoundError",
    "UnauthorizedError",
    "ValidationError",
]
