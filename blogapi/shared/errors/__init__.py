from .base import (
    AppError,
    ConflictError,
    DomainError,
    InfrastructureError,
    InvalidTokenError,
    MalformedIdentifierError,
    MissingTokenError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from .http import handle_app_error, register_error_handler

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
    "handle_app_error",
    "register_error_handler",
]
