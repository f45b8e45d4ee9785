# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Single translation point from exceptions to JSON error responses."""

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, g, jsonify, request
from werkzeug.exceptions import HTTPException

from blogapi.shared.logging import logger

from .base import AppError


def _where() -> str:
    return f"{request.method} {request.path} user={g.get('user_id')}"


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    return jsonify(error.to_dict()), error.status


def _log_app_error(error: AppError) -> None:
    context = dict(error.context or {})
    message = f"{error.code} ({int(error.status)}) on {_where()} context={context}"
    # A conflict may be configured to surface as 500; it is still a client outcome.
    if error.status >= HTTPStatus.INTERNAL_SERVER_ERROR and "field" not in context:
        logger.error(f"Application error: {message}")
    else:
        logger.warning(f"Rejected: {message}")


def register_error_handler(
    app: Flask,
    *,
    debug_mode: bool = False,
    default_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
) -> None:
    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        _log_app_error(exc)
        return handle_app_error(exc)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        # Routing errors (unknown path, wrong method) keep werkzeug's response.
        return exc

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        if debug_mode:
            logger.opt(exception=exc).error(f"Unhandled exception on {_where()}")
        else:
            logger.error(f"Unhandled {type(exc).__name__} on {_where()}")
        return jsonify({"error": "internal_error"}), default_status


__all__ = ["handle_app_error", "register_error_handler"]
