# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
import time

from flask import Flask, Response, g, request

from blogapi.infrastructure.observability import record_request
from blogapi.shared.logging import (
    clear_correlation_id,
    get_correlation_id,
    logger,
    set_correlation_id,
)

_REDACTED_QUERY_KEYS = frozenset({"token", "password"})


def _client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.remote_addr or "unknown"


def _auth_scheme() -> str:
    """How the request presents its credential, without revealing it."""
    header = request.headers.get("Authorization")
    if header is None:
        return "query" if "token" in request.args else "none"
    parts = header.split(" ")
    return parts[0].lower() if len(parts) == 2 else "malformed"


def _query_summary() -> dict[str, str]:
    return {
        key: "<redacted>" if key.lower() in _REDACTED_QUERY_KEYS else value
        for key, value in request.args.items()
    }


def _endpoint_label() -> str:
    rule = request.url_rule
    return rule.rule if rule is not None else "unmatched"


def configure_request_logging(
    app: Flask, *, debug_mode: bool = False, metrics_enabled: bool = False
) -> None:
    @app.before_request
    def _before_request() -> None:
        set_correlation_id(request.headers.get("X-Request-ID") or secrets.token_urlsafe(8))
        g.request_start_time = time.perf_counter()

        if debug_mode:
            logger.info(
                f"Request started: {request.method} {request.path} from {_client_ip()}, "
                f"auth={_auth_scheme()}, query={_query_summary()}, "
                f"body_size={request.content_length or 0}"
            )
        else:
            logger.info(f"Request: {request.method} {request.path} from {_client_ip()}")

    @app.after_request
    def _after_request(response: Response) -> Response:
        duration = time.perf_counter() - g.get("request_start_time", time.perf_counter())
        logger.info(
            f"Response: {request.method} {request.path} status={response.status_code}, "
            f"duration={duration:.3f}s, user={g.get('user_id')}"
        )
        if metrics_enabled:
            record_request(request.method, _endpoint_label(), response.status_code, duration)

        response.headers.setdefault("X-Request-ID", get_correlation_id())
        return response

    @app.teardown_request
    def _teardown_request(exc: BaseException | None) -> None:
        if exc is not None:
            logger.error(
                f"Request error: {type(exc).__name__} on "
                f"{request.method} {request.path} user={g.get('user_id')}"
            )
        clear_correlation_id()


__all__ = ["configure_request_logging"]
