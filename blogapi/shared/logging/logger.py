"""Structured logging utilities.

Every record carries two request-scoped fields: the correlation id of the
HTTP request and the identity of the authenticated caller (``-`` before
authentication). Both live in ContextVars so they follow the request
without being threaded through call signatures.
"""

from __future__ import annotations

import logging
import os
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from loguru import logger as _logger

from .sensitive_filter import sanitize_record

_FMT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<lvl>{level:<8}</lvl> | "
    "<magenta>{extra[correlation_id]}</magenta> "
    "<yellow>user={extra[user_id]}</yellow> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<lvl>{message}</lvl>"
)

_CORRELATION_ID: ContextVar[str] = ContextVar("correlation_id", default="-")
_USER_ID: ContextVar[str] = ContextVar("user_id", default="-")

_logger.configure(extra={"correlation_id": "-", "user_id": "-"})

# Library loggers that are noisy at INFO.
_QUIET_LOGGERS = {
    "werkzeug": logging.INFO,
    "sqlalchemy.engine": logging.WARNING,
    "sqlalchemy.pool": logging.WARNING,
}


def _context() -> dict[str, str]:
    return {"correlation_id": _CORRELATION_ID.get(), "user_id": _USER_ID.get()}


class _InterceptHandler(logging.Handler):
    """Routes stdlib ``logging`` records (werkzeug, sqlalchemy) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = _logger.level(record.levelname).name
        except ValueError:
            level = str(record.levelno)
        _logger.opt(depth=6, exception=record.exc_info).bind(**_context()).log(
            level, record.getMessage()
        )


class ContextualLogger:
    """Proxy for loguru that binds the request context on every call."""

    def __getattr__(self, name):  # pragma: no cover
        return getattr(_logger.bind(**_context()), name)


def set_correlation_id(value: str | None) -> None:
    _CORRELATION_ID.set(value or "-")


def get_correlation_id() -> str:
    return _CORRELATION_ID.get()


def bind_identity(user_id: int | None) -> None:
    _USER_ID.set("-" if user_id is None else str(user_id))


def clear_correlation_id() -> None:
    _CORRELATION_ID.set("-")
    _USER_ID.set("-")


def _sink_options(level: str, *, colorize: bool) -> dict[str, Any]:
    return {
        "level": level,
        "format": _FMT,
        "filter": sanitize_record,
        "colorize": colorize,
        "backtrace": False,
        # Never render local variables; they may hold passwords or tokens.
        "diagnose": False,
    }


def setup_logging(
    level: str | None = None,
    *,
    debug_mode: bool = False,
    log_file: str | Path | None = None,
) -> None:
    if debug_mode:
        level = "DEBUG"
    level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()

    _logger.remove()
    _logger.add(sys.stderr, **_sink_options(level, colorize=True))

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        _logger.add(
            path,
            enqueue=True,
            encoding="utf-8",
            **_sink_options(level, colorize=False),
        )

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
    for name, quiet_level in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(quiet_level)


logger = ContextualLogger()

__all__ = [
    "bind_identity",
    "clear_correlation_id",
    "get_correlation_id",
    "logger",
    "set_correlation_id",
    "setup_logging",
]
