# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Redaction applied to every log record before it reaches a sink.

Covers what this service actually handles: signed bearer tokens, account
passwords and their stored hashes, signing keys, store credentials and
user email addresses.
"""

from __future__ import annotations

import re
from typing import Any, NamedTuple

_MASK = "***REDACTED***"


class _Redaction(NamedTuple):
    pattern: re.Pattern[str]
    replacement: str


def _rule(pattern: str, replacement: str, flags: int = 0) -> _Redaction:
    return _Redaction(re.compile(pattern, flags), replacement)


REDACTIONS: tuple[_Redaction, ...] = (
    # Bearer header values and ?token= query strings
    _rule(r"(bearer\s+)([A-Za-z0-9_\-\.]{20,})", rf"\1{_MASK}", re.IGNORECASE),
    _rule(r"(\btoken\s*[:=]\s*['\"]?)([A-Za-z0-9_\-\.]{20,})(['\"]?)", rf"\1{_MASK}\3"),
    # Any bare JWT (header.claims.signature)
    _rule(r"\beyJ[A-Za-z0-9_\-]+\.[A-Za-z0-9_\-]+\.[A-Za-z0-9_\-]+", _MASK),
    # Werkzeug hash strings, e.g. scrypt:32768:8:1$salt$digest
    _rule(r"\b(?:scrypt|pbkdf2)(?::[A-Za-z0-9]+)*\$[^\s'\",}]+", _MASK),
    _rule(
        r"(password(?:_hash)?['\"]?\s*[:=]\s*['\"]?)([^'\",\s}]+)(['\"]?)",
        rf"\1{_MASK}\3",
        re.IGNORECASE,
    ),
    _rule(
        r"(secret[_-]?key\s*[:=]\s*['\"]?)([^\s'\"]{4,})(['\"]?)",
        rf"\1{_MASK}\3",
        re.IGNORECASE,
    ),
    _rule(
        r"(authorization\s*:\s*['\"]?)([^'\"]{10,})(['\"]?)",
        rf"\1{_MASK}\3",
        re.IGNORECASE,
    ),
    # Store URLs with credentials
    _rule(r"(postgres(?:ql)?|mysql)(\+\w+)?://([^:/]+):([^@]+)@", rf"\1\2://\3:{_MASK}@"),
    # Email local parts; the domain stays for debugging
    _rule(r"([A-Za-z0-9._%+-]+)@([A-Za-z0-9.-]+\.[A-Za-z]{2,})", r"***@\2"),
)


def sanitize_message(message: str) -> str:
    for redaction in REDACTIONS:
        message = redaction.pattern.sub(redaction.replacement, message)
    return message


def sanitize_record(record: dict[str, Any]) -> bool:
    """loguru ``filter`` hook: rewrites the message in place, never drops it."""
    if "message" in record:
        record["message"] = sanitize_message(record["message"])
    return True


__all__ = ["REDACTIONS", "sanitize_message", "sanitize_record"]
