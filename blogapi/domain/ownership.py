# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Self-service authorization: a caller may only mutate what it owns.

There are no roles, scopes or admin overrides. The owner passed in must
always come from server-resolved state (the path target or the stored
record), never from the request payload alone.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from blogapi.shared.errors.base import UnauthorizedError
from blogapi.shared.logging import logger


class Decision(Enum):
    ALLOW = "allow"
    DENY = "deny"


def _is_identity(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class OwnershipGuard:
    def authorize(self, caller_id: int, owner_id: Any) -> Decision:
        if _is_identity(owner_id) and caller_id == owner_id:
            return Decision.ALLOW
        return Decision.DENY

    def ensure(self, caller_id: int, owner_id: Any, *, resource: str = "resource") -> None:
        if self.authorize(caller_id, owner_id) is Decision.DENY:
            logger.warning(
                f"ownership.deny: caller={caller_id} owner={owner_id!r} resource={resource}"
            )
            raise UnauthorizedError(reason="not_owner")


__all__ = ["Decision", "OwnershipGuard"]
