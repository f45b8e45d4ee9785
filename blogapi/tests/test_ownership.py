from __future__ import annotations

import pytest

from blogapi.domain.ownership import Decision, OwnershipGuard
from blogapi.shared.errors import UnauthorizedError


@pytest.fixture()
def guard() -> OwnershipGuard:
    return OwnershipGuard()


def test_owner_is_allowed(guard: OwnershipGuard) -> None:
    assert guard.authorize(4, 4) is Decision.ALLOW


@pytest.mark.parametrize("owner", [5, 0, "4", True, None, 4.0])
def test_anyone_else_is_denied(guard: OwnershipGuard, owner: object) -> None:
    assert guard.authorize(4, owner) is Decision.DENY


def test_bool_owner_never_matches_identity_one(guard: OwnershipGuard) -> None:
    assert guard.authorize(1, True) is Decision.DENY


def test_ensure_raises_unauthorized_on_deny(guard: OwnershipGuard) -> None:
    with pytest.raises(UnauthorizedError) as excinfo:
        guard.ensure(1, 2, resource="post")

    assert excinfo.value.code == "Unauthorized"
    assert excinfo.value.reason == "not_owner"


def test_ensure_passes_for_owner(guard: OwnershipGuard) -> None:
    guard.ensure(9, 9)
