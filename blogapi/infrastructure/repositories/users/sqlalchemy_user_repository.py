# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime
from http import HTTPStatus

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from blogapi.domain.users.entities import User as DomainUser
from blogapi.domain.users.repositories import UserRepository
from blogapi.infrastructure.db import Database
from blogapi.infrastructure.db.models import UserRow
from blogapi.infrastructure.repositories.integrity import conflict_from_integrity
from blogapi.shared.logging import logger

_UNIQUE_FIELDS = (("nickname", "Nickname"), ("email", "Email"))


def to_domain_user(row: UserRow) -> DomainUser:
    return DomainUser(
        id=row.id,
        nickname=row.nickname,
        email=row.email,
        password_hash=row.password_hash,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(
        self,
        database: Database,
        *,
        conflict_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
    ) -> None:
        self._database = database
        self._conflict_status = conflict_status

    def _flush(self, session, action: str) -> None:
        try:
            session.flush()
        except IntegrityError as exc:
            logger.info(f"users.{action}: constraint violation ({exc.orig})")
            raise conflict_from_integrity(
                exc, table="users", fields=_UNIQUE_FIELDS, status=self._conflict_status
            ) from exc

    def list(self, limit: int) -> Sequence[DomainUser]:
        with self._database.session_scope() as session:
            rows = session.scalars(select(UserRow).order_by(UserRow.id.asc()).limit(limit))
            return [to_domain_user(row) for row in rows]

    def find_by_id(self, user_id: int) -> DomainUser | None:
        with self._database.session_scope() as session:
            row = session.get(UserRow, user_id)
            return to_domain_user(row) if row else None

    def find_by_email(self, email: str) -> DomainUser | None:
        with self._database.session_scope() as session:
            row = session.scalars(select(UserRow).where(UserRow.email == email)).first()
            return to_domain_user(row) if row else None

    def add(self, *, nickname: str, email: str, password_hash: str) -> DomainUser:
        with self._database.session_scope() as session:
            row = UserRow(nickname=nickname, email=email, password_hash=password_hash)
            session.add(row)
            self._flush(session, "add")
            session.refresh(row)
            return to_domain_user(row)

    def update(
        self, user_id: int, *, nickname: str, email: str, password_hash: str
    ) -> DomainUser | None:
        with self._database.session_scope() as session:
            row = session.get(UserRow, user_id)
            if row is None:
                return None
            row.nickname = nickname
            row.email = email
            row.password_hash = password_hash
            row.updated_at = datetime.now(UTC)
            self._flush(session, "update")
            session.refresh(row)
            return to_domain_user(row)

    def delete(self, user_id: int) -> bool:
        with self._database.session_scope() as session:
            row = session.get(UserRow, user_id)
            if row is None:
                return False
            session.delete(row)
            return True
