# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime
from http import HTTPStatus

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import joinedload

from blogapi.domain.posts.entities import Post as DomainPost
from blogapi.domain.posts.repositories import PostRepository
from blogapi.domain.users.exceptions import UserNotFoundError
from blogapi.infrastructure.db import Database
from blogapi.infrastructure.db.models import PostRow, UserRow
from blogapi.infrastructure.repositories.integrity import conflict_from_integrity
from blogapi.infrastructure.repositories.users.sqlalchemy_user_repository import (
    to_domain_user,
)
from blogapi.shared.logging import logger

_UNIQUE_FIELDS = (("title", "Title"),)


def to_domain_post(row: PostRow) -> DomainPost:
    return DomainPost(
        id=row.id,
        title=row.title,
        content=row.content,
        author_id=row.author_id,
        created_at=row.created_at,
        updated_at=row.updated_at,
        author=to_domain_user(row.author) if row.author is not None else None,
    )


class SqlAlchemyPostRepository(PostRepository):
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
            logger.info(f"posts.{action}: constraint violation ({exc.orig})")
            raise conflict_from_integrity(
                exc, table="posts", fields=_UNIQUE_FIELDS, status=self._conflict_status
            ) from exc

    def _load(self, session, post_id: int) -> PostRow | None:
        return session.scalars(
            select(PostRow).options(joinedload(PostRow.author)).where(PostRow.id == post_id)
        ).first()

    def list(self, limit: int) -> Sequence[DomainPost]:
        with self._database.session_scope() as session:
            rows = session.scalars(
                select(PostRow)
                .options(joinedload(PostRow.author))
                .order_by(PostRow.id.asc())
                .limit(limit)
            )
            return [to_domain_post(row) for row in rows]

    def find_by_id(self, post_id: int) -> DomainPost | None:
        with self._database.session_scope() as session:
            row = self._load(session, post_id)
            return to_domain_post(row) if row else None

    def add(self, *, title: str, content: str, author_id: int) -> DomainPost:
        with self._database.session_scope() as session:
            # The token may outlive its account.
            if session.get(UserRow, author_id) is None:
                raise UserNotFoundError(author_id)
            row = PostRow(title=title, content=content, author_id=author_id)
            session.add(row)
            self._flush(session, "add")
            loaded = self._load(session, row.id)
            assert loaded is not None
            return to_domain_post(loaded)

    def update(self, post_id: int, *, title: str, content: str) -> DomainPost | None:
        with self._database.session_scope() as session:
            row = self._load(session, post_id)
            if row is None:
                return None
            row.title = title
            row.content = content
            row.updated_at = datetime.now(UTC)
            self._flush(session, "update")
            return to_domain_post(row)

    def delete(self, post_id: int) -> bool:
        with self._database.session_scope() as session:
            row = session.get(PostRow, post_id)
            if row is None:
                return False
            session.delete(row)
            return True
