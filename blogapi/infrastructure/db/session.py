# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from blogapi.shared.config import DatabaseConfig
from blogapi.shared.logging import logger


class Base(DeclarativeBase):
    pass


def _set_sqlite_pragmas(dbapi_conn, _) -> None:
    cur = dbapi_conn.cursor()
    try:
        cur.execute("PRAGMA foreign_keys=ON;")
        cur.execute("PRAGMA busy_timeout=30000;")
    except Exception:
        logger.exception("Failed to apply SQLite PRAGMAs")
    finally:
        cur.close()


def _engine_for(config: DatabaseConfig) -> Engine:
    kwargs: dict[str, Any] = {"echo": False, "pool_pre_ping": True}
    if config.is_sqlite():
        kwargs["connect_args"] = {
            "check_same_thread": False,
            "timeout": int(config.pool_timeout),
        }
    else:
        kwargs.update(
            pool_size=config.pool_size,
            max_overflow=config.max_overflow,
            pool_timeout=config.pool_timeout,
        )
    engine = create_engine(config.url, **kwargs)
    if config.is_sqlite():
        event.listen(engine, "connect", _set_sqlite_pragmas)
    return engine


class Database:
    """Owns the engine and session factory for one configured store."""

    def __init__(self, config: DatabaseConfig) -> None:
        self.engine: Engine = _engine_for(config)
        self._session_factory = sessionmaker(
            bind=self.engine, autoflush=False, autocommit=False, expire_on_commit=False
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        session = self._session_factory()
        logger.debug("db.session: opened session")
        try:
            yield session
            session.commit()
            logger.debug("db.session: committed session")
        except Exception as exc:
            logger.debug(f"db.session: {type(exc).__name__}, rolling back")
            session.rollback()
            raise
        finally:
            session.close()
            logger.debug("db.session: closed session")

    def create_all(self) -> None:
        # Import registers the mapped tables on Base.metadata.
        from blogapi.infrastructure.db import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("Database schema ensured")

    def drop_all(self) -> None:
        from blogapi.infrastructure.db import models  # noqa: F401

        Base.metadata.drop_all(bind=self.engine)
        logger.info("Database schema dropped")

    def dispose(self) -> None:
        self.engine.dispose()
