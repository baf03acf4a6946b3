# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from notekeeper.shared.config import DatabaseConfig
from notekeeper.shared.logging import logger


class Base(DeclarativeBase):
    pass


def _is_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in url


def _build_engine(config: DatabaseConfig) -> Engine:
    if config.url.startswith("sqlite"):
        connect_args: dict[str, object] = {
            "check_same_thread": False,
            "timeout": config.pool_timeout,
        }
        if _is_memory_sqlite(config.url):
            engine = create_engine(
                config.url,
                future=True,
                connect_args=connect_args,
                poolclass=StaticPool,
            )
        else:
            engine = create_engine(
                config.url,
                future=True,
                pool_pre_ping=True,
                pool_size=config.pool_size,
                max_overflow=config.max_overflow,
                pool_timeout=config.pool_timeout,
                connect_args=connect_args,
            )

        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, _record) -> None:
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine

    return create_engine(
        config.url,
        future=True,
        pool_pre_ping=True,
        pool_size=config.pool_size,
        max_overflow=config.max_overflow,
        pool_timeout=config.pool_timeout,
    )


class Database:
    """Owns the engine and session factory for one application instance."""

    def __init__(self, config: DatabaseConfig) -> None:
        self._engine = _build_engine(config)
        self._session_factory = sessionmaker(
            bind=self._engine, autoflush=False, expire_on_commit=False
        )
        logger.debug(f"db: engine created for {self._engine.url.render_as_string()}")

    @property
    def engine(self) -> Engine:
        return self._engine

    def session_factory(self) -> Session:
        return self._session_factory()

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        session = self.session_factory()
        logger.debug("db.session: opened session")
        try:
            yield session
            session.commit()
        except Exception:
            logger.warning("db.session: error, rolling back")
            session.rollback()
            raise
        finally:
            session.close()

    def create_all(self) -> None:
        Base.metadata.create_all(bind=self._engine)
        logger.info("Database schema ensured")

    def dispose(self) -> None:
        self._engine.dispose()
        logger.info("db: engine disposed")
