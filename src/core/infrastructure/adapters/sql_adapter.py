"""Thin adapter wrapping a pooled SQLAlchemy engine."""

from functools import lru_cache
import os
from typing import Any

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.orm import Session, sessionmaker

from core.infrastructure.sql.schema import Base
from core.utils.constants import (
    DEFAULT_DATABASE_URL,
    DEFAULT_DB_POOL_SIZE,
    DEFAULT_DB_POOL_TIMEOUT,
    ENV_DATABASE_URL,
    ENV_DB_POOL_SIZE,
    ENV_DB_POOL_TIMEOUT,
)


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    return int(value) if value else default


@lru_cache(maxsize=None)
def get_engine(url: str) -> Engine:
    """Return the process-wide engine for ``url``.

    Engines are cached so warm invocations reuse the connection pool. The
    pool is bounded (no overflow); callers wait up to the pool timeout for a
    free connection and then fail.
    """
    options: dict[str, Any] = {"pool_pre_ping": True}

    if not url.startswith("sqlite"):
        options.update(
            pool_size=_env_int(ENV_DB_POOL_SIZE, DEFAULT_DB_POOL_SIZE),
            max_overflow=0,
            pool_timeout=_env_int(ENV_DB_POOL_TIMEOUT, DEFAULT_DB_POOL_TIMEOUT),
        )

    return create_engine(url, **options)


@lru_cache(maxsize=None)
def _ensure_schema(engine: Engine) -> bool:
    Base.metadata.create_all(engine)
    return True


class SqlAdapter:
    """Low-level relational store access (mechanical, no error handling).

    This adapter:
    - Wraps a pooled SQLAlchemy engine configured from the environment
    - Creates the schema on first use of an engine
    - Does NOT handle errors (lets them bubble up)
    - Domain implementations catch and translate errors
    """

    def __init__(self, engine: Engine | None = None) -> None:
        """Bind to ``engine`` or to the engine for the configured DATABASE_URL."""
        self.engine = engine or get_engine(os.getenv(ENV_DATABASE_URL) or DEFAULT_DATABASE_URL)
        self._sessions = sessionmaker(bind=self.engine, expire_on_commit=False)
        _ensure_schema(self.engine)

    def session(self) -> Session:
        """Open a new ORM session; use it as a context manager."""
        return self._sessions()

    def ping(self) -> None:
        """Run a trivial query.
        Raises SQLAlchemy exceptions - caught by domain implementation.
        """
        with self.engine.connect() as connection:
            connection.execute(text("SELECT 1"))
