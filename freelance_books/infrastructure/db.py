"""Database infrastructure for the bookkeeping store.

The engine behind BOOKS_DB_URL is created lazily, once per process. Pool
settings depend on the URL backend: the bookkeeping store is usually a
SQLite file, and server databases are supported through the same URL.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import NullPool, QueuePool, StaticPool

from freelance_books.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    SQLite files are opened per connection without pooling, and in-memory
    SQLite databases share a single connection so every session sees the
    same tables. Server backends get a small pool with health checks.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine configured for the URL's backend.
    """
    url = make_url(db_url)
    if url.get_backend_name() == "sqlite":
        in_memory = url.database in (None, "", ":memory:")
        return create_engine(
            db_url,
            poolclass=StaticPool if in_memory else NullPool,
            connect_args={"check_same_thread": False},
            future=True,
        )
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_books_engine: Optional[Engine] = None


def get_books_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the bookkeeping database.

    Returns:
        Engine: Lazily initialized engine connected to BOOKS_DB_URL.
    """
    global _books_engine
    if _books_engine is None:
        db_url = _get_env_var("BOOKS_DB_URL")
        _books_engine = _create_engine(db_url)
    return _books_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    Use cases receive this adapter through the composition root and never
    read BOOKS_DB_URL themselves.
    """

    def get_books_engine(self) -> Engine:
        """Get the engine for the bookkeeping database.

        Returns:
            Engine: SQLAlchemy engine connected to the bookkeeping store.
        """
        return get_books_engine()


__all__ = [
    "get_books_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
