"""Database ports for the bookkeeping store.

This module defines the application-layer protocol for accessing the
database engine. Infrastructure implementations are expected to provide a
concrete adapter that satisfies this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the bookkeeping database engine.

    Application use cases can depend on this protocol instead of concrete
    database drivers or configuration details.
    """

    def get_books_engine(self) -> Engine:
        """Get the engine for the bookkeeping database.

        Returns:
            Engine: SQLAlchemy engine connected to the bookkeeping store.
        """


__all__ = ["DatabaseEnginePort"]
