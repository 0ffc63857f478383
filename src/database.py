"""Database configuration and session management."""

import logging
from collections.abc import Generator
from typing import Any

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

Base: Any = declarative_base()


class DatabaseConnectionError(RuntimeError):
    """Raised when the database cannot be reached at startup."""


class Database:
    """Explicitly constructed persistence handle.

    Owns the engine and session factory. ``connect()`` must be called before
    ``session()``; it pings the server so an unreachable database fails the
    process at startup rather than on the first request.
    """

    def __init__(self, url: str) -> None:
        self.url = url
        self._engine: Engine | None = None
        self._session_factory: sessionmaker | None = None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise DatabaseConnectionError("Database is not connected")
        return self._engine

    @property
    def is_connected(self) -> bool:
        return self._engine is not None

    def _create_engine(self) -> Engine:
        if self.url.startswith("sqlite"):
            kwargs: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
            if ":memory:" in self.url or self.url == "sqlite://":
                kwargs["poolclass"] = StaticPool
            return create_engine(self.url, **kwargs)
        return create_engine(
            self.url,
            pool_pre_ping=True,
            pool_size=5,
            max_overflow=10,
        )

    def connect(self) -> None:
        """Create the engine and verify connectivity."""
        if self._engine is not None:
            return
        engine = self._create_engine()
        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            engine.dispose()
            raise DatabaseConnectionError(f"Could not connect to database: {e}") from e

        self._engine = engine
        self._session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
        logger.info(f"Connected to database ({engine.url.get_backend_name()})")

    def create_all(self) -> None:
        """Create all tables that do not exist yet."""
        # Import all models here so they are registered with Base.metadata
        from src import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        """Open a new ORM session."""
        if self._session_factory is None:
            raise DatabaseConnectionError("Database is not connected")
        return self._session_factory()

    def dispose(self) -> None:
        """Close all pooled connections."""
        if self._engine is not None:
            self._engine.dispose()
            logger.info("Database connections closed")
        self._engine = None
        self._session_factory = None


def get_db(request: Request) -> Generator[Session, None, None]:
    """Dependency that provides a database session."""
    database: Database = request.app.state.database
    db = database.session()
    try:
        yield db
    finally:
        db.close()
