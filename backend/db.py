"""
Database connection bootstrap.

The server opens a single SQLAlchemy engine at startup and keeps it for the
lifetime of the process. A missing connection string or a failed first
connection terminates the process.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from backend.config import Settings
from backend.errors import ConfigurationError, DatabaseConnectionError

logger = logging.getLogger(__name__)


@dataclass
class DatabaseHandle:
    """Shared engine plus a session factory bound to it."""

    url: str
    engine: Engine
    Session: sessionmaker = field(init=False)

    def __post_init__(self):
        self.Session = sessionmaker(
            bind=self.engine, class_=Session, expire_on_commit=False, future=True
        )

    def dispose(self) -> None:
        self.engine.dispose()


def connect_database(database_url: Optional[str]) -> DatabaseHandle:
    """
    Create the engine and prove the database is reachable.

    Raises:
        ConfigurationError: If no connection string is configured.
        DatabaseConnectionError: If the URL is invalid or the connection fails.
    """
    if not database_url:
        raise ConfigurationError(
            "DATABASE_URL is not defined in environment variables"
        )
    try:
        engine = create_engine(
            database_url,
            future=True,
            pool_pre_ping=True,
            pool_recycle=1800,
        )
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
    except (SQLAlchemyError, ValueError, ImportError) as exc:
        # ValueError: malformed URL parts. ImportError: DBAPI driver not installed.
        raise DatabaseConnectionError(str(exc)) from exc

    logger.info("Connected to database %s", engine.url.render_as_string())
    return DatabaseHandle(url=database_url, engine=engine)


def bootstrap_database(settings: Settings) -> DatabaseHandle:
    """Connect at startup, exiting with status 1 on any failure."""
    # backend.dependencies imports this module.
    from backend.dependencies import set_database

    try:
        handle = connect_database(settings.database_url)
    except (ConfigurationError, DatabaseConnectionError) as exc:
        logger.error("Database connection error: %s", exc)
        sys.exit(1)
    set_database(handle)
    return handle
