"""
Dependency wiring for the FastAPI app.
"""

from __future__ import annotations

from backend.config import get_settings
from backend.db import DatabaseHandle, connect_database

_database: DatabaseHandle | None = None


def set_database(handle: DatabaseHandle | None) -> None:
    """Register the process-wide handle opened at startup."""
    global _database
    _database = handle


def get_database() -> DatabaseHandle:
    """
    Return the singleton database handle shared by all request handlers.
    """
    global _database
    if _database:
        return _database

    settings = get_settings()
    _database = connect_database(settings.database_url)
    return _database
