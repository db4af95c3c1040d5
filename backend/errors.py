"""
Exceptions raised while bootstrapping the API server.
"""

from __future__ import annotations


class BackendError(Exception):
    """Base class for server-side failures."""


class ConfigurationError(BackendError):
    """A required setting is missing."""


class DatabaseConnectionError(BackendError):
    """The initial database connection attempt failed."""
