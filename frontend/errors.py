"""
Client-side exceptions.
"""

from __future__ import annotations

from typing import Optional


class ApiError(Exception):
    """A request to the API server failed or returned an unusable body."""

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
