"""
Pydantic schemas for the API server responses.
"""

from __future__ import annotations

from pydantic import BaseModel


class RootResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str
    timestamp: str


class ErrorResponse(BaseModel):
    error: str
    message: str
