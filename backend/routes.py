"""
HTTP routes for the API server.
"""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter

from backend.schemas import HealthResponse, RootResponse

router = APIRouter()

API_MESSAGE = "MERN TypeScript API Server"


def _iso_timestamp(now: datetime | None = None) -> str:
    now = now or datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


# GET routes also answer HEAD.
@router.api_route("/", methods=["GET", "HEAD"], response_model=RootResponse)
def root():
    return RootResponse(message=API_MESSAGE)


@router.api_route("/health", methods=["GET", "HEAD"], response_model=HealthResponse)
@router.api_route(
    "/health/",
    methods=["GET", "HEAD"],
    response_model=HealthResponse,
    include_in_schema=False,
)
def health():
    """
    Liveness probe. Does not touch the database.
    """
    return HealthResponse(status="OK", timestamp=_iso_timestamp())
