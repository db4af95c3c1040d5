"""
Run the API server: connect to the database, then serve HTTP.

Usage:
    python -m backend
"""

from __future__ import annotations

import logging

import uvicorn

from backend.app import create_app
from backend.config import get_settings
from backend.db import bootstrap_database

logger = logging.getLogger(__name__)


def main() -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(name)s %(levelname)s %(asctime)s %(message)s",
        datefmt="%m/%d/%Y %I:%M:%S %p",
    )

    settings = get_settings()
    bootstrap_database(settings)
    app = create_app(settings)

    logger.info("Server is running at http://localhost:%d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
