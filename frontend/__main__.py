"""
Render one client page against the configured API server.

Usage:
    python -m frontend --path / --wait 5
"""

from __future__ import annotations

import argparse
import logging

from frontend.api import create_api_client
from frontend.app import App
from frontend.config import get_client_settings

logger = logging.getLogger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(description="Render a client page.")
    parser.add_argument("--path", default="/", help="Route to render")
    parser.add_argument(
        "--wait",
        type=float,
        default=5.0,
        help="Seconds to wait for the page's data request",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(name)s %(levelname)s %(asctime)s %(message)s",
        datefmt="%m/%d/%Y %I:%M:%S %p",
    )

    settings = get_client_settings()
    api = create_api_client(settings)
    app = App(api)
    logger.info("Rendering %s against %s", args.path, settings.main_service_url)
    try:
        app.navigate(args.path)
        if app.router.pending is not None:
            app.router.pending.join(args.wait)
        print(app.render())
    finally:
        app.close()
        api.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
