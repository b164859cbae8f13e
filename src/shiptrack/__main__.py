"""Process entry point: ``python -m shiptrack``."""

from __future__ import annotations

import logging
import sys

import uvicorn
from pydantic import ValidationError

from shiptrack.app import create_app
from shiptrack.config import ShiptrackConfig

logger = logging.getLogger("shiptrack")


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    try:
        config = ShiptrackConfig()
    except ValidationError:
        logger.error("Database URL is not defined! Set SHIPTRACK_DATABASE_URL")
        sys.exit(1)

    logging.getLogger().setLevel(config.log_level.upper())
    app = create_app(config)
    logger.info("Server running on port %d", config.port)
    # uvicorn turns SIGINT into: stop accepting, lifespan shutdown, exit 0.
    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
    main()
