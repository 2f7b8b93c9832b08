#!/usr/bin/env python3
"""Start the Blog API under uvicorn."""

import logging
import sys

import uvicorn

from app.main import configure_logging
from app.settings import Settings

logger = logging.getLogger(__name__)


def main() -> int:
    settings = Settings()
    configure_logging(settings.LOG_LEVEL)

    logger.info(f"Server starting on {settings.SERVER_HOST}:{settings.SERVER_PORT}")
    uvicorn.run(
        "app.main:app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
