#!/usr/bin/env python3
"""Apply database migrations without starting the API."""

import logging
import sys

from app.db.postgres.migrate import run_migrations
from app.main import configure_logging
from app.settings import Settings

logger = logging.getLogger(__name__)


def main() -> int:
    settings = Settings()
    configure_logging(settings.LOG_LEVEL)

    try:
        run_migrations(settings.database_url)
        return 0
    except Exception:
        logger.exception("Database migration failed")
        # Re-raise so the container fails and doesn't start with broken schema
        raise


if __name__ == "__main__":
    sys.exit(main())
