#!/usr/bin/env python3
"""Run database migrations with Logfire error tracking.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py -1         # downgrade one revision
    python scripts/run_migrations.py <rev>      # upgrade to a revision
"""

import sys
import logfire
from alembic import command
from alembic.config import Config

from blogcomments.config import Settings
from blogcomments.util.logging import setup_logging
from blogcomments.util.observability import configure_logfire


def main(target: str = "head") -> int:
    """Run migrations and log any errors to Logfire.

    Args:
        target: Alembic revision; a negative relative step downgrades
    """
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting database migrations",
            environment=settings.environment,
            target=target,
        )

        # Create Alembic config
        alembic_cfg = Config("alembic.ini")

        if target.startswith("-"):
            command.downgrade(alembic_cfg, target)
        else:
            command.upgrade(alembic_cfg, target)

        logfire.info("Database migrations completed successfully", target=target)
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails and doesn't start with broken schema
        raise


if __name__ == "__main__":
    sys.exit(main(sys.argv[1] if len(sys.argv) > 1 else "head"))
