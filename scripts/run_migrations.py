#!/usr/bin/env python3
"""Upgrade the database schema.

Usage:
    python scripts/run_migrations.py [revision]

The revision defaults to "head". Failures are reported to Logfire and
re-raised so a deployment stops before the app starts on a stale schema.
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from propmgmt.config import Settings
from propmgmt.util.observability import configure_logfire


def upgrade(revision: str = "head") -> None:
    """Run alembic upgrade to the given revision."""
    config = Config("alembic.ini")
    with logfire.span("migrations.upgrade", revision=revision):
        command.upgrade(config, revision)


def main(argv: list[str]) -> int:
    settings = Settings()
    configure_logfire(settings)

    revision = argv[1] if len(argv) > 1 else "head"
    try:
        upgrade(revision)
    except Exception as e:
        logfire.error(
            "Database migration failed",
            revision=revision,
            environment=settings.environment,
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    logfire.info("Database schema upgraded", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
