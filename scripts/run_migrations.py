#!/usr/bin/env python3
"""Apply or roll back the mentorship schema.

    python scripts/run_migrations.py              # upgrade to head
    python scripts/run_migrations.py --downgrade base
"""

import argparse
import sys

import logfire
from alembic import command
from alembic.config import Config

from nyumba.config import Settings
from nyumba.util.logging import setup_logging
from nyumba.util.observability import configure_logfire


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("revision", nargs="?", default="head")
    parser.add_argument(
        "--downgrade",
        metavar="REVISION",
        help="Roll back to REVISION instead of upgrading",
    )
    parser.add_argument("--config", default="alembic.ini")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run alembic against the configured database, reporting to Logfire."""
    args = parse_args(sys.argv[1:] if argv is None else argv)
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    alembic_cfg = Config(args.config)
    direction = "downgrade" if args.downgrade else "upgrade"
    target = args.downgrade or args.revision

    with logfire.span("run_migrations", direction=direction, target=target):
        try:
            if args.downgrade:
                command.downgrade(alembic_cfg, target)
            else:
                command.upgrade(alembic_cfg, target)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                direction=direction,
                target=target,
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # A half-migrated schema must stop the deploy
            raise

    logfire.info("Database migrations applied", direction=direction, target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main())
