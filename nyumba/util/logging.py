"""Standard library logging for the API process.

Application events go through logfire. This covers the libraries that log
through ``logging`` (uvicorn, alembic, asyncpg).
"""

import logging
import sys

from nyumba.config import Settings

# Chatty at INFO and duplicated by logfire instrumentation
QUIET_LOGGERS = ("httpx", "sqlalchemy.engine", "uvicorn.access")


def _level_for(settings: Settings) -> int:
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "test":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure the root logger for the current environment."""
    level = _level_for(settings)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
