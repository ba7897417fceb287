#!/usr/bin/env python3
"""Serve the mentorship API with uvicorn."""

import sys

import logfire
import uvicorn

from nyumba.config import Settings
from nyumba.util.logging import setup_logging
from nyumba.util.observability import configure_logfire


def main() -> int:
    """Configure logging, then hand the app over to uvicorn.

    Settings are validated before anything binds a port, so a production
    deploy with the placeholder JWT secret fails here.
    """
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting mentorship API",
            host=settings.host,
            port=settings.port,
            environment=settings.environment,
            git_sha=settings.git_sha,
        )
        uvicorn.run(
            "nyumba.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            reload=settings.environment == "development" and settings.debug,
        )
    except Exception as e:
        logfire.error(
            "Application startup failed",
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
