"""Logfire setup for the API process.

Services call logfire directly; this module only configures the SDK and
instruments the frameworks:

    with logfire.span("message_service.fetch_new", mentorship_id=mentorship_id):
        ...
    logfire.info("Message sent", message_id=message.id)
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from nyumba.config import ObservabilitySettings, Settings

SERVICE_NAME = "nyumba-mentorship"
SERVICE_VERSION = "0.1.0"


def _should_send(observability: ObservabilitySettings) -> bool:
    """An explicit flag wins; otherwise send only when a token is configured."""
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the current environment.

    Set ``OBSERVABILITY__LOGFIRE_TOKEN`` to ship spans to Logfire, or
    ``OBSERVABILITY__SEND_TO_LOGFIRE`` to force the choice. Without either
    everything stays on the console.
    """
    send_to_logfire = _should_send(settings.observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
        # Identity tokens travel in a cookie named auth_token
        scrubbing=logfire.ScrubbingOptions(extra_patterns=["auth_token"]),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        git_sha=settings.git_sha,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request.

    Clients poll for new messages every few seconds, so headers are left
    out of the spans.
    """
    logfire.instrument_fastapi(app, capture_headers=False)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement, tagging SQL with the active span."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
