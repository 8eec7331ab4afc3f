"""Observability configuration using Logfire.

Logfire provides structured logging and tracing on top of OpenTelemetry.
Services log through it directly:

    logfire.info("Comment created", comment_id=comment.id, post_id=post.id)

    with logfire.span("like_service.toggle", target="post", target_id=post_id):
        ...

The helpers below configure the SDK once per process and attach the
FastAPI, SQLAlchemy and httpx integrations.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from agora.config import Settings

SERVICE_NAME = "agora-api"

# Polled by load balancers; tracing them only adds noise
UNTRACED_URLS = "/health"


def _send_to_logfire(settings: Settings) -> bool:
    """Explicit setting wins, otherwise send only when a token is configured."""
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the running process.

    Console output is always on; spans leave the process only when
    ``_send_to_logfire`` allows it.

    Args:
        settings: Application settings
    """
    send = _send_to_logfire(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send,
        moderation_enabled=settings.moderation.enabled,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request except health checks.

    Headers are not captured because Authorization carries bearer tokens.
    """

    def _request_attributes(request, attributes):
        result = {**attributes, "method": request.method, "path": request.url.path}
        if request.client:
            result["client_host"] = request.client.host
        return result

    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        excluded_urls=UNTRACED_URLS,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued through the given engine."""
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # Add SQL comments with span context
    )


def instrument_httpx() -> None:
    """Trace outgoing calls to the toxicity scorer."""
    logfire.instrument_httpx()
