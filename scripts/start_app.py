#!/usr/bin/env python3
"""Start the Agora API under uvicorn.

Logfire is configured before the app module is imported so that import
time failures (bad settings, unreachable config) are reported too.
"""

import sys

import logfire
import uvicorn

from agora.config import Settings
from agora.util.logging import setup_logging
from agora.util.observability import configure_logfire


def main() -> int:
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    if not settings.moderation.enabled:
        logfire.warn("Comment moderation is disabled")

    try:
        logfire.info(
            "Starting Agora API",
            port=settings.port,
            environment=settings.environment,
            toxicity_scorer=settings.moderation.url,
        )
        uvicorn.run(
            "agora.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
