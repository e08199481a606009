#!/usr/bin/env python3
"""Start the API server under uvicorn, reporting startup errors to Logfire."""

import sys

import logfire
import uvicorn

from discuss.config import Settings
from discuss.util.logging import setup_logging
from discuss.util.observability import configure_logfire


def main() -> int:
    """Serve the API until interrupted."""
    settings = Settings()

    setup_logging(settings)
    # Before the app module is imported, so its instrumentation is picked up
    configure_logfire(settings)

    logfire.info(
        "Starting Discuss API",
        host=settings.host,
        port=settings.port,
        environment=settings.environment,
    )
    try:
        uvicorn.run(
            "discuss.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            reload=settings.environment == "development",
            proxy_headers=True,
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
