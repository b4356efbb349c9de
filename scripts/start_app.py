#!/usr/bin/env python3
"""Start the Folio API under uvicorn.

Logging and Logfire are configured here, before the app module is imported,
so that configuration problems and import-time failures are reported.
"""

import sys

import logfire
import uvicorn

from folio.config import Settings
from folio.util.logging import setup_logging
from folio.util.observability import configure_logfire

APP_IMPORT_PATH = "folio.interface.api.app:app"


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    reload = settings.environment == "development"
    logfire.info(
        "Starting Folio API",
        environment=settings.environment,
        port=settings.port,
        reload=reload,
    )

    try:
        uvicorn.run(
            APP_IMPORT_PATH,
            host="0.0.0.0",
            port=settings.port,
            reload=reload,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Exit non-zero so the container is restarted
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
