#!/usr/bin/env python3
"""Serve the API with uvicorn.

Logging and Logfire are configured before the app module is imported so
failures while building the app are reported too.
"""

import logging
import sys

import logfire
import uvicorn

from eventflow.config import Settings
from eventflow.util.logging import log_level, setup_logging
from eventflow.util.observability import configure_logfire

APP = "eventflow.interface.api.app:app"


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Starting API",
        host=settings.server.host,
        port=settings.server.port,
        git_sha=settings.git_sha,
    )
    try:
        uvicorn.run(
            APP,
            host=settings.server.host,
            port=settings.server.port,
            reload=settings.server.reload,
            log_level=logging.getLevelName(log_level(settings)).lower(),
        )
    except Exception:
        logfire.exception("API failed to start")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
