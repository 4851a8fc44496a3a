"""Stdlib logging setup for process-level output.

Application events go through logfire; this only configures the root
logger that uvicorn, alembic and third-party libraries write to.
"""

import logging
import sys

from eventflow.config import Settings

# Chatty libraries held at WARNING unless debugging
_QUIET_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "uvicorn.access")


def log_level(settings: Settings) -> int:
    """Log level for the environment, unless overridden in settings."""
    override = settings.observability.log_level
    if override:
        return logging.getLevelName(override.upper())
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "production":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure the root logger.

    Args:
        settings: Application settings
    """
    level = log_level(settings)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    quiet = level if settings.debug else max(level, logging.WARNING)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(quiet)
    logging.getLogger("eventflow").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
