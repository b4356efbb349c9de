"""Logging configuration for the application."""

import logging
import sys

from folio.config import Settings
from folio.util.error import ConfigurationError


def setup_logging(settings: Settings) -> None:
    """Configure application logging.

    Logfire handles structured events; this sets up the stdlib root logger
    so uvicorn and library output share one format and level.

    Args:
        settings: Application settings

    Raises:
        ConfigurationError: If production runs with the default JWT secret
    """
    if settings.debug:
        level = logging.DEBUG
    elif settings.environment == "production":
        level = logging.WARNING
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    # Set third-party loggers to WARNING to reduce noise
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    logging.getLogger("folio").setLevel(level)

    logger = logging.getLogger(__name__)
    logger.info(
        f"Logging configured: environment={settings.environment}, level={logging.getLevelName(level)}"
    )

    if (
        settings.environment == "production"
        and settings.auth.jwt_secret == "CHANGE_ME_IN_PRODUCTION"
    ):
        raise ConfigurationError("AUTH__JWT_SECRET must be set in production")
