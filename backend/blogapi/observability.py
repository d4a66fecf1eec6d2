"""Logfire cloud observability initialization and instrumentation."""

import logging

import logfire
from fastapi import FastAPI

from blogapi import __version__
from blogapi.config import Settings

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging for CLI and server runs."""
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def initialize_logfire(settings: Settings, app: FastAPI | None = None) -> bool:
    """
    Initialize Logfire with request and database instrumentation.

    Instruments:
    - FastAPI request handling (when an app is given)
    - PyMongo commands issued through Motor
    - Python logging (bridges to Logfire)

    Returns:
        True if Logfire was configured, False if it was skipped or failed.
    """
    if not settings.logfire_token:
        logger.info("Logfire token not set - observability disabled")
        return False

    try:
        logfire.configure(
            token=settings.logfire_token,
            service_name="blogapi",
            service_version=__version__,
            environment=settings.environment,
        )

        if app is not None:
            logfire.instrument_fastapi(app)

        logfire.instrument_pymongo()

        root_logger = logging.getLogger()
        root_logger.addHandler(logfire.LogfireLoggingHandler())

        logger.info("Logfire cloud tracking initialized")
        return True

    except Exception as e:
        logger.warning(f"Failed to initialize Logfire: {e}")
        # Continue running - observability is optional
        return False
