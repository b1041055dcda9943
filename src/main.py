"""
Main application entry point.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from src.config.logging import configure_logging, get_logger
from src.config.settings import settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan() -> AsyncIterator[None]:
    """
    Application lifespan manager.

    Hosts that run the use cases (a web app, a worker, a scheduled job)
    enter this once around their own lifetime so logging is configured
    before the first use case executes.
    """
    configure_logging()
    logger.info(
        "Starting Property Maintenance Service",
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
    )

    try:
        yield
    finally:
        logger.info("Shutting down Property Maintenance Service")
