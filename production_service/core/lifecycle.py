"""
Application lifecycle management using the FastAPI lifespan pattern.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from production_service.config.settings import get_settings
from production_service.core.container import get_container
from production_service.database.async_db import dispose_engine, init_db

logger = logging.getLogger(__name__)


class LifecycleManager:
    """
    Manages application lifecycle events.

    Startup creates the database schema when a database is configured;
    shutdown closes the gateway's HTTP client and the engine.
    """

    def __init__(self) -> None:
        self._initialized = False

    async def startup(self) -> None:
        if self._initialized:
            logger.warning("Lifecycle already initialized, skipping startup")
            return

        settings = get_settings()
        logger.info(f"Starting {settings.PROJECT_NAME} ({settings.ENVIRONMENT})")

        if settings.uses_database:
            await init_db()
        else:
            logger.warning("DB_URL not configured - orders are kept in memory")

        logger.info(
            f"Sibling services: orders={settings.ORDER_SERVICE_URL}, payment={settings.PAYMENT_SERVICE_URL}"
        )

        self._initialized = True
        logger.info("Application lifecycle startup completed")

    async def shutdown(self) -> None:
        if not self._initialized:
            logger.warning("Lifecycle not initialized, skipping shutdown")
            return

        logger.info("Stopping application lifecycle...")

        await get_container().aclose()
        if get_settings().uses_database:
            await dispose_engine()

        self._initialized = False
        logger.info("Application lifecycle shutdown completed")


# Global lifecycle manager instance
_lifecycle_manager: LifecycleManager | None = None


def get_lifecycle_manager() -> LifecycleManager:
    """Get or create the global lifecycle manager instance."""
    global _lifecycle_manager
    if _lifecycle_manager is None:
        _lifecycle_manager = LifecycleManager()
    return _lifecycle_manager


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Usage:
        app = FastAPI(lifespan=lifespan)
    """
    lifecycle = get_lifecycle_manager()

    await lifecycle.startup()

    yield

    await lifecycle.shutdown()
