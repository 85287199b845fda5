"""
Dependency Injection Container.

Centralized container for creating and managing all application dependencies.
This module is the facade that composes the domain containers.
"""

from __future__ import annotations

import logging

from production_service.domains.production.application.ports import (
    IMicroserviceGateway,
    IOrderRepository,
)

from .base import BaseContainer
from .production import ProductionContainer

logger = logging.getLogger(__name__)


class DependencyContainer:
    """
    Dependency Injection Container (Facade).

    Single Responsibility: Compose and delegate to domain-specific containers.
    """

    def __init__(
        self,
        gateway: IMicroserviceGateway | None = None,
        order_repository: IOrderRepository | None = None,
    ):
        """
        Initialize container with all domain sub-containers.

        Args:
            gateway: Optional gateway replacing the HTTP client
            order_repository: Optional repository replacing DB/in-memory storage
        """
        self._base = BaseContainer(gateway=gateway, order_repository=order_repository)
        self._production = ProductionContainer(self._base)

        logger.info("DependencyContainer initialized")

    @property
    def settings(self):
        return self._base.settings

    @property
    def production(self) -> ProductionContainer:
        """Direct access to the production container."""
        return self._production

    def get_gateway(self) -> IMicroserviceGateway:
        return self._base.get_gateway()

    def create_order_repository(self, db=None) -> IOrderRepository:
        return self._production.create_order_repository(db)

    async def aclose(self) -> None:
        await self._base.aclose()


# ============================================================
# GLOBAL CONTAINER INSTANCE
# ============================================================

_container: DependencyContainer | None = None


def get_container() -> DependencyContainer:
    """
    Get global container instance (singleton).

    Returns:
        DependencyContainer instance
    """
    global _container

    if _container is None:
        logger.info("Initializing global DependencyContainer")
        _container = DependencyContainer()

    return _container


def set_container(container: DependencyContainer) -> None:
    """Install a pre-built container (tests, alternative wiring)."""
    global _container
    _container = container


def reset_container() -> None:
    """
    Reset global container instance.

    Useful for testing or reconfiguration.
    """
    global _container
    logger.info("Resetting global DependencyContainer")
    _container = None


__all__ = [
    "BaseContainer",
    "DependencyContainer",
    "ProductionContainer",
    "get_container",
    "reset_container",
    "set_container",
]
