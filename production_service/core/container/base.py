"""
Base Container - Shared Singletons.

Single Responsibility: Manage process-wide resources (HTTP gateway, fallback
order store).
"""

import logging

from production_service.clients.microservice_client import MicroserviceClient
from production_service.config.settings import get_settings
from production_service.domains.production.application.ports import (
    IMicroserviceGateway,
    IOrderRepository,
)
from production_service.domains.production.infrastructure.repositories import InMemoryOrderRepository

logger = logging.getLogger(__name__)


class BaseContainer:
    """
    Base container for shared singletons.

    Single Responsibility: Create and cache resources that live as long as
    the process.
    """

    def __init__(
        self,
        gateway: IMicroserviceGateway | None = None,
        order_repository: IOrderRepository | None = None,
    ):
        """
        Initialize base container.

        Args:
            gateway: Pre-built gateway, replaces the httpx MicroserviceClient
            order_repository: Pre-built repository used instead of the database
        """
        self.settings = get_settings()

        self._gateway_instance = gateway
        self._order_repository_override = order_repository
        self._in_memory_repository: InMemoryOrderRepository | None = None

        logger.info("BaseContainer initialized")

    def get_gateway(self) -> IMicroserviceGateway:
        """Get the sibling service gateway (singleton)."""
        if self._gateway_instance is None:
            logger.info(
                f"Creating MicroserviceClient: orders={self.settings.ORDER_SERVICE_URL}, "
                f"payment={self.settings.PAYMENT_SERVICE_URL}"
            )
            self._gateway_instance = MicroserviceClient()
        return self._gateway_instance

    def get_order_repository_override(self) -> IOrderRepository | None:
        return self._order_repository_override

    def get_in_memory_repository(self) -> InMemoryOrderRepository:
        """Process-wide order store used when DB_URL is not set."""
        if self._in_memory_repository is None:
            logger.info("Using in-memory order repository")
            self._in_memory_repository = InMemoryOrderRepository()
        return self._in_memory_repository

    async def aclose(self) -> None:
        """Release the gateway's HTTP client."""
        if isinstance(self._gateway_instance, MicroserviceClient):
            await self._gateway_instance.aclose()
