"""
Production Application Ports

Interface definitions (ports) for the Production domain.
Uses Protocol for structural typing.
"""

from typing import Protocol, runtime_checkable

from production_service.domains.production.application.dto import (
    CustomerSnapshot,
    OrderSnapshot,
    ProductSnapshot,
)
from production_service.domains.production.domain.entities.order import Order


@runtime_checkable
class IOrderRepository(Protocol):
    """
    Interface for order repository.

    The only persistence boundary of the production core.
    """

    async def find_by_id(self, order_id: str) -> Order | None:
        """Get order by ID, None when absent"""
        ...

    async def find_all(self) -> list[Order]:
        """Get every known order"""
        ...

    async def save(self, order: Order) -> Order:
        """Insert or update an order with its lines"""
        ...


@runtime_checkable
class IMicroserviceGateway(Protocol):
    """
    Interface for outbound calls to the order-domain and payment services.

    Implementations raise MicroserviceNotFoundError, MicroserviceUpstreamError
    or MicroserviceCommunicationError; nothing is retried.
    """

    async def get_order_by_id(self, order_id: str) -> OrderSnapshot:
        """GET /order/{id} on the order-domain service"""
        ...

    async def get_customer_by_cpf(self, cpf: str) -> CustomerSnapshot:
        """GET /customers/{cpf} on the order-domain service"""
        ...

    async def get_product_by_id(self, product_id: str) -> ProductSnapshot:
        """GET /products/{id} on the order-domain service"""
        ...

    async def update_order_status(self, order_id: str, status: str) -> None:
        """PATCH /orders/{id}/status on the order-domain service"""
        ...

    async def notify_payment_service(self, order_id: str, status: str) -> None:
        """POST /orders/{id}/production-status on the payment service"""
        ...


__all__ = [
    "IOrderRepository",
    "IMicroserviceGateway",
]
