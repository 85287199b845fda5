"""
Get Production Order Details Use Case

Builds the consolidated kitchen view of one order: the order itself, the
customer and product snapshots from the order-domain service, and derived
scheduling metadata.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from production_service.core.domain import DomainException, ResourceNotFoundException
from production_service.domains.production.application.dto import CustomerSnapshot, ProductSnapshot
from production_service.domains.production.application.ports import IMicroserviceGateway
from production_service.domains.production.application.use_cases.get_all_orders import GetAllOrdersUseCase
from production_service.domains.production.domain.entities.order import Order
from production_service.domains.production.domain.services import (
    ProductionInfo,
    ProductionSchedulingService,
)

logger = logging.getLogger(__name__)


@dataclass
class GetProductionOrderDetailsRequest:
    order_id: str
    now: datetime | None = None


@dataclass
class GetProductionOrderDetailsResponse:
    """Order, customer, products (in line order) and production info."""

    order: Order
    customer: CustomerSnapshot
    products: list[ProductSnapshot] = field(default_factory=list)
    production_info: ProductionInfo | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "order": self.order.to_summary_dict(),
            "customer": self.customer.to_dict(),
            "products": [product.to_dict() for product in self.products],
            "productionInfo": self.production_info.to_dict() if self.production_info else None,
        }


class GetProductionOrderDetailsUseCase:
    """
    Use Case: Get Production Order Details

    Responsibilities:
    - Find the order among all known orders
    - Fetch the customer and every product concurrently
    - Derive estimated time, priority and preparation notes

    Errors from the gateway propagate unchanged.
    """

    def __init__(
        self,
        get_all_orders: GetAllOrdersUseCase,
        gateway: IMicroserviceGateway,
        scheduling_service: ProductionSchedulingService | None = None,
    ):
        self.get_all_orders = get_all_orders
        self.gateway = gateway
        self.scheduling_service = scheduling_service or ProductionSchedulingService()

    async def execute(self, request: GetProductionOrderDetailsRequest) -> GetProductionOrderDetailsResponse:
        """
        Raises:
            DomainException: "Erro ao buscar pedidos" when orders cannot be listed
            ResourceNotFoundException: "Pedido não encontrado"
            MicroserviceError: any gateway failure, verbatim
        """
        result = await self.get_all_orders.execute()
        if result.is_err():
            raise DomainException("Erro ao buscar pedidos", "ORDERS_UNAVAILABLE") from result.error

        # Linear scan over every order; the repository keeps no keyed production index
        order = next((o for o in result.value.orders if str(o.id) == request.order_id), None)
        if order is None:
            raise ResourceNotFoundException("Order", request.order_id, message="Pedido não encontrado")

        product_ids = [line.product_id for line in order.product_lines()]

        customer, *products = await asyncio.gather(
            self.gateway.get_customer_by_cpf(order.customer_id),
            *(self.gateway.get_product_by_id(product_id) for product_id in product_ids),
        )

        production_info = self.scheduling_service.build_production_info(
            products,
            created_at=order.created_at,
            now=request.now,
        )

        logger.info(
            f"Production details for order {order.id}: {len(products)} products, "
            f"priority {production_info.priority}"
        )

        return GetProductionOrderDetailsResponse(
            order=order,
            customer=customer,
            products=list(products),
            production_info=production_info,
        )


__all__ = [
    "GetProductionOrderDetailsUseCase",
    "GetProductionOrderDetailsRequest",
    "GetProductionOrderDetailsResponse",
]
