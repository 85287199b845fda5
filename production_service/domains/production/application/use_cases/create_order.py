"""
Create Order Use Case

Places a new order for a customer with its product lines.
"""

import logging
from dataclasses import dataclass, field

from production_service.core.domain import DomainException, Err, Ok, Result, ValidationException
from production_service.domains.production.application.ports import IOrderRepository
from production_service.domains.production.domain.entities.order import Order

logger = logging.getLogger(__name__)


@dataclass
class CreateOrderRequest:
    """Request for placing an order."""

    customer_id: str
    product_ids: list[str] = field(default_factory=list)


@dataclass
class CreateOrderResponse:
    order: Order


class CreateOrderUseCase:
    """
    Use Case: Create Order

    The new order has no status and no payment status until the first
    lifecycle event.
    """

    def __init__(self, order_repository: IOrderRepository):
        self.order_repository = order_repository

    async def execute(self, request: CreateOrderRequest) -> Result[CreateOrderResponse, DomainException]:
        if not request.customer_id:
            return Err(ValidationException("Customer ID is required", field="customer_id"))

        try:
            order = Order.create(customer_id=request.customer_id, product_ids=request.product_ids)
        except DomainException as e:
            return Err(e)

        saved = await self.order_repository.save(order)

        logger.info(f"Order created: {saved.id} ({len(saved.products)} products)")
        return Ok(CreateOrderResponse(order=saved))


__all__ = ["CreateOrderUseCase", "CreateOrderRequest", "CreateOrderResponse"]
