"""
Checkout Order Use Case

Marks an order as finalized once the customer has completed and paid.
"""

import logging
from dataclasses import dataclass

from production_service.core.domain import DomainException, Err, Ok, ResourceNotFoundException, Result
from production_service.domains.production.application.ports import IOrderRepository
from production_service.domains.production.domain.entities.order import Order

logger = logging.getLogger(__name__)


@dataclass
class CheckoutOrderRequest:
    """Request for checking out an order."""

    order_id: str


@dataclass
class CheckoutOrderResponse:
    """Response from order checkout."""

    order: Order


class CheckoutOrderUseCase:
    """
    Use Case: Checkout Order

    Checkout is the terminal "customer has fully completed and paid" event.
    It sets the status to Finalizado directly, whatever the current stage.

    Responsibilities:
    - Load the order
    - Finalize it
    - Persist it once
    """

    def __init__(self, order_repository: IOrderRepository):
        """
        Initialize use case with dependencies.

        Args:
            order_repository: Repository for order data access
        """
        self.order_repository = order_repository

    async def execute(self, request: CheckoutOrderRequest) -> Result[CheckoutOrderResponse, DomainException]:
        """
        Finalize an order.

        Args:
            request: Checkout request

        Returns:
            Ok(CheckoutOrderResponse) or Err(ResourceNotFoundException)
        """
        order = await self.order_repository.find_by_id(request.order_id)

        if order is None:
            logger.warning(f"Checkout requested for unknown order: {request.order_id}")
            return Err(ResourceNotFoundException("Order", request.order_id))

        order.finalize()
        await self.order_repository.save(order)

        logger.info(f"Order checked out: {order.id}")
        return Ok(CheckoutOrderResponse(order=order))


__all__ = ["CheckoutOrderUseCase", "CheckoutOrderRequest", "CheckoutOrderResponse"]
