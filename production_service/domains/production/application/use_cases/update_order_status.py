"""
Update Order Status Use Case

Either assigns a production stage directly or advances the order one stage.
"""

import logging
from dataclasses import dataclass

from production_service.core.domain import DomainException, Err, Ok, ResourceNotFoundException, Result
from production_service.domains.production.application.ports import IOrderRepository
from production_service.domains.production.domain.entities.order import Order

logger = logging.getLogger(__name__)


@dataclass
class UpdateOrderStatusRequest:
    """
    Request for updating an order status.

    ``status`` set: direct assignment, no forward-path check.
    ``status`` omitted: advance to the next stage (requires approved payment).
    """

    order_id: str
    status: str | None = None


@dataclass
class UpdateOrderStatusResponse:
    """Response from order status update."""

    order: Order


class UpdateOrderStatusUseCase:
    """
    Use Case: Update Order Status

    Responsibilities:
    - Load the order
    - Apply exactly one status change
    - Persist the result
    """

    def __init__(self, order_repository: IOrderRepository):
        self.order_repository = order_repository

    async def execute(self, request: UpdateOrderStatusRequest) -> Result[UpdateOrderStatusResponse, DomainException]:
        order = await self.order_repository.find_by_id(request.order_id)

        if order is None:
            logger.warning(f"Status update requested for unknown order: {request.order_id}")
            return Err(ResourceNotFoundException("Order", request.order_id))

        previous = order.status_value or "unset"
        try:
            if request.status is not None:
                order.set_status(request.status)
            else:
                order.advance_status()
        except DomainException as e:
            logger.warning(f"Status update rejected for order {order.id}: {e.message}")
            return Err(e)

        await self.order_repository.save(order)

        logger.info(f"Order {order.id} status: {previous} -> {order.status_value}")
        return Ok(UpdateOrderStatusResponse(order=order))


__all__ = ["UpdateOrderStatusUseCase", "UpdateOrderStatusRequest", "UpdateOrderStatusResponse"]
