"""
Update Payment Status Use Case
"""

import logging
from dataclasses import dataclass

from production_service.core.domain import DomainException, Err, Ok, ResourceNotFoundException, Result
from production_service.domains.production.application.ports import IOrderRepository
from production_service.domains.production.domain.entities.order import Order

logger = logging.getLogger(__name__)


@dataclass
class UpdatePaymentStatusRequest:
    """Request for recording a payment outcome."""

    order_id: str
    payment_status: str


@dataclass
class UpdatePaymentStatusResponse:
    """Response from payment status update."""

    order: Order


class UpdatePaymentStatusUseCase:
    """
    Use Case: Update Payment Status

    Sets the payment status on an order. Any valid payment literal is
    accepted regardless of the current one.
    """

    def __init__(self, order_repository: IOrderRepository):
        self.order_repository = order_repository

    async def execute(
        self, request: UpdatePaymentStatusRequest
    ) -> Result[UpdatePaymentStatusResponse, DomainException]:
        order = await self.order_repository.find_by_id(request.order_id)

        if order is None:
            logger.warning(f"Payment status update requested for unknown order: {request.order_id}")
            return Err(ResourceNotFoundException("Order", request.order_id))

        try:
            order.set_payment_status(request.payment_status)
        except DomainException as e:
            return Err(e)

        await self.order_repository.save(order)

        logger.info(f"Order {order.id} payment status: {order.payment_status_value}")
        return Ok(UpdatePaymentStatusResponse(order=order))


__all__ = ["UpdatePaymentStatusUseCase", "UpdatePaymentStatusRequest", "UpdatePaymentStatusResponse"]
