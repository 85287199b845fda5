"""
Get Order Payment Status Use Case

Read-only lookup of the payment status of an order.
"""

from dataclasses import dataclass

from production_service.core.domain import DomainException, Err, Ok, ResourceNotFoundException, Result
from production_service.domains.production.application.ports import IOrderRepository


@dataclass
class GetOrderPaymentStatusRequest:
    order_id: str


@dataclass
class GetOrderPaymentStatusResponse:
    """Payment status literal, empty string when none was recorded."""

    status: str


class GetOrderPaymentStatusUseCase:
    """Use Case: Get Order Payment Status"""

    def __init__(self, order_repository: IOrderRepository):
        self.order_repository = order_repository

    async def execute(
        self, request: GetOrderPaymentStatusRequest
    ) -> Result[GetOrderPaymentStatusResponse, DomainException]:
        order = await self.order_repository.find_by_id(request.order_id)

        if order is None:
            return Err(ResourceNotFoundException("Order", request.order_id))

        return Ok(GetOrderPaymentStatusResponse(status=order.payment_status_value))


__all__ = ["GetOrderPaymentStatusUseCase", "GetOrderPaymentStatusRequest", "GetOrderPaymentStatusResponse"]
