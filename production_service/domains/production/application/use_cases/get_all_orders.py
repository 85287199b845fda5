"""
Get All Orders Use Case

Lists every known order; the source for the production views.
"""

from dataclasses import dataclass, field

from production_service.core.domain import DomainException, Ok, Result
from production_service.domains.production.application.ports import IOrderRepository
from production_service.domains.production.domain.entities.order import Order


@dataclass
class GetAllOrdersResponse:
    orders: list[Order] = field(default_factory=list)


class GetAllOrdersUseCase:
    """Use Case: Get All Orders"""

    def __init__(self, order_repository: IOrderRepository):
        self.order_repository = order_repository

    async def execute(self) -> Result[GetAllOrdersResponse, DomainException]:
        orders = await self.order_repository.find_all()
        return Ok(GetAllOrdersResponse(orders=list(orders)))


__all__ = ["GetAllOrdersUseCase", "GetAllOrdersResponse"]
