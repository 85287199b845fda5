"""
Get Production Queue Use Case

Kitchen view of pending work: oldest orders first.
"""

from dataclasses import dataclass, field
from typing import Any

from production_service.core.domain import DomainException
from production_service.domains.production.application.use_cases.get_all_orders import GetAllOrdersUseCase
from production_service.domains.production.domain.entities.order import Order


@dataclass
class GetProductionQueueRequest:
    """
    Optional filters for the queue.

    ``status`` must equal the canonical status literal exactly.
    A ``limit`` of None or 0 returns every matching order.
    """

    status: str | None = None
    limit: int | None = None


@dataclass
class GetProductionQueueResponse:
    queue: list[Order] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.queue)

    def to_dict(self) -> dict[str, Any]:
        return {
            "queue": [order.to_dict() for order in self.queue],
            "total": self.total,
        }


class GetProductionQueueUseCase:
    """
    Use Case: Get Production Queue

    Filter by status, sort by creation time ascending (FIFO), then truncate.
    ``total`` is the size of the returned queue, not of the unfiltered list.
    """

    def __init__(self, get_all_orders: GetAllOrdersUseCase):
        self.get_all_orders = get_all_orders

    async def execute(self, request: GetProductionQueueRequest) -> GetProductionQueueResponse:
        result = await self.get_all_orders.execute()
        if result.is_err():
            raise DomainException("Erro ao buscar fila de produção", "QUEUE_UNAVAILABLE") from result.error

        orders = list(result.value.orders)

        if request.status:
            orders = [order for order in orders if order.status_value == request.status]

        orders.sort(key=lambda order: order.created_at)

        if request.limit:
            orders = orders[: request.limit]

        return GetProductionQueueResponse(queue=orders)


__all__ = [
    "GetProductionQueueUseCase",
    "GetProductionQueueRequest",
    "GetProductionQueueResponse",
]
