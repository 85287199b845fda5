"""
In-memory order repository.

Used when no database is configured, and in tests.
"""

from production_service.domains.production.domain.entities.order import Order


class InMemoryOrderRepository:
    """
    Dict-backed IOrderRepository.

    Stores the aggregate instances themselves; a later ``save`` of the same
    id replaces the earlier one.
    """

    def __init__(self, orders: list[Order] | None = None):
        self._orders: dict[str, Order] = {}
        for order in orders or []:
            self._orders[order.id] = order

    async def find_by_id(self, order_id: str) -> Order | None:
        return self._orders.get(str(order_id))

    async def find_all(self) -> list[Order]:
        return list(self._orders.values())

    async def save(self, order: Order) -> Order:
        self._orders[order.id] = order
        return order

    def clear(self) -> None:
        self._orders.clear()

    def __len__(self) -> int:
        return len(self._orders)


__all__ = ["InMemoryOrderRepository"]
