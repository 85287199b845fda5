"""
Order line entries and their mutation-tracked collection.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from production_service.core.domain import ValidationException, generate_uuid_str


@dataclass(frozen=True)
class OrderProduct:
    """
    Reference from an order to one ordered product.

    Immutable once created; identity is its own id.
    """

    order_id: str
    product_id: str
    id: str = field(default_factory=generate_uuid_str)

    def __post_init__(self):
        if not self.order_id or not self.product_id:
            raise ValidationException(
                "Order line requires an order id and a product id",
                field="order_product",
            )

    @classmethod
    def create(cls, order_id: str, product_id: str, id: str | None = None) -> "OrderProduct":
        """Factory mirroring the aggregate's ``create``."""
        if id is None:
            return cls(order_id=str(order_id), product_id=str(product_id))
        return cls(order_id=str(order_id), product_id=str(product_id), id=str(id))

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "productId": self.product_id}


class OrderProductList:
    """
    Ordered collection of order lines that records what changed.

    ``get_new_items`` and ``get_removed_items`` describe the difference
    against the initial contents. Persistence does not rely on them; the
    SQLAlchemy repository reconciles line rows by id.
    """

    def __init__(self, initial_items: Iterable[OrderProduct] | None = None):
        self._current_items: list[OrderProduct] = list(initial_items or [])
        self._initial_items: list[OrderProduct] = list(self._current_items)
        self._new_items: list[OrderProduct] = []
        self._removed_items: list[OrderProduct] = []

    def get_items(self) -> list[OrderProduct]:
        return list(self._current_items)

    def get_new_items(self) -> list[OrderProduct]:
        return list(self._new_items)

    def get_removed_items(self) -> list[OrderProduct]:
        return list(self._removed_items)

    def exists(self, item: OrderProduct) -> bool:
        return any(current.id == item.id for current in self._current_items)

    def _was_initial(self, item: OrderProduct) -> bool:
        return any(initial.id == item.id for initial in self._initial_items)

    def add(self, item: OrderProduct) -> None:
        if self.exists(item):
            return
        self._removed_items = [removed for removed in self._removed_items if removed.id != item.id]
        if not self._was_initial(item):
            self._new_items.append(item)
        self._current_items.append(item)

    def remove(self, item: OrderProduct) -> None:
        if not self.exists(item):
            return
        self._current_items = [current for current in self._current_items if current.id != item.id]
        if any(new.id == item.id for new in self._new_items):
            self._new_items = [new for new in self._new_items if new.id != item.id]
            return
        self._removed_items.append(item)

    def update(self, items: Iterable[OrderProduct]) -> None:
        """Replace the whole collection, recording additions and removals."""
        items = list(items)
        wanted = {item.id for item in items}
        for current in self.get_items():
            if current.id not in wanted:
                self.remove(current)
        for item in items:
            self.add(item)
        # Keep the caller's ordering
        self._current_items = items

    def __iter__(self) -> Iterator[OrderProduct]:
        return iter(self._current_items)

    def __len__(self) -> int:
        return len(self._current_items)


__all__ = ["OrderProduct", "OrderProductList"]
