"""
Production Scheduling Service

Domain service that derives the kitchen metadata shown next to an order:
estimated preparation time, priority and per-product preparation notes.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol


class CategorizedProduct(Protocol):
    """Anything with a product name and a category label."""

    name: str
    category: str


@dataclass(frozen=True)
class ProductionInfo:
    """Derived production metadata."""

    estimated_time: int
    priority: str
    notes: list[str]

    def to_dict(self) -> dict[str, object]:
        return {
            "estimatedTime": self.estimated_time,
            "priority": self.priority,
            "notes": list(self.notes),
        }


class ProductionSchedulingService:
    """
    Domain service for kitchen scheduling rules.

    Handles:
    - Estimated time: base minutes plus minutes per order line
    - Priority: by how long the order has been waiting
    - Notes: preparation hint per product category

    Example:
        ```python
        service = ProductionSchedulingService()
        info = service.build_production_info(products, created_at=order.created_at)
        print(info.estimated_time, info.priority)
        ```
    """

    BASE_TIME_MINUTES = 10
    TIME_PER_PRODUCT_MINUTES = 5

    HIGH_PRIORITY_AFTER_MINUTES = 30
    MEDIUM_PRIORITY_AFTER_MINUTES = 15

    HIGH_PRIORITY = "Alta"
    MEDIUM_PRIORITY = "Média"
    LOW_PRIORITY = "Baixa"

    DRINKS_CATEGORY = "Bebidas"
    DESSERTS_CATEGORY = "Sobremesas"

    def calculate_estimated_time(self, line_count: int) -> int:
        """Minutes needed to prepare an order with ``line_count`` lines."""
        return self.BASE_TIME_MINUTES + line_count * self.TIME_PER_PRODUCT_MINUTES

    def calculate_priority(self, created_at: datetime, now: datetime | None = None) -> str:
        """
        Priority label from the time the order has been waiting.

        Args:
            created_at: Order creation timestamp (naive values are read as UTC)
            now: Reference time, defaults to the current time
        """
        now = now or datetime.now(UTC)
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=UTC)
        if now.tzinfo is None:
            now = now.replace(tzinfo=UTC)

        minutes_waiting = (now - created_at).total_seconds() / 60

        if minutes_waiting > self.HIGH_PRIORITY_AFTER_MINUTES:
            return self.HIGH_PRIORITY
        if minutes_waiting > self.MEDIUM_PRIORITY_AFTER_MINUTES:
            return self.MEDIUM_PRIORITY
        return self.LOW_PRIORITY

    def generate_notes(self, products: Sequence[CategorizedProduct]) -> list[str]:
        """One preparation note per product, phrased by category."""
        notes: list[str] = []
        for product in products:
            if product.category == self.DRINKS_CATEGORY:
                notes.append(f"Preparar {product.name} gelado")
            elif product.category == self.DESSERTS_CATEGORY:
                notes.append(f"Manter {product.name} refrigerado")
            else:
                notes.append(f"Preparar {product.name} conforme padrão")
        return notes

    def build_production_info(
        self,
        products: Sequence[CategorizedProduct],
        created_at: datetime,
        now: datetime | None = None,
    ) -> ProductionInfo:
        """Compose estimated time, priority and notes for an order."""
        return ProductionInfo(
            estimated_time=self.calculate_estimated_time(len(products)),
            priority=self.calculate_priority(created_at, now=now),
            notes=self.generate_notes(products),
        )


__all__ = ["ProductionSchedulingService", "ProductionInfo", "CategorizedProduct"]
