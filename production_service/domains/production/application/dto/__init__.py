"""
Production Application DTOs

Read-only snapshots of data owned by sibling services. They are held only
while a request is being aggregated.
"""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class OrderSnapshot:
    """Order as reported by the order-domain service"""

    id: str
    customer_id: str
    status: str | None = None
    payment_status: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "OrderSnapshot":
        return cls(
            id=str(data.get("id", "")),
            customer_id=str(data.get("customerId", data.get("customer_id", ""))),
            status=data.get("status"),
            payment_status=data.get("paymentStatus", data.get("payment_status")),
            created_at=_as_text(data.get("createdAt", data.get("created_at"))),
            updated_at=_as_text(data.get("updatedAt", data.get("updated_at"))),
        )


@dataclass(frozen=True)
class CustomerSnapshot:
    """Customer as reported by the order-domain service"""

    id: str
    name: str
    email: str
    cpf: str

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "CustomerSnapshot":
        return cls(
            id=str(data.get("id", "")),
            name=data.get("name", ""),
            email=data.get("email", ""),
            cpf=data.get("cpf", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ProductSnapshot:
    """Product as reported by the order-domain service"""

    id: str
    name: str
    description: str
    price: float
    category: str

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "ProductSnapshot":
        category = data.get("category", "")
        # Catalog may send the category as {"value": "Bebidas"} or {"name": ...}
        if isinstance(category, dict):
            category = category.get("value") or category.get("name") or ""
        return cls(
            id=str(data.get("id", "")),
            name=data.get("name", ""),
            description=data.get("description", ""),
            price=float(data.get("price") or 0),
            category=category,
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _as_text(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


__all__ = ["OrderSnapshot", "CustomerSnapshot", "ProductSnapshot"]
