"""
Shared pytest fixtures for all tests.

Provides order factories, gateway doubles and sample snapshots from the
order-domain service.
"""

import os
from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

import pytest

# Ensure test environment before settings are read
os.environ["ENVIRONMENT"] = "test"
os.environ.pop("DB_URL", None)

from production_service.config.settings import reset_settings  # noqa: E402
from production_service.domains.production.application.dto import (  # noqa: E402
    CustomerSnapshot,
    OrderSnapshot,
    ProductSnapshot,
)
from production_service.domains.production.domain.entities.order import Order  # noqa: E402
from production_service.domains.production.domain.value_objects import (  # noqa: E402
    PaymentStatus,
    Status,
)
from production_service.domains.production.infrastructure.repositories import (  # noqa: E402
    InMemoryOrderRepository,
)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Each test reads the environment again."""
    reset_settings()
    yield
    reset_settings()


# ============================================================================
# ORDER FIXTURES
# ============================================================================


@pytest.fixture
def base_time() -> datetime:
    return datetime(2024, 5, 10, 12, 0, tzinfo=UTC)


@pytest.fixture
def make_order(base_time):
    """Factory for orders with optional status and payment status."""

    def _make(
        id: str = "order-1",
        customer_id: str = "123.456.789-09",
        product_ids: list[str] | None = None,
        status: Status | None = None,
        payment_status: PaymentStatus | None = None,
        minutes_ago: int = 0,
    ) -> Order:
        order = Order.create(
            customer_id=customer_id,
            id=id,
            product_ids=product_ids if product_ids is not None else ["prod-1"],
            created_at=base_time - timedelta(minutes=minutes_ago),
        )
        order.status = status
        order.payment_status = payment_status
        return order

    return _make


@pytest.fixture
def order_repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


# ============================================================================
# GATEWAY FIXTURES
# ============================================================================


@pytest.fixture
def sample_customer() -> CustomerSnapshot:
    return CustomerSnapshot(id="cust-1", name="Maria Silva", email="maria@example.com", cpf="123.456.789-09")


@pytest.fixture
def sample_products() -> dict[str, ProductSnapshot]:
    return {
        "prod-1": ProductSnapshot(
            id="prod-1", name="X-Burger", description="Hambúrguer", price=25.9, category="Lanches"
        ),
        "prod-2": ProductSnapshot(
            id="prod-2", name="Refrigerante", description="Lata 350ml", price=6.5, category="Bebidas"
        ),
        "prod-3": ProductSnapshot(
            id="prod-3", name="Pudim", description="Pudim de leite", price=9.0, category="Sobremesas"
        ),
    }


@pytest.fixture
def mock_gateway(sample_customer, sample_products):
    """Gateway double answering from the sample snapshots."""
    gateway = AsyncMock()
    gateway.get_customer_by_cpf = AsyncMock(return_value=sample_customer)
    gateway.get_product_by_id = AsyncMock(side_effect=lambda product_id: sample_products[product_id])
    gateway.get_order_by_id = AsyncMock(
        side_effect=lambda order_id: OrderSnapshot(id=order_id, customer_id=sample_customer.cpf)
    )
    gateway.update_order_status = AsyncMock(return_value=None)
    gateway.notify_payment_service = AsyncMock(return_value=None)
    return gateway
