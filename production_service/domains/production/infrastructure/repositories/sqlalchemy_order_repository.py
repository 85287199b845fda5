"""
Order Repository Implementation

SQLAlchemy implementation of IOrderRepository.
"""

import logging
from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from production_service.domains.production.domain.entities.order import Order
from production_service.domains.production.domain.entities.order_product import (
    OrderProduct,
    OrderProductList,
)
from production_service.domains.production.domain.value_objects.order_status import (
    PaymentStatus,
    Status,
)
from production_service.models.db.orders import OrderModel, OrderProductModel

logger = logging.getLogger(__name__)


def _as_utc(value: datetime | None) -> datetime | None:
    # SQLite hands back naive datetimes
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class SQLAlchemyOrderRepository:
    """
    SQLAlchemy implementation of order repository.

    Orders live in ``orders``; their lines in ``order_products``.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, order_id: str) -> Order | None:
        """Get order by ID."""
        model = await self._get_model(order_id)
        return self._to_entity(model) if model else None

    async def find_all(self) -> list[Order]:
        """Get every order, oldest first."""
        result = await self.session.execute(
            select(OrderModel)
            .options(selectinload(OrderModel.products))
            .order_by(OrderModel.created_at)
        )
        return [self._to_entity(m) for m in result.scalars().all()]

    async def save(self, order: Order) -> Order:
        """Insert or update an order, replacing its lines."""
        try:
            model = await self._get_model(order.id)
            if model is None:
                model = OrderModel(id=order.id)
                self.session.add(model)

            model.customer_id = order.customer_id
            model.status = order.status.get_value() if order.status else None
            model.payment_status = order.payment_status.get_value() if order.payment_status else None
            model.created_at = order.created_at
            model.updated_at = order.updated_at
            model.products = self._to_line_models(order, model)

            await self.session.commit()
            logger.debug(f"Order {order.id} saved with {len(order.products)} lines")
            return order
        except Exception as e:
            logger.error(f"Error saving order {order.id}: {e}")
            await self.session.rollback()
            raise

    async def _get_model(self, order_id: str) -> OrderModel | None:
        result = await self.session.execute(
            select(OrderModel)
            .options(selectinload(OrderModel.products))
            .where(OrderModel.id == str(order_id))
        )
        return result.scalar_one_or_none()

    # Mapping methods

    def _to_line_models(self, order: Order, model: OrderModel) -> list[OrderProductModel]:
        """Reuse rows for lines that survived, create rows for new ones."""
        existing = {line.id: line for line in model.products or []}
        lines = []
        for position, line in enumerate(order.product_lines()):
            row = existing.get(line.id)
            if row is None:
                row = OrderProductModel(id=line.id, order_id=order.id, product_id=line.product_id)
            row.position = position
            lines.append(row)
        return lines

    def _to_entity(self, model: OrderModel) -> Order:
        """Convert model to entity."""
        products = OrderProductList(
            OrderProduct.create(order_id=line.order_id, product_id=line.product_id, id=line.id)
            for line in model.products or []
        )
        return Order(
            id=str(model.id),
            customer_id=model.customer_id,
            products=products,
            status=Status.create(model.status) if model.status else None,
            payment_status=PaymentStatus.create(model.payment_status) if model.payment_status else None,
            created_at=_as_utc(model.created_at),
            updated_at=_as_utc(model.updated_at),
        )


__all__ = ["SQLAlchemyOrderRepository"]
