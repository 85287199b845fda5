"""
Production order models
"""

import uuid
from typing import List

from sqlalchemy import Column, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, relationship

from .base import Base, TimestampMixin


class OrderModel(Base, TimestampMixin):
    """Pedidos conocidos por la cocina"""

    __tablename__ = "orders"

    # String ids keep the table portable between PostgreSQL and SQLite
    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    customer_id = Column(String(64), nullable=False)

    # Canonical literals (Recebido, Preparação, ...); null while unset
    status = Column(String(20), nullable=True)
    payment_status = Column(String(20), nullable=True)

    products: Mapped[List["OrderProductModel"]] = relationship(
        "OrderProductModel",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderProductModel.position",
        lazy="selectin",
    )

    __table_args__ = (
        Index("idx_orders_status", status),
        Index("idx_orders_created_at", "created_at"),
    )

    def __repr__(self):
        return f"<OrderModel(id='{self.id}', status='{self.status}', payment_status='{self.payment_status}')>"


class OrderProductModel(Base):
    """Líneas de producto de un pedido"""

    __tablename__ = "order_products"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    order_id = Column(String(36), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False)
    product_id = Column(String(64), nullable=False)
    # Line order within the order
    position = Column(Integer, nullable=False, default=0)

    order: Mapped["OrderModel"] = relationship("OrderModel", back_populates="products")

    __table_args__ = (Index("idx_order_products_order", order_id),)

    def __repr__(self):
        return f"<OrderProductModel(order_id='{self.order_id}', product_id='{self.product_id}')>"
