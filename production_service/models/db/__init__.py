"""
Database models package
"""

from .base import Base, TimestampMixin
from .orders import OrderModel, OrderProductModel

__all__ = [
    "Base",
    "TimestampMixin",
    "OrderModel",
    "OrderProductModel",
]
