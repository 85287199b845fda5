"""
Production Domain Layer

Domain-Driven Design implementation for the kitchen production bounded context.

This module contains:
- Entities: Order aggregate and its order lines
- Value Objects: Status and PaymentStatus vocabularies
- Domain Services: Production scheduling rules
"""

from production_service.domains.production.domain.entities import Order, OrderProduct, OrderProductList
from production_service.domains.production.domain.services import ProductionInfo, ProductionSchedulingService
from production_service.domains.production.domain.value_objects import PaymentStatus, Status

__all__ = [
    "Order",
    "OrderProduct",
    "OrderProductList",
    "Status",
    "PaymentStatus",
    "ProductionSchedulingService",
    "ProductionInfo",
]
