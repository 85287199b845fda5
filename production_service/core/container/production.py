"""
Production Domain Container.

Single Responsibility: Wire all production domain dependencies.
"""

import logging
from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from production_service.domains.production.application.ports import IOrderRepository
from production_service.domains.production.application.use_cases import (
    CheckoutOrderUseCase,
    CreateOrderUseCase,
    GetAllOrdersUseCase,
    GetOrderPaymentStatusUseCase,
    GetProductionOrderDetailsUseCase,
    GetProductionQueueUseCase,
    MarkOrderReadyUseCase,
    ProcessPaymentApprovedUseCase,
    UpdateOrderStatusUseCase,
    UpdatePaymentStatusUseCase,
    UpdateProductionStatusUseCase,
)
from production_service.domains.production.domain.services import ProductionSchedulingService
from production_service.domains.production.infrastructure.repositories import SQLAlchemyOrderRepository

if TYPE_CHECKING:
    from production_service.core.container.base import BaseContainer

logger = logging.getLogger(__name__)


class ProductionContainer:
    """
    Production domain container.

    Single Responsibility: Create production repositories and use cases.
    ``db`` is the request's AsyncSession, or None when no database is
    configured.
    """

    def __init__(self, base: "BaseContainer"):
        """
        Initialize production container.

        Args:
            base: BaseContainer with shared singletons
        """
        self._base = base
        self._scheduling_service = ProductionSchedulingService()

    # ==================== REPOSITORIES ====================

    def create_order_repository(self, db: AsyncSession | None = None) -> IOrderRepository:
        """Create Order Repository."""
        override = self._base.get_order_repository_override()
        if override is not None:
            return override
        if db is None:
            return self._base.get_in_memory_repository()
        return SQLAlchemyOrderRepository(session=db)

    # ==================== LIFECYCLE USE CASES ====================

    def create_create_order_use_case(self, db=None) -> CreateOrderUseCase:
        return CreateOrderUseCase(order_repository=self.create_order_repository(db))

    def create_checkout_order_use_case(self, db=None) -> CheckoutOrderUseCase:
        return CheckoutOrderUseCase(order_repository=self.create_order_repository(db))

    def create_update_order_status_use_case(self, db=None) -> UpdateOrderStatusUseCase:
        return UpdateOrderStatusUseCase(order_repository=self.create_order_repository(db))

    def create_update_payment_status_use_case(self, db=None) -> UpdatePaymentStatusUseCase:
        return UpdatePaymentStatusUseCase(order_repository=self.create_order_repository(db))

    def create_get_order_payment_status_use_case(self, db=None) -> GetOrderPaymentStatusUseCase:
        return GetOrderPaymentStatusUseCase(order_repository=self.create_order_repository(db))

    def create_get_all_orders_use_case(self, db=None) -> GetAllOrdersUseCase:
        return GetAllOrdersUseCase(order_repository=self.create_order_repository(db))

    # ==================== PRODUCTION USE CASES ====================

    def create_get_production_queue_use_case(self, db=None) -> GetProductionQueueUseCase:
        """Create GetProductionQueueUseCase with dependencies."""
        return GetProductionQueueUseCase(get_all_orders=self.create_get_all_orders_use_case(db))

    def create_get_production_order_details_use_case(self, db=None) -> GetProductionOrderDetailsUseCase:
        """Create GetProductionOrderDetailsUseCase with dependencies."""
        return GetProductionOrderDetailsUseCase(
            get_all_orders=self.create_get_all_orders_use_case(db),
            gateway=self._base.get_gateway(),
            scheduling_service=self._scheduling_service,
        )

    def create_mark_order_ready_use_case(self) -> MarkOrderReadyUseCase:
        return MarkOrderReadyUseCase(gateway=self._base.get_gateway())

    def create_process_payment_approved_use_case(self) -> ProcessPaymentApprovedUseCase:
        return ProcessPaymentApprovedUseCase(gateway=self._base.get_gateway())

    def create_update_production_status_use_case(self) -> UpdateProductionStatusUseCase:
        return UpdateProductionStatusUseCase(gateway=self._base.get_gateway())
