"""
Production API Dependencies

FastAPI dependencies for the production domain.
"""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from production_service.config.settings import get_settings
from production_service.core.container import DependencyContainer, get_container
from production_service.database.async_db import get_async_db_context
from production_service.domains.production.application.use_cases import (
    CheckoutOrderUseCase,
    CreateOrderUseCase,
    GetOrderPaymentStatusUseCase,
    GetProductionOrderDetailsUseCase,
    GetProductionQueueUseCase,
    MarkOrderReadyUseCase,
    ProcessPaymentApprovedUseCase,
    UpdateOrderStatusUseCase,
    UpdatePaymentStatusUseCase,
    UpdateProductionStatusUseCase,
)


def get_dependency_container() -> DependencyContainer:
    """Get dependency container instance."""
    return get_container()


async def get_db_session() -> AsyncGenerator[AsyncSession | None, None]:
    """Request-scoped session, or None when running without a database."""
    if not get_settings().uses_database:
        yield None
        return

    async with get_async_db_context() as session:
        yield session


def get_create_order_use_case(
    db: AsyncSession | None = Depends(get_db_session),
    container: DependencyContainer = Depends(get_dependency_container),
) -> CreateOrderUseCase:
    return container.production.create_create_order_use_case(db)


def get_checkout_order_use_case(
    db: AsyncSession | None = Depends(get_db_session),
    container: DependencyContainer = Depends(get_dependency_container),
) -> CheckoutOrderUseCase:
    return container.production.create_checkout_order_use_case(db)


def get_update_order_status_use_case(
    db: AsyncSession | None = Depends(get_db_session),
    container: DependencyContainer = Depends(get_dependency_container),
) -> UpdateOrderStatusUseCase:
    return container.production.create_update_order_status_use_case(db)


def get_update_payment_status_use_case(
    db: AsyncSession | None = Depends(get_db_session),
    container: DependencyContainer = Depends(get_dependency_container),
) -> UpdatePaymentStatusUseCase:
    return container.production.create_update_payment_status_use_case(db)


def get_order_payment_status_use_case(
    db: AsyncSession | None = Depends(get_db_session),
    container: DependencyContainer = Depends(get_dependency_container),
) -> GetOrderPaymentStatusUseCase:
    return container.production.create_get_order_payment_status_use_case(db)


def get_production_queue_use_case(
    db: AsyncSession | None = Depends(get_db_session),
    container: DependencyContainer = Depends(get_dependency_container),
) -> GetProductionQueueUseCase:
    return container.production.create_get_production_queue_use_case(db)


def get_production_order_details_use_case(
    db: AsyncSession | None = Depends(get_db_session),
    container: DependencyContainer = Depends(get_dependency_container),
) -> GetProductionOrderDetailsUseCase:
    return container.production.create_get_production_order_details_use_case(db)


def get_mark_order_ready_use_case(
    container: DependencyContainer = Depends(get_dependency_container),
) -> MarkOrderReadyUseCase:
    return container.production.create_mark_order_ready_use_case()


def get_process_payment_approved_use_case(
    container: DependencyContainer = Depends(get_dependency_container),
) -> ProcessPaymentApprovedUseCase:
    return container.production.create_process_payment_approved_use_case()


def get_update_production_status_use_case(
    container: DependencyContainer = Depends(get_dependency_container),
) -> UpdateProductionStatusUseCase:
    return container.production.create_update_production_status_use_case()


__all__ = [
    "get_dependency_container",
    "get_db_session",
    "get_create_order_use_case",
    "get_checkout_order_use_case",
    "get_update_order_status_use_case",
    "get_update_payment_status_use_case",
    "get_order_payment_status_use_case",
    "get_production_queue_use_case",
    "get_production_order_details_use_case",
    "get_mark_order_ready_use_case",
    "get_process_payment_approved_use_case",
    "get_update_production_status_use_case",
]
