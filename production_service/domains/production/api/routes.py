"""
Production API Routes

FastAPI routers for the order lifecycle and kitchen endpoints.
Use-case ``Err`` results are raised here and mapped by the exception handlers.
"""

from typing import Any

from fastapi import APIRouter, Depends, Query, status

from production_service.domains.production.api.dependencies import (
    get_checkout_order_use_case,
    get_create_order_use_case,
    get_mark_order_ready_use_case,
    get_order_payment_status_use_case,
    get_process_payment_approved_use_case,
    get_production_order_details_use_case,
    get_production_queue_use_case,
    get_update_order_status_use_case,
    get_update_payment_status_use_case,
    get_update_production_status_use_case,
)
from production_service.domains.production.api.schemas import (
    CreateOrderRequest,
    MarkOrderReadyRequest,
    PaymentApprovedRequest,
    PaymentStatusResponse,
    UpdateOrderStatusRequest,
    UpdatePaymentStatusRequest,
    UpdateProductionStatusRequest,
)
from production_service.domains.production.application import use_cases as uc

orders_router = APIRouter(prefix="/orders", tags=["Orders"])
production_router = APIRouter(prefix="/production", tags=["Production"])


# ==================== ORDERS ====================


@orders_router.post("", status_code=status.HTTP_201_CREATED)
async def create_order(
    request: CreateOrderRequest,
    use_case: uc.CreateOrderUseCase = Depends(get_create_order_use_case),
) -> dict[str, Any]:
    """Place a new order (status and payment status unset)."""
    result = await use_case.execute(
        uc.CreateOrderRequest(customer_id=request.customer_id, product_ids=request.product_ids)
    )
    return result.unwrap().order.to_dict()


@orders_router.post("/{order_id}/checkout")
async def checkout_order(
    order_id: str,
    use_case: uc.CheckoutOrderUseCase = Depends(get_checkout_order_use_case),
) -> dict[str, Any]:
    """Finalize an order."""
    result = await use_case.execute(uc.CheckoutOrderRequest(order_id=order_id))
    return result.unwrap().order.to_dict()


@orders_router.patch("/{order_id}/status")
async def update_order_status(
    order_id: str,
    request: UpdateOrderStatusRequest | None = None,
    use_case: uc.UpdateOrderStatusUseCase = Depends(get_update_order_status_use_case),
) -> dict[str, Any]:
    """Set the status, or advance it one stage when no status is given."""
    new_status = request.status if request else None
    result = await use_case.execute(uc.UpdateOrderStatusRequest(order_id=order_id, status=new_status))
    return result.unwrap().order.to_dict()


@orders_router.patch("/{order_id}/payment-status")
async def update_payment_status(
    order_id: str,
    request: UpdatePaymentStatusRequest,
    use_case: uc.UpdatePaymentStatusUseCase = Depends(get_update_payment_status_use_case),
) -> dict[str, Any]:
    """Record the payment outcome of an order."""
    result = await use_case.execute(
        uc.UpdatePaymentStatusRequest(order_id=order_id, payment_status=request.payment_status)
    )
    return result.unwrap().order.to_dict()


@orders_router.get("/{order_id}/payment-status", response_model=PaymentStatusResponse)
async def get_payment_status(
    order_id: str,
    use_case: uc.GetOrderPaymentStatusUseCase = Depends(get_order_payment_status_use_case),
):
    result = await use_case.execute(uc.GetOrderPaymentStatusRequest(order_id=order_id))
    return PaymentStatusResponse(status=result.unwrap().status)


@orders_router.post("/{order_id}/payment-approved")
async def payment_approved(
    order_id: str,
    request: PaymentApprovedRequest | None = None,
    use_case: uc.ProcessPaymentApprovedUseCase = Depends(get_process_payment_approved_use_case),
) -> dict[str, Any]:
    """Notification from the payment service that the order was paid."""
    target_id = (request.order_id if request else None) or order_id
    response = await use_case.execute(uc.ProcessPaymentApprovedRequest(order_id=target_id))
    return response.to_dict()


# ==================== PRODUCTION ====================


@production_router.get("/queue")
async def get_production_queue(
    status_filter: str | None = Query(None, alias="status"),
    limit: int | None = Query(None, ge=0),
    use_case: uc.GetProductionQueueUseCase = Depends(get_production_queue_use_case),
) -> dict[str, Any]:
    """Orders waiting in the kitchen, oldest first."""
    response = await use_case.execute(uc.GetProductionQueueRequest(status=status_filter, limit=limit))
    return response.to_dict()


@production_router.get("/orders/{order_id}/details")
async def get_production_order_details(
    order_id: str,
    use_case: uc.GetProductionOrderDetailsUseCase = Depends(get_production_order_details_use_case),
) -> dict[str, Any]:
    """Order with customer, products and production info."""
    response = await use_case.execute(uc.GetProductionOrderDetailsRequest(order_id=order_id))
    return response.to_dict()


@production_router.post("/orders/{order_id}/ready")
async def mark_order_ready(
    order_id: str,
    request: MarkOrderReadyRequest | None = None,
    use_case: uc.MarkOrderReadyUseCase = Depends(get_mark_order_ready_use_case),
) -> dict[str, Any]:
    request = request or MarkOrderReadyRequest()
    response = await use_case.execute(
        uc.MarkOrderReadyRequest(order_id=order_id, notes=request.notes, ready_time=request.ready_time)
    )
    return response.to_dict()


@production_router.patch("/orders/{order_id}/status")
async def update_production_status(
    order_id: str,
    request: UpdateProductionStatusRequest,
    use_case: uc.UpdateProductionStatusUseCase = Depends(get_update_production_status_use_case),
) -> dict[str, Any]:
    response = await use_case.execute(
        uc.UpdateProductionStatusRequest(order_id=order_id, status=request.status, notes=request.notes)
    )
    return response.to_dict()


__all__ = ["orders_router", "production_router"]
