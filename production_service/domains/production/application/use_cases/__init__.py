"""
Production Use Cases

Each use case represents a single business operation.

Order lifecycle use cases return Ok/Err. Production workflows talk to the
sibling services and raise.
"""

from .checkout_order import (
    CheckoutOrderRequest,
    CheckoutOrderResponse,
    CheckoutOrderUseCase,
)
from .create_order import (
    CreateOrderRequest,
    CreateOrderResponse,
    CreateOrderUseCase,
)
from .get_all_orders import (
    GetAllOrdersResponse,
    GetAllOrdersUseCase,
)
from .get_order_payment_status import (
    GetOrderPaymentStatusRequest,
    GetOrderPaymentStatusResponse,
    GetOrderPaymentStatusUseCase,
)
from .get_production_order_details import (
    GetProductionOrderDetailsRequest,
    GetProductionOrderDetailsResponse,
    GetProductionOrderDetailsUseCase,
)
from .get_production_queue import (
    GetProductionQueueRequest,
    GetProductionQueueResponse,
    GetProductionQueueUseCase,
)
from .production_status import (
    PAYMENT_APPROVED_ERROR,
    MarkOrderReadyRequest,
    MarkOrderReadyResponse,
    MarkOrderReadyUseCase,
    ProcessPaymentApprovedRequest,
    ProcessPaymentApprovedResponse,
    ProcessPaymentApprovedUseCase,
    UpdateProductionStatusRequest,
    UpdateProductionStatusResponse,
    UpdateProductionStatusUseCase,
)
from .update_order_status import (
    UpdateOrderStatusRequest,
    UpdateOrderStatusResponse,
    UpdateOrderStatusUseCase,
)
from .update_payment_status import (
    UpdatePaymentStatusRequest,
    UpdatePaymentStatusResponse,
    UpdatePaymentStatusUseCase,
)

__all__ = [
    # Order lifecycle
    "CreateOrderUseCase",
    "CreateOrderRequest",
    "CreateOrderResponse",
    "CheckoutOrderUseCase",
    "CheckoutOrderRequest",
    "CheckoutOrderResponse",
    "UpdateOrderStatusUseCase",
    "UpdateOrderStatusRequest",
    "UpdateOrderStatusResponse",
    "UpdatePaymentStatusUseCase",
    "UpdatePaymentStatusRequest",
    "UpdatePaymentStatusResponse",
    "GetOrderPaymentStatusUseCase",
    "GetOrderPaymentStatusRequest",
    "GetOrderPaymentStatusResponse",
    "GetAllOrdersUseCase",
    "GetAllOrdersResponse",
    # Production views
    "GetProductionOrderDetailsUseCase",
    "GetProductionOrderDetailsRequest",
    "GetProductionOrderDetailsResponse",
    "GetProductionQueueUseCase",
    "GetProductionQueueRequest",
    "GetProductionQueueResponse",
    # Production workflows
    "MarkOrderReadyUseCase",
    "MarkOrderReadyRequest",
    "MarkOrderReadyResponse",
    "ProcessPaymentApprovedUseCase",
    "ProcessPaymentApprovedRequest",
    "ProcessPaymentApprovedResponse",
    "UpdateProductionStatusUseCase",
    "UpdateProductionStatusRequest",
    "UpdateProductionStatusResponse",
    "PAYMENT_APPROVED_ERROR",
]
