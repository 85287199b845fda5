"""
Production Status Workflows

Write-side workflows that push a production status to the order-domain
service and then tell the payment service about it.

The two remote calls are always sequential: the status is recorded before
the payment service is notified, and a failure stops the workflow. There is
no compensation when the second call fails after the first succeeded.
"""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from production_service.core.domain import AggregationException
from production_service.domains.production.application.ports import IMicroserviceGateway

logger = logging.getLogger(__name__)

READY = "ready"
PREPARING = "preparing"

PAYMENT_APPROVED_ERROR = "Erro ao processar notificação de pagamento aprovado"


# ==================== Mark Ready ====================


@dataclass
class MarkOrderReadyRequest:
    order_id: str
    notes: str | None = None
    ready_time: str | None = None


@dataclass
class MarkOrderReadyResponse:
    order_id: str
    ready_time: str
    updated_at: datetime
    notes: str | None = None
    status: str = READY
    message: str = "Pedido marcado como pronto para entrega"

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "orderId": self.order_id,
            "status": self.status,
            "notes": self.notes,
            "readyTime": self.ready_time,
            "updatedAt": self.updated_at,
        }


class MarkOrderReadyUseCase:
    """
    Use Case: Mark Order Ready

    Gateway errors propagate unchanged.
    """

    def __init__(self, gateway: IMicroserviceGateway):
        self.gateway = gateway

    async def execute(self, request: MarkOrderReadyRequest) -> MarkOrderReadyResponse:
        await self.gateway.update_order_status(request.order_id, READY)
        await self.gateway.notify_payment_service(request.order_id, READY)

        now = datetime.now(UTC)
        logger.info(f"Order {request.order_id} marked ready")

        return MarkOrderReadyResponse(
            order_id=request.order_id,
            notes=request.notes,
            ready_time=request.ready_time or now.isoformat(),
            updated_at=now,
        )


# ==================== Payment Approved ====================


@dataclass
class ProcessPaymentApprovedRequest:
    order_id: str


@dataclass
class ProcessPaymentApprovedResponse:
    order_id: str
    status: str = PREPARING
    message: str = "Pedido iniciado para preparação"

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "orderId": self.order_id,
            "status": self.status,
        }


class ProcessPaymentApprovedUseCase:
    """
    Use Case: Process Payment Approved

    Confirms the order exists, moves it to preparation and notifies the
    payment service. Any failure in the three steps is reported with the
    same AggregationException message; the original error is chained and
    logged but callers cannot tell which step failed.
    """

    def __init__(self, gateway: IMicroserviceGateway):
        self.gateway = gateway

    async def execute(self, request: ProcessPaymentApprovedRequest) -> ProcessPaymentApprovedResponse:
        try:
            await self.gateway.get_order_by_id(request.order_id)
            await self.gateway.update_order_status(request.order_id, PREPARING)
            await self.gateway.notify_payment_service(request.order_id, PREPARING)
        except Exception as e:
            logger.error(
                f"Payment approved notification failed for order {request.order_id}: {e}",
                exc_info=True,
            )
            raise AggregationException(PAYMENT_APPROVED_ERROR, details={"order_id": request.order_id}) from e

        logger.info(f"Order {request.order_id} sent to preparation after payment approval")
        return ProcessPaymentApprovedResponse(order_id=request.order_id)


# ==================== Production Status Update ====================


@dataclass
class UpdateProductionStatusRequest:
    """``status`` is free-form and forwarded as given."""

    order_id: str
    status: str
    notes: str | None = None


@dataclass
class UpdateProductionStatusResponse:
    order_id: str
    status: str
    updated_at: datetime
    notes: str | None = None
    message: str = "Status de produção atualizado com sucesso"

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "orderId": self.order_id,
            "status": self.status,
            "notes": self.notes,
            "updatedAt": self.updated_at,
        }


class UpdateProductionStatusUseCase:
    """
    Use Case: Update Production Status

    Administrative override: the status is not checked against the
    Status vocabulary. Gateway errors propagate unchanged.
    """

    def __init__(self, gateway: IMicroserviceGateway):
        self.gateway = gateway

    async def execute(self, request: UpdateProductionStatusRequest) -> UpdateProductionStatusResponse:
        await self.gateway.update_order_status(request.order_id, request.status)
        await self.gateway.notify_payment_service(request.order_id, request.status)

        logger.info(f"Order {request.order_id} production status set to '{request.status}'")

        return UpdateProductionStatusResponse(
            order_id=request.order_id,
            status=request.status,
            notes=request.notes,
            updated_at=datetime.now(UTC),
        )


__all__ = [
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
