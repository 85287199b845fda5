"""
Order Status Value Objects for the Production Domain

Closed vocabularies for the kitchen production stage and the payment outcome.
"""

from production_service.core.domain import StatusEnum

_STATUS_ALIASES: dict[str, str] = {
    "received": "Recebido",
    "inpreparation": "Preparação",
    "in_preparation": "Preparação",
    "in preparation": "Preparação",
    "preparing": "Preparação",
    "preparacao": "Preparação",
    "ready": "Pronto",
    "finalized": "Finalizado",
    "finished": "Finalizado",
}

_PAYMENT_STATUS_ALIASES: dict[str, str] = {
    "approved": "Aprovado",
    "rejected": "Recusado",
    "rejeitado": "Recusado",
    "pending": "Pendente",
}


class Status(StatusEnum):
    """
    Production stage of an order.

    Forward path:
    - Recebido -> Preparação -> Pronto -> Finalizado
    - Finalizado is terminal
    """

    RECEIVED = "Recebido"
    IN_PREPARATION = "Preparação"
    READY = "Pronto"
    FINALIZED = "Finalizado"

    @classmethod
    def aliases(cls) -> dict[str, str]:
        return _STATUS_ALIASES

    @classmethod
    def label(cls) -> str:
        return "status"

    def next_stage(self) -> "Status | None":
        """Next stage on the forward path, None when terminal."""
        order = list(Status)
        index = order.index(self)
        return order[index + 1] if index + 1 < len(order) else None

    def is_terminal(self) -> bool:
        """Check if this is the final stage."""
        return self is Status.FINALIZED


class PaymentStatus(StatusEnum):
    """Payment outcome reported for an order."""

    APPROVED = "Aprovado"
    REJECTED = "Recusado"
    PENDING = "Pendente"

    @classmethod
    def aliases(cls) -> dict[str, str]:
        return _PAYMENT_STATUS_ALIASES

    @classmethod
    def label(cls) -> str:
        return "payment status"

    def is_approved(self) -> bool:
        return self is PaymentStatus.APPROVED


VALID_STATUS: tuple[str, ...] = tuple(Status.values())
VALID_PAYMENT_STATUS: tuple[str, ...] = tuple(PaymentStatus.values())


__all__ = ["Status", "PaymentStatus", "VALID_STATUS", "VALID_PAYMENT_STATUS"]
