"""
Production Domain Value Objects

Immutable value objects for the production domain.
"""

from production_service.domains.production.domain.value_objects.order_status import (
    VALID_PAYMENT_STATUS,
    VALID_STATUS,
    PaymentStatus,
    Status,
)

__all__ = [
    "Status",
    "PaymentStatus",
    "VALID_STATUS",
    "VALID_PAYMENT_STATUS",
]
