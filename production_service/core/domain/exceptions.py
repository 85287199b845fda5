"""
Domain Exceptions for Domain-Driven Design

These exceptions represent business rule violations and domain-specific errors.
They are translated to HTTP responses by the API layer exception handlers.
"""

from typing import Any


class DomainException(Exception):
    """
    Base exception for all domain-related errors.

    Provides a standardized way to communicate business rule violations.
    """

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "RESOURCE_NOT_FOUND")
            details: Additional context about the error
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__.upper()
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(DomainException):
    """
    Raised when domain validation fails.

    Used by value objects that reject a raw literal outside their closed set.
    """

    def __init__(self, message: str, field: str | None = None, details: dict[str, Any] | None = None):
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, "VALIDATION_ERROR", details)
        self.field = field


class ResourceNotFoundException(DomainException):
    """Raised when an order, customer or product does not exist."""

    def __init__(self, resource_type: str, resource_id: Any, message: str | None = None):
        self.resource_type = resource_type
        self.resource_id = resource_id
        msg = message or f"{resource_type} with ID {resource_id} not found"
        super().__init__(
            msg,
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": str(resource_id)},
        )


class InvalidOperationException(DomainException):
    """Raised when an operation is not valid in the current state."""

    def __init__(self, operation: str, current_state: str, message: str | None = None):
        self.operation = operation
        self.current_state = current_state
        msg = message or f"Cannot perform '{operation}' in state '{current_state}'"
        super().__init__(
            msg,
            "INVALID_OPERATION",
            {"operation": operation, "current_state": current_state},
        )


class PaymentNotApprovedException(DomainException):
    """Raised when an order is pushed forward in production without an approved payment."""

    def __init__(self, order_id: Any, payment_status: str | None = None):
        self.order_id = order_id
        self.payment_status = payment_status
        super().__init__(
            f"Order {order_id} cannot advance without an approved payment",
            "PAYMENT_NOT_APPROVED",
            {"order_id": str(order_id), "payment_status": payment_status or ""},
        )


class AggregationException(DomainException):
    """
    Raised where a workflow deliberately collapses distinct causes into one message.

    The original error is kept as ``__cause__`` for logging only.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, "AGGREGATION_ERROR", details)


__all__ = [
    "DomainException",
    "ValidationException",
    "ResourceNotFoundException",
    "InvalidOperationException",
    "PaymentNotApprovedException",
    "AggregationException",
]
