"""
Domain Layer - Core DDD building blocks

This module provides base classes for Domain-Driven Design:
- Entities: Objects with identity and lifecycle
- Value Objects: Immutable status enums compared by value
- Result: Ok/Err outcome returned by use cases
- Exceptions: Domain-specific error handling
"""

from production_service.core.domain.entities import (
    AggregateRoot,
    Entity,
    generate_uuid_str,
    utc_now,
)
from production_service.core.domain.exceptions import (
    AggregationException,
    DomainException,
    InvalidOperationException,
    PaymentNotApprovedException,
    ResourceNotFoundException,
    ValidationException,
)
from production_service.core.domain.result import Err, Ok, Result
from production_service.core.domain.value_objects import StatusEnum

__all__ = [
    # Entities
    "Entity",
    "AggregateRoot",
    "generate_uuid_str",
    "utc_now",
    # Value Objects
    "StatusEnum",
    # Result
    "Ok",
    "Err",
    "Result",
    # Exceptions
    "DomainException",
    "ValidationException",
    "ResourceNotFoundException",
    "InvalidOperationException",
    "PaymentNotApprovedException",
    "AggregationException",
]
