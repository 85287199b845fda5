"""
Base Entity Classes for Domain-Driven Design

Entities are domain objects with identity and lifecycle.
They maintain their identity regardless of their attributes.
"""

from abc import ABC
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Generic, TypeVar
from uuid import uuid4

# Type variable for entity ID (str, UUID, etc.)
TId = TypeVar("TId")


def generate_uuid_str() -> str:
    """Generate a new UUID as string."""
    return str(uuid4())


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(UTC)


@dataclass(eq=False)
class Entity(ABC, Generic[TId]):
    """
    Base class for all domain entities.

    An entity is a domain object that has a distinct identity
    that runs through time and different states.

    Type Parameters:
        TId: Type of entity identifier (str, UUID)

    Example:
        ```python
        @dataclass(eq=False)
        class Ticket(Entity[str]):
            order_id: str = ""
        ```
    """

    id: TId = field(default_factory=generate_uuid_str)  # type: ignore[assignment]
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime | None = field(default=None)

    def __eq__(self, other: object) -> bool:
        """Entities are equal if they have the same ID."""
        if not isinstance(other, Entity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on ID for use in sets and dicts."""
        return hash(self.id)

    def touch(self) -> None:
        """Update the updated_at timestamp."""
        self.updated_at = utc_now()


@dataclass(eq=False)
class AggregateRoot(Entity[TId], Generic[TId]):
    """
    Base class for aggregate roots.

    An aggregate root is the entry point to an aggregate.
    It controls access to all members of the aggregate
    and ensures invariants are maintained.
    """


__all__ = ["Entity", "AggregateRoot", "generate_uuid_str", "utc_now"]
