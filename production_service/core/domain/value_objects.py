"""
Base Value Object Classes for Domain-Driven Design

Value Objects are immutable domain primitives that have no identity.
They are compared by their values, not by reference.
"""

from enum import Enum
from typing import Self

from production_service.core.domain.exceptions import ValidationException


class StatusEnum(str, Enum):
    """
    Base class for status enums.

    Members are immutable and compared by value. Construction goes through
    ``create`` which accepts the canonical literal or one of the aliases
    declared by the subclass, and rejects anything else.
    """

    @classmethod
    def values(cls) -> list[str]:
        """Get all possible canonical values."""
        return [e.value for e in cls]

    @classmethod
    def aliases(cls) -> dict[str, str]:
        """Lowercase alias -> canonical value. Override in subclasses."""
        return {}

    @classmethod
    def label(cls) -> str:
        """Name used in validation messages."""
        return "status"

    @classmethod
    def create(cls, raw: "str | StatusEnum") -> Self:
        """
        Create a member from a raw literal.

        Args:
            raw: Canonical value or alias (case-insensitive)

        Returns:
            The matching member

        Raises:
            ValidationException: If raw is not in the closed set
        """
        if isinstance(raw, cls):
            return raw

        if isinstance(raw, str):
            key = raw.strip().casefold()
            for member in cls:
                if member.value.casefold() == key:
                    return member
            canonical = cls.aliases().get(key)
            if canonical is not None:
                return cls(canonical)

        raise ValidationException(
            f"Invalid {cls.label()}: {raw}",
            field=cls.label().replace(" ", "_"),
            details={"valid_values": cls.values()},
        )

    def get_value(self) -> str:
        """Canonical literal."""
        return self.value

    def to_value(self) -> str:
        return self.value

    def equals(self, other: object) -> bool:
        """Compare by value with another member of the same enum."""
        return isinstance(other, type(self)) and other.value == self.value

    def __str__(self) -> str:
        return self.value


__all__ = ["StatusEnum"]
