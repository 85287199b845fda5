"""
Result type for use cases.

Use cases return ``Ok(value)`` or ``Err(error)`` instead of raising, so
callers branch on the outcome without exception handling:

    ```python
    result = await use_case.execute(request)
    match result:
        case Ok(value):
            ...
        case Err(error):
            ...
    ```
"""

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed outcome carrying the domain error."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raise the carried error."""
        raise self.error


Result: TypeAlias = Ok[T] | Err[E]


__all__ = ["Ok", "Err", "Result"]
