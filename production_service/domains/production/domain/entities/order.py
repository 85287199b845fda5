"""
Order Entity for the Production Domain

Represents a placed food order moving through the kitchen lifecycle.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from production_service.core.domain import (
    AggregateRoot,
    InvalidOperationException,
    PaymentNotApprovedException,
    generate_uuid_str,
)

from ..value_objects.order_status import PaymentStatus, Status
from .order_product import OrderProduct, OrderProductList


@dataclass(eq=False)
class Order(AggregateRoot[str]):
    """
    Order aggregate root for the production domain.

    ``status`` is None until the first transition ("unset"), and
    ``payment_status`` is None until a payment event is recorded.

    Two ways to change the production stage:
    - ``advance_status()`` follows Recebido -> Preparação -> Pronto -> Finalizado
      and requires an approved payment
    - ``set_status()`` assigns any stage directly, for floor corrections

    Example:
        ```python
        order = Order.create(customer_id="123.456.789-09")
        order.set_payment_status(PaymentStatus.APPROVED)
        order.advance_status()  # Preparação
        ```
    """

    customer_id: str = ""
    products: OrderProductList = field(default_factory=OrderProductList)
    status: Status | None = None
    payment_status: PaymentStatus | None = None

    # Factories

    @classmethod
    def create(
        cls,
        customer_id: str,
        id: str | None = None,
        product_ids: list[str] | None = None,
        created_at: datetime | None = None,
    ) -> "Order":
        """
        Place a new order for a customer.

        Args:
            customer_id: Customer reference (document number)
            id: Optional order id, generated when omitted
            product_ids: Products to attach as order lines
            created_at: Optional creation timestamp

        Returns:
            New Order with status and payment status unset
        """
        order_id = str(id) if id is not None else generate_uuid_str()
        kwargs: dict[str, Any] = {"id": order_id, "customer_id": str(customer_id)}
        if created_at is not None:
            kwargs["created_at"] = created_at
        order = cls(**kwargs)
        if product_ids:
            order.products = OrderProductList(
                OrderProduct.create(order_id=order_id, product_id=product_id) for product_id in product_ids
            )
        return order

    # Status Transitions

    def advance_status(self) -> Status:
        """
        Move the order to the next production stage.

        Returns:
            The new status

        Raises:
            PaymentNotApprovedException: If payment is not approved
            InvalidOperationException: If the order is already finalized
        """
        if self.payment_status is not PaymentStatus.APPROVED:
            raise PaymentNotApprovedException(
                order_id=self.id,
                payment_status=self.payment_status_value,
            )

        if self.status is None:
            next_status = Status.IN_PREPARATION
        else:
            next_status = self.status.next_stage()

        if next_status is None:
            raise InvalidOperationException(
                operation="advance_status",
                current_state=self.status_value,
                message="Order is already finalized",
            )

        self.status = next_status
        self.touch()
        return next_status

    def set_status(self, status: Status | str) -> None:
        """Assign a production stage directly, without checking the forward path."""
        self.status = Status.create(status)
        self.touch()

    def set_payment_status(self, payment_status: PaymentStatus | str) -> None:
        """Record the payment outcome."""
        self.payment_status = PaymentStatus.create(payment_status)
        self.touch()

    def finalize(self) -> None:
        """Checkout: the customer has completed and paid, regardless of stage."""
        self.set_status(Status.FINALIZED)

    # Order lines

    def replace_products(self, product_ids: list[str]) -> None:
        """Replace the order lines wholesale."""
        self.products.update(OrderProduct.create(order_id=self.id, product_id=product_id) for product_id in product_ids)
        self.touch()

    # Helpers

    @property
    def status_value(self) -> str:
        """Canonical status literal, empty string when unset."""
        return self.status.get_value() if self.status else ""

    @property
    def payment_status_value(self) -> str:
        """Canonical payment status literal, empty string when unset."""
        return self.payment_status.get_value() if self.payment_status else ""

    def is_paid(self) -> bool:
        return self.payment_status is PaymentStatus.APPROVED

    def product_lines(self) -> list[OrderProduct]:
        return self.products.get_items()

    # Serialization

    def to_summary_dict(self) -> dict[str, Any]:
        """Order fields in the camelCase shape used over HTTP."""
        return {
            "id": self.id,
            "customerId": self.customer_id,
            "status": self.status.get_value() if self.status else None,
            "paymentStatus": self.payment_status.get_value() if self.payment_status else None,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    def to_dict(self) -> dict[str, Any]:
        """Summary plus the order lines."""
        return {
            **self.to_summary_dict(),
            "products": [line.to_dict() for line in self.product_lines()],
        }
