"""
Production API Schemas

Pydantic schemas for API request/response validation. Field names on the
wire are camelCase; snake_case is accepted as well.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateOrderRequest(CamelModel):
    """Create order request schema."""

    customer_id: str = Field(..., min_length=1)
    product_ids: list[str] = Field(default_factory=list)


class UpdateOrderStatusRequest(CamelModel):
    """Omit ``status`` to advance the order one stage."""

    status: str | None = None


class UpdatePaymentStatusRequest(CamelModel):
    payment_status: str = Field(..., min_length=1)


class PaymentStatusResponse(BaseModel):
    status: str


class PaymentApprovedRequest(CamelModel):
    """Payment service notification; ``order_id`` falls back to the path id."""

    order_id: str | None = None
    status: str | None = None


class MarkOrderReadyRequest(CamelModel):
    notes: str | None = None
    ready_time: str | None = None


class UpdateProductionStatusRequest(CamelModel):
    """Free-form production status, forwarded as given."""

    status: str = Field(..., min_length=1)
    notes: str | None = None
