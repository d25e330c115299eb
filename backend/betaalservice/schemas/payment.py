"""Payment schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from betaalservice.models.payment import PaymentStatus
from betaalservice.schemas.shared import reject_null


class PaymentCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    invoice_id: UUID
    service_id: UUID | None = None
    payment_id: str | None = Field(default=None, max_length=255)
    status: PaymentStatus = PaymentStatus.OPEN


class PaymentUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    payment_id: str | None = Field(default=None, max_length=255)
    status: PaymentStatus | None = None

    @field_validator("status")
    @classmethod
    def status_not_null(cls, value: str | None) -> str:
        return reject_null(value)


class PaymentResponse(BaseModel):
    """Payment response schema."""

    id: UUID
    invoice_id: UUID
    service_id: UUID | None
    payment_id: str | None
    status: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
