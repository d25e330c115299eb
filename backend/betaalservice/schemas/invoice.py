from datetime import datetime
from decimal import Decimal
from typing import Self
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from betaalservice.models.currency import CurrencyCode
from betaalservice.schemas.invoice_item import InvoiceItemBase, InvoiceItemResponse
from betaalservice.schemas.shared import reject_null


class InvoiceCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    organization_id: UUID
    name: str | None = Field(default=None, max_length=255)
    description: str | None = None
    customer: str | None = Field(default=None, max_length=255)
    order: str | None = Field(default=None, max_length=255)
    price_currency: CurrencyCode = CurrencyCode.EUR
    items: list[InvoiceItemBase] = Field(default_factory=list)

    @model_validator(mode="after")
    def items_match_currency(self) -> Self:
        """Validate every item is priced in the invoice currency."""
        currency = CurrencyCode(self.price_currency).value
        for item in self.items:
            item_currency = CurrencyCode(item.price_currency).value
            if item_currency != currency:
                msg = (
                    f"item {item.name!r} is priced in {item_currency}, "
                    f"invoice currency is {currency}"
                )
                raise ValueError(msg)
        return self


class InvoiceUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    name: str | None = Field(default=None, max_length=255)
    description: str | None = None
    customer: str | None = Field(default=None, max_length=255)
    order: str | None = Field(default=None, max_length=255)
    price_currency: CurrencyCode | None = None

    @field_validator("price_currency")
    @classmethod
    def price_currency_not_null(cls, value: str | None) -> str:
        return reject_null(value)


class InvoiceResponse(BaseModel):
    id: UUID
    organization_id: UUID
    reference: str
    name: str | None
    description: str | None
    customer: str | None
    order: str | None
    price: Decimal
    tax: Decimal
    price_currency: str
    payment_url: str | None
    items: list[InvoiceItemResponse] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
