"""Invoice item schemas and standalone validation."""

from datetime import datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from betaalservice.models.currency import CurrencyCode
from betaalservice.schemas.shared import reject_null

_http_url = TypeAdapter(HttpUrl)


def _check_url(value: str | None) -> str | None:
    if value is None:
        return value
    # Validate as URL but store exactly what was sent
    try:
        _http_url.validate_python(value)
    except ValidationError:
        raise ValueError("must be a valid http(s) URL") from None
    return value


class InvoiceItemBase(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    name: str = Field(..., min_length=1, max_length=255, examples=["My InvoiceItem"])
    description: str | None = Field(default=None, max_length=255)
    offer: str = Field(..., max_length=255, examples=["http://example.org/offers/1"])
    # Deprecated, replaced by offer
    product: str | None = Field(default=None, max_length=255)
    quantity: int = Field(..., ge=0, examples=[1])
    price: Decimal = Field(..., ge=0, max_digits=8, decimal_places=2, examples=["50.00"])
    price_currency: CurrencyCode = CurrencyCode.EUR
    tax_percentage: int = Field(..., ge=0, examples=[9])

    @field_validator("offer")
    @classmethod
    def offer_is_url(cls, value: str) -> str:
        return _check_url(value)  # type: ignore[return-value]


class InvoiceItemCreate(InvoiceItemBase):
    invoice_id: UUID


class InvoiceItemUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=255)
    offer: str | None = Field(default=None, max_length=255)
    product: str | None = Field(default=None, max_length=255)
    quantity: int | None = Field(default=None, ge=0)
    price: Decimal | None = Field(default=None, ge=0, max_digits=8, decimal_places=2)
    price_currency: CurrencyCode | None = None
    tax_percentage: int | None = Field(default=None, ge=0)

    @field_validator("name", "offer", "quantity", "price", "price_currency", "tax_percentage")
    @classmethod
    def required_not_null(cls, value: Any) -> Any:
        return reject_null(value)

    @field_validator("offer")
    @classmethod
    def offer_is_url(cls, value: str | None) -> str | None:
        return _check_url(value)


class InvoiceItemResponse(BaseModel):
    id: UUID
    invoice_id: UUID
    name: str
    description: str | None
    offer: str
    product: str | None
    quantity: int
    price: Decimal
    price_currency: str
    tax_percentage: int
    created_at: datetime

    model_config = {"from_attributes": True}


class FieldError(BaseModel):
    field: str
    message: str


class ValidationResult(BaseModel):
    valid: bool
    errors: list[FieldError] = Field(default_factory=list)


def validate_invoice_item(
    data: dict[str, Any], schema: type[BaseModel] = InvoiceItemCreate
) -> ValidationResult:
    """Validate raw invoice item data without raising.

    Returns a ``ValidationResult`` listing every failing field, using dotted
    paths for nested locations.
    """
    try:
        schema.model_validate(data)
    except ValidationError as exc:
        return ValidationResult(
            valid=False,
            errors=[
                FieldError(field=".".join(str(part) for part in err["loc"]), message=err["msg"])
                for err in exc.errors()
            ],
        )
    return ValidationResult(valid=True)
