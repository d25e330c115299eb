from betaalservice.schemas.invoice import InvoiceCreate, InvoiceResponse, InvoiceUpdate
from betaalservice.schemas.invoice_item import (
    FieldError,
    InvoiceItemBase,
    InvoiceItemCreate,
    InvoiceItemResponse,
    InvoiceItemUpdate,
    ValidationResult,
    validate_invoice_item,
)
from betaalservice.schemas.organization import (
    OrganizationCreate,
    OrganizationResponse,
    OrganizationUpdate,
)
from betaalservice.schemas.payment import PaymentCreate, PaymentResponse, PaymentUpdate
from betaalservice.schemas.service import ServiceCreate, ServiceResponse, ServiceUpdate

__all__ = [
    "FieldError",
    "InvoiceCreate",
    "InvoiceItemBase",
    "InvoiceItemCreate",
    "InvoiceItemResponse",
    "InvoiceItemUpdate",
    "InvoiceResponse",
    "InvoiceUpdate",
    "OrganizationCreate",
    "OrganizationResponse",
    "OrganizationUpdate",
    "PaymentCreate",
    "PaymentResponse",
    "PaymentUpdate",
    "ServiceCreate",
    "ServiceResponse",
    "ServiceUpdate",
    "ValidationResult",
    "validate_invoice_item",
]
