from betaalservice.models.currency import CurrencyCode
from betaalservice.models.invoice import Invoice
from betaalservice.models.invoice_item import InvoiceItem
from betaalservice.models.organization import Organization
from betaalservice.models.payment import Payment, PaymentStatus
from betaalservice.models.service import Service, ServiceType
from betaalservice.models.shared import DEFAULT_ORGANIZATION_ID, UUIDType, generate_uuid, utc_now

__all__ = [
    "CurrencyCode",
    "DEFAULT_ORGANIZATION_ID",
    "Invoice",
    "InvoiceItem",
    "Organization",
    "Payment",
    "PaymentStatus",
    "Service",
    "ServiceType",
    "UUIDType",
    "generate_uuid",
    "utc_now",
]
