from betaalservice.repositories.invoice_item_repository import InvoiceItemRepository
from betaalservice.repositories.invoice_repository import InvoiceRepository
from betaalservice.repositories.organization_repository import OrganizationRepository
from betaalservice.repositories.payment_repository import PaymentRepository
from betaalservice.repositories.service_repository import ServiceRepository

__all__ = [
    "InvoiceItemRepository",
    "InvoiceRepository",
    "OrganizationRepository",
    "PaymentRepository",
    "ServiceRepository",
]
