"""Attach a hosted payment URL to invoices written through the API.

After an invoice is created or updated, the first payment service configured
on its organization is asked for a payment URL. The URL is stored on the
invoice and the invoice is answered as HAL JSON instead of the endpoint's
default response.
"""

import logging
from dataclasses import dataclass
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from betaalservice.models.invoice import Invoice
from betaalservice.repositories.invoice_repository import InvoiceRepository
from betaalservice.repositories.service_repository import ServiceRepository
from betaalservice.services.hal import HAL_MEDIA_TYPE, serialize_invoice
from betaalservice.services.payment_provider import UnsupportedPaymentProviderError
from betaalservice.services.payment_providers import get_payment_provider

logger = logging.getLogger(__name__)

WRITE_METHODS = frozenset({"POST", "PUT", "PATCH"})


@dataclass
class PaymentUrlResult:
    """Outcome of asking an organization's payment service for a URL."""

    supported: bool
    provider: str | None = None
    payment_url: str | None = None


class PaymentCreationInterceptor:
    def __init__(self, db: Session):
        self.db = db
        self.invoice_repo = InvoiceRepository(db)
        self.service_repo = ServiceRepository(db)

    def applies(self, result: Any, method: str) -> bool:
        return isinstance(result, Invoice) and method.upper() in WRITE_METHODS

    def attach_payment_url(
        self, invoice: Invoice, request: Request | None = None
    ) -> PaymentUrlResult:
        """Request a payment URL for the invoice and persist it.

        A missing service or a service type without an integration is an
        unsupported outcome: the invoice is left as it is. Provider errors
        propagate to the caller.
        """
        service = self.service_repo.get_first_for_organization(
            invoice.organization_id  # type: ignore[arg-type]
        )
        if service is None:
            logger.warning(
                "Organization %s has no payment service, invoice %s gets no payment URL",
                invoice.organization_id,
                invoice.id,
            )
            return PaymentUrlResult(supported=False)

        try:
            provider = get_payment_provider(service)
        except UnsupportedPaymentProviderError as e:
            logger.warning("Invoice %s gets no payment URL: %s", invoice.id, e)
            return PaymentUrlResult(supported=False, provider=e.service_type)

        payment_url = provider.create_payment(invoice, request)
        self.invoice_repo.set_payment_url(invoice, payment_url)
        return PaymentUrlResult(
            supported=True,
            provider=provider.provider_name,
            payment_url=payment_url,
        )

    def transform(self, result: Invoice, request: Request) -> JSONResponse:
        outcome = self.attach_payment_url(result, request)
        if outcome.supported:
            logger.info(
                "Attached %s payment URL %s to invoice %s",
                outcome.provider,
                outcome.payment_url,
                result.id,
            )
        items = self.invoice_repo.get_items(result.id)  # type: ignore[arg-type]
        return JSONResponse(
            content=serialize_invoice(result, items),
            status_code=200,
            media_type=HAL_MEDIA_TYPE,
        )
