"""Mollie payment provider implementation.

Mollie creates a payment via ``POST /v2/payments`` and answers with a
``_links.checkout`` URL pointing at its hosted payment page.
"""

from typing import Any

from starlette.requests import Request

from betaalservice.core.config import settings
from betaalservice.models.invoice import Invoice
from betaalservice.models.service import ServiceType
from betaalservice.services.payment_provider import (
    PaymentProviderBase,
    PaymentProviderError,
    invoice_description,
    invoice_total,
    redirect_url,
)


class MollieProvider(PaymentProviderBase):
    """Mollie payment provider.

    The service's ``authorization`` holds the Mollie API key. An optional
    ``profile_id`` in the service configuration is sent along, which Mollie
    requires for organization access tokens.
    """

    @property
    def provider_name(self) -> str:
        return ServiceType.MOLLIE.value

    @property
    def api_url(self) -> str:
        return str(self.configuration.get("api_url") or settings.mollie_api_url).rstrip("/")

    def build_payment_request(
        self, invoice: Invoice, request: Request | None = None
    ) -> dict[str, Any]:
        data: dict[str, Any] = {
            "amount": {
                "currency": str(invoice.price_currency),
                "value": f"{invoice_total(invoice):.2f}",
            },
            "description": invoice_description(invoice),
            "redirectUrl": redirect_url(request),
            "metadata": {
                "invoice_id": str(invoice.id),
                "reference": invoice.reference,
            },
        }
        profile_id = self.configuration.get("profile_id")
        if profile_id:
            data["profileId"] = profile_id
        return data

    def create_payment(self, invoice: Invoice, request: Request | None = None) -> str:
        response = self._make_request(
            "POST", f"{self.api_url}/payments", self.build_payment_request(invoice, request)
        )
        links = response.get("_links") or {}
        checkout = links.get("checkout") if isinstance(links, dict) else None
        checkout_url = checkout.get("href") if isinstance(checkout, dict) else None
        if not checkout_url:
            raise PaymentProviderError("Mollie response did not contain a checkout URL")
        return str(checkout_url)
