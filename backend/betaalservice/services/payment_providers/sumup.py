"""SumUp payment provider implementation.

SumUp checkouts are created via ``POST /v0.1/checkouts``. With hosted checkout
enabled the response carries a ``hosted_checkout_url`` for the customer.
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


class SumUpProvider(PaymentProviderBase):
    """SumUp payment provider.

    Expects ``merchant_code`` or ``pay_to_email`` in the service configuration
    and the SumUp access token in ``authorization``.
    """

    @property
    def provider_name(self) -> str:
        return ServiceType.SUMUP.value

    @property
    def api_url(self) -> str:
        return str(self.configuration.get("api_url") or settings.sumup_api_url).rstrip("/")

    def build_checkout_request(
        self, invoice: Invoice, request: Request | None = None
    ) -> dict[str, Any]:
        data: dict[str, Any] = {
            "checkout_reference": invoice.reference,
            "amount": float(invoice_total(invoice)),
            "currency": str(invoice.price_currency),
            "description": invoice_description(invoice),
            "redirect_url": redirect_url(request),
            "hosted_checkout": {"enabled": True},
        }
        merchant_code = self.configuration.get("merchant_code")
        pay_to_email = self.configuration.get("pay_to_email")
        if merchant_code:
            data["merchant_code"] = merchant_code
        elif pay_to_email:
            data["pay_to_email"] = pay_to_email
        else:
            raise PaymentProviderError(
                "SumUp service needs a merchant_code or pay_to_email in its configuration"
            )
        return data

    def create_payment(self, invoice: Invoice, request: Request | None = None) -> str:
        response = self._make_request(
            "POST", f"{self.api_url}/checkouts", self.build_checkout_request(invoice, request)
        )
        checkout_url = response.get("hosted_checkout_url")
        if not checkout_url:
            raise PaymentProviderError("SumUp response did not contain a hosted checkout URL")
        return str(checkout_url)
