"""Payment provider abstraction layer.

A provider turns an invoice into a hosted payment page and returns its URL.
Concrete providers live in ``betaalservice.services.payment_providers``.
"""

import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any

import httpx
from starlette.requests import Request

from betaalservice.core.config import settings
from betaalservice.models.invoice import Invoice
from betaalservice.models.service import Service
from betaalservice.models.shared import quantize_money

logger = logging.getLogger(__name__)


class PaymentProviderError(RuntimeError):
    """The provider could not create a payment."""


class UnsupportedPaymentProviderError(ValueError):
    """No integration exists for a service type."""

    def __init__(self, service_type: str | None):
        self.service_type = service_type
        super().__init__(f"Unsupported payment provider: {service_type}")


class PaymentProviderBase(ABC):
    """Abstract base class for payment providers."""

    def __init__(
        self,
        service: Service,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self.service = service
        self.timeout = timeout or settings.payment_provider_timeout
        self.transport = transport

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return the service type handled by this provider."""
        pass  # pragma: no cover

    @abstractmethod
    def create_payment(self, invoice: Invoice, request: Request | None = None) -> str:
        """Create a payment for the invoice and return the hosted payment URL."""
        pass  # pragma: no cover

    @property
    def configuration(self) -> dict[str, Any]:
        return dict(self.service.configuration or {})

    def _headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self.service.authorization:
            headers["Authorization"] = f"Bearer {self.service.authorization}"
        return headers

    def _make_request(self, method: str, url: str, data: dict[str, Any]) -> dict[str, Any]:
        """Make an HTTP request to the provider API and decode the JSON answer."""
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.request(method, url, json=data, headers=self._headers())
                response.raise_for_status()
                result = response.json()
        except httpx.HTTPError as e:
            logger.warning("%s API request to %s failed: %s", self.provider_name, url, e)
            raise PaymentProviderError(f"{self.provider_name} API request failed: {e}") from e
        except ValueError as e:
            raise PaymentProviderError(f"{self.provider_name} API returned invalid JSON") from e
        if not isinstance(result, dict):
            raise PaymentProviderError(f"{self.provider_name} API returned an unexpected response")
        return result


def invoice_total(invoice: Invoice) -> Decimal:
    """Amount to charge: the invoice price plus its tax."""
    return quantize_money(Decimal(str(invoice.price or 0)) + Decimal(str(invoice.tax or 0)))


def invoice_description(invoice: Invoice) -> str:
    return str(invoice.name or f"Invoice {invoice.reference}")


def redirect_url(request: Request | None) -> str:
    """Where the customer lands after paying.

    Prefers the page the request came from, then its origin, then the
    configured default.
    """
    if request is not None:
        for header in ("referer", "origin"):
            value = request.headers.get(header)
            if value:
                return value
    return settings.payment_redirect_url
