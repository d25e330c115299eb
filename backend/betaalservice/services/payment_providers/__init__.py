"""Registry of payment provider integrations keyed by service type."""

from betaalservice.models.service import Service, ServiceType
from betaalservice.services.payment_provider import (
    PaymentProviderBase,
    UnsupportedPaymentProviderError,
)
from betaalservice.services.payment_providers.mollie import MollieProvider
from betaalservice.services.payment_providers.sumup import SumUpProvider

PAYMENT_PROVIDERS: dict[str, type[PaymentProviderBase]] = {
    ServiceType.MOLLIE.value: MollieProvider,
    ServiceType.SUMUP.value: SumUpProvider,
}


def get_payment_provider(service: Service) -> PaymentProviderBase:
    """Factory function to get the payment provider for a configured service."""
    provider_class = PAYMENT_PROVIDERS.get(str(service.type))
    if not provider_class:
        raise UnsupportedPaymentProviderError(service.type)  # type: ignore[arg-type]

    return provider_class(service)
