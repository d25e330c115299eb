"""Tests for the Mollie and SumUp payment providers and the provider registry."""

import json
import uuid
from decimal import Decimal
from unittest.mock import patch

import httpx
import pytest
from starlette.requests import Request

from betaalservice.models.invoice import Invoice
from betaalservice.models.service import Service
from betaalservice.services.payment_provider import (
    PaymentProviderError,
    UnsupportedPaymentProviderError,
    invoice_total,
    redirect_url,
)
from betaalservice.services.payment_providers import PAYMENT_PROVIDERS, get_payment_provider
from betaalservice.services.payment_providers.mollie import MollieProvider
from betaalservice.services.payment_providers.sumup import SumUpProvider

MOLLIE_CHECKOUT = "https://www.mollie.com/checkout/select-method/7UhSN1zuXS"
SUMUP_CHECKOUT = "https://checkout.sumup.com/pay/8f9316a6-3df7-4b8b-8d4c-1d5a2a1b1c9e"


def _invoice(**overrides) -> Invoice:
    data = {
        "id": uuid.UUID("6a7c1b2e-0f7a-4c11-9d0e-3b8f2f6e1a10"),
        "organization_id": uuid.uuid4(),
        "reference": "INV-20261016-0001",
        "name": "Parking permit 2026",
        "price": Decimal("100.00"),
        "tax": Decimal("21.00"),
        "price_currency": "EUR",
    }
    data.update(overrides)
    return Invoice(**data)


def _service(service_type: str, **configuration) -> Service:
    return Service(type=service_type, authorization="test_key", configuration=configuration)


def _request(*headers: tuple[str, str]) -> Request:
    return Request(
        {
            "type": "http",
            "method": "POST",
            "path": "/v1/invoices/",
            "headers": [(k.encode(), v.encode()) for k, v in headers],
        }
    )


class _Recorder:
    """httpx transport handler that records the request and replies with a fixed response."""

    def __init__(self, response: httpx.Response):
        self.response = response
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response

    @property
    def body(self) -> dict:
        return json.loads(self.requests[0].content)


class TestHelpers:
    def test_invoice_total_adds_tax(self):
        assert invoice_total(_invoice()) == Decimal("121.00")

    def test_redirect_url_prefers_referer(self):
        request = _request(
            ("origin", "https://shop.example.com"),
            ("referer", "https://shop.example.com/cart"),
        )
        assert redirect_url(request) == "https://shop.example.com/cart"

    def test_redirect_url_uses_origin(self):
        request = _request(("origin", "https://shop.example.com"))
        assert redirect_url(request) == "https://shop.example.com"

    @patch("betaalservice.services.payment_provider.settings")
    def test_redirect_url_default(self, mock_settings):
        mock_settings.payment_redirect_url = "https://example.com/return"
        assert redirect_url(None) == "https://example.com/return"
        assert redirect_url(_request()) == "https://example.com/return"


class TestRegistry:
    def test_known_providers(self):
        assert PAYMENT_PROVIDERS == {"mollie": MollieProvider, "sumup": SumUpProvider}

    def test_get_mollie_provider(self):
        service = _service("mollie")
        provider = get_payment_provider(service)
        assert isinstance(provider, MollieProvider)
        assert provider.service is service
        assert provider.provider_name == "mollie"

    def test_get_sumup_provider(self):
        assert isinstance(get_payment_provider(_service("sumup")), SumUpProvider)

    def test_unsupported_provider(self):
        with pytest.raises(UnsupportedPaymentProviderError) as exc_info:
            get_payment_provider(_service("paypal"))
        assert exc_info.value.service_type == "paypal"
        assert "paypal" in str(exc_info.value)


class TestMollieProvider:
    def test_create_payment(self):
        recorder = _Recorder(
            httpx.Response(
                201,
                json={"id": "tr_7UhSN1zuXS", "_links": {"checkout": {"href": MOLLIE_CHECKOUT}}},
            )
        )
        provider = MollieProvider(_service("mollie"), transport=httpx.MockTransport(recorder))

        request = _request(("referer", "https://shop.example.com/cart"))
        url = provider.create_payment(_invoice(), request)

        assert url == MOLLIE_CHECKOUT
        sent = recorder.requests[0]
        assert sent.method == "POST"
        assert str(sent.url) == "https://api.mollie.com/v2/payments"
        assert sent.headers["Authorization"] == "Bearer test_key"
        assert recorder.body == {
            "amount": {"currency": "EUR", "value": "121.00"},
            "description": "Parking permit 2026",
            "redirectUrl": "https://shop.example.com/cart",
            "metadata": {
                "invoice_id": "6a7c1b2e-0f7a-4c11-9d0e-3b8f2f6e1a10",
                "reference": "INV-20261016-0001",
            },
        }

    def test_profile_and_api_url_from_configuration(self):
        service = _service("mollie", profile_id="pfl_QkEhN94Ba", api_url="https://mollie.test/v2/")
        recorder = _Recorder(
            httpx.Response(201, json={"_links": {"checkout": {"href": MOLLIE_CHECKOUT}}})
        )
        provider = MollieProvider(service, transport=httpx.MockTransport(recorder))

        provider.create_payment(_invoice(name=None))

        assert str(recorder.requests[0].url) == "https://mollie.test/v2/payments"
        assert recorder.body["profileId"] == "pfl_QkEhN94Ba"
        assert recorder.body["description"] == "Invoice INV-20261016-0001"

    def test_missing_checkout_link(self):
        recorder = _Recorder(httpx.Response(201, json={"id": "tr_1", "_links": {}}))
        provider = MollieProvider(_service("mollie"), transport=httpx.MockTransport(recorder))
        with pytest.raises(PaymentProviderError, match="checkout URL"):
            provider.create_payment(_invoice())

    @pytest.mark.parametrize(
        "links",
        [None, [], "https://www.mollie.com", {"checkout": None}, {"checkout": "https://x"}],
    )
    def test_malformed_links(self, links):
        recorder = _Recorder(httpx.Response(201, json={"id": "tr_1", "_links": links}))
        provider = MollieProvider(_service("mollie"), transport=httpx.MockTransport(recorder))
        with pytest.raises(PaymentProviderError, match="checkout URL"):
            provider.create_payment(_invoice())

    def test_api_error(self):
        recorder = _Recorder(
            httpx.Response(401, json={"status": 401, "title": "Unauthorized Request"})
        )
        provider = MollieProvider(_service("mollie"), transport=httpx.MockTransport(recorder))
        with pytest.raises(PaymentProviderError, match="mollie API request failed"):
            provider.create_payment(_invoice())

    def test_transport_error(self):
        def fail(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        provider = MollieProvider(_service("mollie"), transport=httpx.MockTransport(fail))
        with pytest.raises(PaymentProviderError):
            provider.create_payment(_invoice())

    def test_invalid_json(self):
        recorder = _Recorder(httpx.Response(200, content=b"<html>gateway</html>"))
        provider = MollieProvider(_service("mollie"), transport=httpx.MockTransport(recorder))
        with pytest.raises(PaymentProviderError, match="invalid JSON"):
            provider.create_payment(_invoice())

    @pytest.mark.parametrize("payload", [[], ["tr_1"], "tr_1", 42])
    def test_non_object_body(self, payload):
        recorder = _Recorder(httpx.Response(201, json=payload))
        provider = MollieProvider(_service("mollie"), transport=httpx.MockTransport(recorder))
        with pytest.raises(PaymentProviderError, match="unexpected response"):
            provider.create_payment(_invoice())


class TestSumUpProvider:
    def test_create_payment(self):
        recorder = _Recorder(
            httpx.Response(
                201,
                json={"id": "8f9316a6", "status": "PENDING", "hosted_checkout_url": SUMUP_CHECKOUT},
            )
        )
        provider = SumUpProvider(
            _service("sumup", merchant_code="MCXYZ123"), transport=httpx.MockTransport(recorder)
        )

        url = provider.create_payment(_invoice())

        assert url == SUMUP_CHECKOUT
        assert str(recorder.requests[0].url) == "https://api.sumup.com/v0.1/checkouts"
        assert recorder.requests[0].headers["Authorization"] == "Bearer test_key"
        body = recorder.body
        assert body["checkout_reference"] == "INV-20261016-0001"
        assert body["amount"] == 121.0
        assert body["currency"] == "EUR"
        assert body["merchant_code"] == "MCXYZ123"
        assert body["hosted_checkout"] == {"enabled": True}
        assert "pay_to_email" not in body

    def test_pay_to_email(self):
        service = _service("sumup", pay_to_email="kassa@example.com")
        body = SumUpProvider(service).build_checkout_request(_invoice())
        assert body["pay_to_email"] == "kassa@example.com"
        assert "merchant_code" not in body

    def test_requires_merchant(self):
        with pytest.raises(PaymentProviderError, match="merchant_code"):
            SumUpProvider(_service("sumup")).create_payment(_invoice())

    def test_missing_hosted_checkout_url(self):
        recorder = _Recorder(httpx.Response(201, json={"id": "8f9316a6"}))
        provider = SumUpProvider(
            _service("sumup", merchant_code="MCXYZ123"), transport=httpx.MockTransport(recorder)
        )
        with pytest.raises(PaymentProviderError, match="hosted checkout URL"):
            provider.create_payment(_invoice())

    def test_non_object_body(self):
        recorder = _Recorder(httpx.Response(201, json=[{"hosted_checkout_url": SUMUP_CHECKOUT}]))
        provider = SumUpProvider(
            _service("sumup", merchant_code="MCXYZ123"), transport=httpx.MockTransport(recorder)
        )
        with pytest.raises(PaymentProviderError, match="sumup API returned an unexpected response"):
            provider.create_payment(_invoice())
