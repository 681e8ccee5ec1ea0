import asyncio
from urllib.parse import parse_qs

import httpx
import pytest

from app.config import Settings
from app.services.payments import StripeCheckoutService
from app.utils.exceptions import PaymentError


@pytest.fixture
def settings(monkeypatch):
    monkeypatch.setenv("STRIPE_SECRET_KEY", "sk_test_123")
    monkeypatch.setenv("SITE_DOMAIN", "https://sapiens.example/")
    monkeypatch.setenv("STRIPE_API_BASE", "https://api.stripe.test/v1")
    return Settings()


def _service(settings, handler):
    return StripeCheckoutService(settings, transport=httpx.MockTransport(handler))


def test_create_session_sends_checkout_form(settings):
    seen = {}

    def handler(request):
        seen["request"] = request
        return httpx.Response(200, json={"id": "cs_1", "url": "https://checkout.stripe.com/c/pay/cs_1"})

    session = asyncio.run(_service(settings, handler).create_checkout_session("ada@sapiens.io", "u1"))

    assert session.id == "cs_1"
    assert session.url == "https://checkout.stripe.com/c/pay/cs_1"

    request = seen["request"]
    assert request.method == "POST"
    assert str(request.url) == "https://api.stripe.test/v1/checkout/sessions"
    assert request.headers["authorization"].startswith("Basic ")

    form = {k: v[0] for k, v in parse_qs(request.content.decode()).items()}
    assert form["mode"] == "payment"
    assert form["payment_method_types[0]"] == "card"
    assert form["line_items[0][price_data][currency]"] == "usd"
    assert form["line_items[0][price_data][unit_amount]"] == "1200"
    assert form["line_items[0][price_data][product_data][name]"] == "Sapiens.io Premium Membership"
    assert form["line_items[0][quantity]"] == "1"
    assert form["customer_email"] == "ada@sapiens.io"
    assert form["metadata[userId]"] == "u1"
    assert form["success_url"] == "https://sapiens.example/payment-success?session_id={CHECKOUT_SESSION_ID}"
    assert form["cancel_url"] == "https://sapiens.example/payment-cancel"


def test_stripe_error_message_is_passed_through(settings):
    def handler(request):
        return httpx.Response(
            401, json={"error": {"type": "invalid_request_error", "message": "Invalid API Key provided"}}
        )

    with pytest.raises(PaymentError) as exc:
        asyncio.run(_service(settings, handler).create_checkout_session("ada@sapiens.io", "u1"))
    assert exc.value.message == "Invalid API Key provided"
    assert exc.value.status_code == 500


def test_network_failure_becomes_payment_error(settings):
    def handler(request):
        raise httpx.ConnectError("connection refused")

    with pytest.raises(PaymentError) as exc:
        asyncio.run(_service(settings, handler).create_checkout_session(None, "u1"))
    assert "connection refused" in exc.value.message


def test_retrieve_session_reads_metadata(settings):
    def handler(request):
        assert request.method == "GET"
        assert request.url.path == "/v1/checkout/sessions/cs_1"
        return httpx.Response(
            200, json={"id": "cs_1", "payment_status": "paid", "metadata": {"userId": "u1"}}
        )

    session = asyncio.run(_service(settings, handler).retrieve_checkout_session("cs_1"))
    assert session.metadata == {"userId": "u1"}
    assert session.payment_status == "paid"
