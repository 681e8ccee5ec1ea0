"""Stripe Checkout integration over the Stripe REST API."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from app.config import Settings
from app.utils.exceptions import PaymentError
from app.utils.logger import get_logger

logger = get_logger(__name__)

PRODUCT_NAME = "Sapiens.io Premium Membership"
# Stripe substitutes the real session ID into the success URL
SESSION_ID_PLACEHOLDER = "{CHECKOUT_SESSION_ID}"


@dataclass
class CheckoutSession:
    """The parts of a Stripe Checkout Session the backend relies on."""

    id: str
    url: Optional[str] = None
    payment_status: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "CheckoutSession":
        return cls(
            id=payload.get("id", ""),
            url=payload.get("url"),
            payment_status=payload.get("payment_status"),
            metadata=payload.get("metadata") or {},
        )


class StripeCheckoutService:
    """Creates and retrieves hosted checkout sessions for premium upgrades."""

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 15.0,
    ):
        """
        Args:
            settings: Application settings (secret key, site domain, price)
            transport: Optional httpx transport, used to stub Stripe in tests
            timeout: Per-request timeout in seconds
        """
        self._settings = settings
        self._transport = transport
        self._timeout = timeout

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._settings.stripe_api_base,
            auth=(self._settings.stripe_secret_key, ""),
            timeout=self._timeout,
            transport=self._transport,
        )

    @staticmethod
    def _raise_for_error(resp: httpx.Response) -> Dict[str, Any]:
        try:
            payload = resp.json()
        except ValueError:
            raise PaymentError(f"Unexpected response from Stripe ({resp.status_code})")
        if resp.status_code >= 400:
            error = payload.get("error") or {}
            raise PaymentError(
                error.get("message") or f"Stripe request failed ({resp.status_code})",
                details={"type": error.get("type"), "status": resp.status_code},
            )
        return payload

    def _session_form(self, email: Optional[str], user_id: str) -> Dict[str, Any]:
        """Form-encoded body for ``POST /checkout/sessions``."""
        domain = self._settings.site_domain
        form = {
            "payment_method_types[0]": "card",
            "mode": "payment",
            "line_items[0][price_data][currency]": self._settings.premium_currency,
            "line_items[0][price_data][product_data][name]": PRODUCT_NAME,
            "line_items[0][price_data][unit_amount]": str(self._settings.premium_price_cents),
            "line_items[0][quantity]": "1",
            "success_url": f"{domain}/payment-success?session_id={SESSION_ID_PLACEHOLDER}",
            "cancel_url": f"{domain}/payment-cancel",
            "metadata[userId]": user_id,
        }
        if email:
            form["customer_email"] = email
        return form

    async def create_checkout_session(self, email: Optional[str], user_id: str) -> CheckoutSession:
        """
        Create a one-off checkout for the premium membership.

        Raises:
            PaymentError: With Stripe's own message when the call fails
        """
        try:
            async with self._client() as client:
                resp = await client.post("/checkout/sessions", data=self._session_form(email, user_id))
        except httpx.HTTPError as e:
            raise PaymentError(str(e) or type(e).__name__)

        session = CheckoutSession.from_api(self._raise_for_error(resp))
        logger.info(f"Checkout session {session.id} created for user {user_id}")
        return session

    async def retrieve_checkout_session(self, session_id: str) -> CheckoutSession:
        """Read a checkout session back to learn who it was for."""
        try:
            async with self._client() as client:
                resp = await client.get(f"/checkout/sessions/{quote(session_id, safe='')}")
        except httpx.HTTPError as e:
            raise PaymentError(str(e) or type(e).__name__)

        return CheckoutSession.from_api(self._raise_for_error(resp))
