"""Payment processor integrations."""

from app.services.payments.stripe_service import CheckoutSession, StripeCheckoutService

__all__ = ["CheckoutSession", "StripeCheckoutService"]
