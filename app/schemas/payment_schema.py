"""
Payment Request/Response Schemas
API schemas for the premium checkout flow.
"""

from typing import Optional

from pydantic import BaseModel, Field


class CheckoutSessionRequest(BaseModel):
    """Request to start a hosted checkout."""

    email: Optional[str] = Field(default=None, description="Prefilled customer email")
    userId: str = Field(min_length=1, description="User document ID to upgrade on success")


class CheckoutSessionResponse(BaseModel):
    """Hosted checkout link."""

    url: str = Field(description="Stripe-hosted checkout URL")


class PaymentSuccessRequest(BaseModel):
    """Confirmation sent by the client after the checkout redirect."""

    session_id: str = Field(min_length=1, description="Stripe Checkout Session ID")


class PaymentSuccessResponse(BaseModel):
    """Whether the confirmation upgraded the account."""

    success: bool
