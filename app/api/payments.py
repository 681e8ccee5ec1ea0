"""Premium membership checkout endpoints."""

from fastapi import APIRouter, Depends

from app.crud.user import UserCRUD
from app.dependencies import get_payment_service, get_user_crud
from app.schemas.payment_schema import (
    CheckoutSessionRequest,
    CheckoutSessionResponse,
    PaymentSuccessRequest,
    PaymentSuccessResponse,
)
from app.services.payments import StripeCheckoutService
from app.utils.exceptions import PaymentError
from app.utils.logger import get_logger

logger = get_logger(__name__)
router = APIRouter()


@router.post("/create-checkout-session", response_model=CheckoutSessionResponse)
async def create_checkout_session(
    request: CheckoutSessionRequest,
    payments: StripeCheckoutService = Depends(get_payment_service),
) -> CheckoutSessionResponse:
    """
    Start a hosted checkout for the premium membership.

    Args:
        request: Customer email and the user ID to upgrade
        payments: Stripe checkout service

    Returns:
        CheckoutSessionResponse with the URL to redirect the client to

    Raises:
        PaymentError: If Stripe rejects the session (500, Stripe's message)
    """
    session = await payments.create_checkout_session(request.email, request.userId)
    if not session.url:
        raise PaymentError("Checkout session has no redirect URL", details={"session_id": session.id})
    return CheckoutSessionResponse(url=session.url)


@router.patch("/payment-success", response_model=PaymentSuccessResponse)
async def confirm_payment(
    request: PaymentSuccessRequest,
    payments: StripeCheckoutService = Depends(get_payment_service),
    users: UserCRUD = Depends(get_user_crud),
) -> PaymentSuccessResponse:
    """
    Upgrade the user a completed checkout session was created for.

    Succeeds only once per user: an already premium (or unknown) user yields
    ``success: false`` and the record is left alone.
    """
    session = await payments.retrieve_checkout_session(request.session_id)
    user_id = session.metadata.get("userId")
    if not user_id:
        logger.warning(f"Checkout session {session.id} carries no userId")
        return PaymentSuccessResponse(success=False)

    upgraded = users.grant_premium(user_id)
    if upgraded:
        logger.info(f"User {user_id} upgraded to premium via session {session.id}")
    return PaymentSuccessResponse(success=upgraded)
