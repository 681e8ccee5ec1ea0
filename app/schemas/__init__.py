"""
Sapiens.io Schemas
Pydantic request/response schemas for API validation and documentation.
"""

from app.schemas.user_schema import (
    SignUpRequest,
    PremiumStatusResponse,
    RoleResponse,
)
from app.schemas.lesson_schema import (
    LessonCreateRequest,
    CommentCreateRequest,
    ReportCreateRequest,
    SaveLessonRequest,
    UpdateResult,
    SuccessResponse,
)
from app.schemas.payment_schema import (
    CheckoutSessionRequest,
    CheckoutSessionResponse,
    PaymentSuccessRequest,
    PaymentSuccessResponse,
)

__all__ = [
    "SignUpRequest",
    "PremiumStatusResponse",
    "RoleResponse",
    "LessonCreateRequest",
    "CommentCreateRequest",
    "ReportCreateRequest",
    "SaveLessonRequest",
    "UpdateResult",
    "SuccessResponse",
    "CheckoutSessionRequest",
    "CheckoutSessionResponse",
    "PaymentSuccessRequest",
    "PaymentSuccessResponse",
]
