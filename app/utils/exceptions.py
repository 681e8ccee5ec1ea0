"""Custom exceptions for the Sapiens.io backend."""

from typing import Any, Dict, Optional


class SapiensException(Exception):
    """Base exception for the Sapiens.io application."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Initialize SapiensException.

        Args:
            message: Human-readable error message.
            status_code: HTTP status code.
            error_code: Machine-readable error code.
            details: Additional error details.
        """
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class UserAlreadyExistsError(SapiensException):
    """Raised when a signup reuses a registered email."""

    def __init__(
        self,
        message: str = "user already exists",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code="USER_ALREADY_EXISTS",
            details=details,
        )


class NotFoundError(SapiensException):
    """Raised when a resource is not found."""

    def __init__(
        self,
        message: str = "Resource not found",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize NotFoundError."""
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


class PaymentError(SapiensException):
    """Raised when the payment processor rejects or fails a call.

    The message is the processor's own error text, passed through untouched.
    """

    def __init__(
        self,
        message: str = "Payment processor error",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=500,
            error_code="PAYMENT_ERROR",
            details=details,
        )


class DocumentStoreError(SapiensException):
    """Raised when the document store cannot serve a read."""

    def __init__(
        self,
        message: str = "Document store unavailable",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=500,
            error_code="DOCUMENT_STORE_ERROR",
            details=details,
        )
