"""Global exception handler middleware.

Client-facing error bodies keep the shapes the web client already parses:

- duplicate signup: ``{"message": "user already exists"}``
- checkout failure: ``{"error": "<processor message>"}``
- everything else: ``{"success": false, "error": {"code", "message", "details"}}``
"""

import logging
from typing import Any, Callable, Dict, Type

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from app.utils.exceptions import PaymentError, SapiensException, UserAlreadyExistsError
from app.utils.logger import get_logger

logger = get_logger(__name__)


def _message_body(exc: SapiensException) -> Dict[str, Any]:
    return {"message": exc.message}


def _raw_error_body(exc: SapiensException) -> Dict[str, Any]:
    return {"error": exc.message}


def _envelope_body(exc: SapiensException) -> Dict[str, Any]:
    return {
        "success": False,
        "error": {
            "code": exc.error_code,
            "message": exc.message,
            "details": exc.details,
        },
    }


# Checked in order; the first matching class wins
ERROR_BODIES: Dict[Type[SapiensException], Callable[[SapiensException], Dict[str, Any]]] = {
    UserAlreadyExistsError: _message_body,
    PaymentError: _raw_error_body,
}


def render_error(exc: SapiensException) -> JSONResponse:
    """Build the JSON response for an application exception."""
    body_for = next(
        (render for exc_type, render in ERROR_BODIES.items() if isinstance(exc, exc_type)),
        _envelope_body,
    )
    return JSONResponse(status_code=exc.status_code, content=body_for(exc))


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Turns exceptions escaping the routes into JSON responses."""

    async def dispatch(self, request: Request, call_next: Any) -> JSONResponse:
        # CORS preflight never reaches a route
        if request.method == "OPTIONS":
            return await call_next(request)

        route = {"method": request.method, "path": request.url.path}
        try:
            return await call_next(request)
        except SapiensException as e:
            # Processor and store failures are ours to look at; the rest are client mistakes
            level = logging.ERROR if e.status_code >= 500 else logging.WARNING
            logger.log(
                level,
                f"{e.error_code} on {request.method} {request.url.path}: {e.message}",
                extra={"extra_data": {**route, "error_code": e.error_code, "details": e.details}},
            )
            return render_error(e)
        except Exception as e:
            logger.error(
                f"Unhandled exception on {request.method} {request.url.path}: {e}",
                extra={"extra_data": {**route, "exception_type": type(e).__name__}},
                exc_info=True,
            )
            details = {"error": str(e)} if logger.isEnabledFor(logging.DEBUG) else {}
            return render_error(
                SapiensException(
                    "An unexpected error occurred",
                    error_code="INTERNAL_SERVER_ERROR",
                    details=details,
                )
            )
