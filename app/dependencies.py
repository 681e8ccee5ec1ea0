"""
Shared application dependencies.
Supports both Firestore mode and local development mode.
"""

import os
from typing import Any

from fastapi import Depends, Request

from app.config import Settings, get_settings
from app.crud.lesson import CommentCRUD, LessonCRUD, LessonReportCRUD
from app.crud.user import UserCRUD
from app.services.payments import StripeCheckoutService
from app.utils.logger import get_logger

logger = get_logger(__name__)


def _check_local_mode(settings: Settings) -> bool:
    """Determine if we should use local mode (no Firebase)."""
    cred_path = settings.firebase_credentials_path
    if not cred_path or not os.path.exists(cred_path):
        logger.info("Firebase credentials not found - running in LOCAL DEV mode")
        return True
    return False


def open_db_client(settings: Settings) -> Any:
    """Open the process-wide document store client - Firestore in prod, LocalStore in dev."""
    if _check_local_mode(settings):
        from app.services.local_store import LocalStore

        logger.info("Using LocalStore database (data dir: %s)", settings.local_data_dir or "memory")
        return LocalStore(settings.local_data_dir or None)

    import firebase_admin
    from firebase_admin import credentials, firestore

    options = {"projectId": settings.firestore_project_id} if settings.firestore_project_id else None
    try:
        app = firebase_admin.get_app()
    except ValueError:
        app = firebase_admin.initialize_app(credentials.Certificate(settings.firebase_credentials_path), options)
    logger.info("Using Firestore database")
    return firestore.client(app)


def close_db_client(db_client: Any) -> None:
    close = getattr(db_client, "close", None)
    if close is not None:
        close()


def get_db_client(request: Request) -> Any:
    """Document store client opened in the application lifespan."""
    return request.app.state.db_client


def get_user_crud(db_client=Depends(get_db_client)) -> UserCRUD:
    return UserCRUD(db_client)


def get_lesson_crud(db_client=Depends(get_db_client)) -> LessonCRUD:
    return LessonCRUD(db_client)


def get_comment_crud(db_client=Depends(get_db_client)) -> CommentCRUD:
    return CommentCRUD(db_client)


def get_report_crud(db_client=Depends(get_db_client)) -> LessonReportCRUD:
    return LessonReportCRUD(db_client)


def get_payment_service(settings: Settings = Depends(get_settings)) -> StripeCheckoutService:
    """Get the Stripe checkout service."""
    if not settings.stripe_secret_key:
        logger.warning("No Stripe secret key - checkout calls will be rejected by Stripe")
    return StripeCheckoutService(settings)
