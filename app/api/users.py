"""User registration and lookup endpoints."""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, status

from app.crud.user import UserCRUD
from app.dependencies import get_user_crud
from app.schemas.user_schema import PremiumStatusResponse, RoleResponse, SignUpRequest
from app.utils.logger import get_logger

logger = get_logger(__name__)
router = APIRouter()


@router.post("", status_code=status.HTTP_200_OK)
async def create_user(
    request: SignUpRequest,
    users: UserCRUD = Depends(get_user_crud),
) -> Dict[str, Any]:
    """
    Register a user.

    Role, premium flag and creation time are assigned by the server.

    Args:
        request: Signup payload (email plus any profile fields)
        users: User CRUD

    Returns:
        The stored user record

    Raises:
        UserAlreadyExistsError: If the email is already registered (400)
    """
    user = users.create_user(request.model_dump())
    logger.info(f"User registered: {user['email']}")
    return user


@router.get("/email/{email}")
async def get_user_by_email(
    email: str,
    users: UserCRUD = Depends(get_user_crud),
) -> Optional[Dict[str, Any]]:
    """Get one user by email, or null."""
    return users.get_by_email(email)


@router.get("/{user_id}")
async def get_user(
    user_id: str,
    users: UserCRUD = Depends(get_user_crud),
) -> Optional[Dict[str, Any]]:
    """Get one user by document ID, or null."""
    return users.get_by_id(user_id)


@router.get("")
async def list_users(users: UserCRUD = Depends(get_user_crud)) -> List[Dict[str, Any]]:
    """Get all users."""
    return users.list_all()


@router.get("/{email}/premium", response_model=PremiumStatusResponse)
async def get_premium_status(
    email: str,
    users: UserCRUD = Depends(get_user_crud),
) -> PremiumStatusResponse:
    """Check whether a user is premium. Unknown users are not."""
    return PremiumStatusResponse(isPremium=users.is_premium(email))


@router.get("/{email}/role", response_model=RoleResponse)
async def get_role(
    email: str,
    users: UserCRUD = Depends(get_user_crud),
) -> RoleResponse:
    """Check a user's role. Unknown users get the plain user role."""
    return RoleResponse(role=users.get_role(email))
