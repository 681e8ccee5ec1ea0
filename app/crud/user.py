"""
User CRUD Operations
Database operations for user management.
"""

from typing import Any, Dict, Optional

from google.api_core.exceptions import Conflict
from google.cloud.firestore import ArrayUnion, Client

from app.crud.base import BaseCRUD
from app.models.user import UserModel, UserRole, normalize_email
from app.utils.exceptions import NotFoundError, UserAlreadyExistsError

# Fields the server owns on signup; client values are discarded
SERVER_MANAGED_FIELDS = {"role", "isPremium", "createdAt", "savedLessons", "id"}


class UserCRUD(BaseCRUD):
    """CRUD operations for user documents."""

    def __init__(self, db: Client):
        """Initialize user CRUD."""
        super().__init__(db)

    @property
    def collection_name(self) -> str:
        """Get collection name."""
        return "users"

    def create_user(self, profile: Dict[str, Any]) -> Dict[str, Any]:
        """
        Register a new user.

        The document ID is derived from the email, so the insert is an atomic
        create-if-absent and concurrent duplicate signups cannot both succeed.

        Args:
            profile: Submitted user fields (must include ``email``)

        Returns:
            The stored user document

        Raises:
            UserAlreadyExistsError: If the email is already registered
        """
        fields = {k: v for k, v in profile.items() if k not in SERVER_MANAGED_FIELDS}
        user = UserModel(**fields)
        data = user.to_dict()
        try:
            self.get_collection().document(user.uid).create(data)
        except Conflict:
            raise UserAlreadyExistsError(details={"email": user.email})
        return {**data, "id": user.uid}

    def get_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        """
        Get user by email.

        Args:
            email: Email to search for

        Returns:
            User document data or None if not found
        """
        return self.find_one("email", normalize_email(email))

    def is_premium(self, email: Optional[str]) -> bool:
        """Premium flag for ``email``; False when the user is unknown."""
        if not email:
            return False
        user = self.get_by_email(email)
        return bool(user and user.get("isPremium"))

    def get_role(self, email: str) -> str:
        """Role for ``email``; the plain user role when the user is unknown."""
        user = self.get_by_email(email)
        return (user or {}).get("role") or UserRole.USER.value

    def add_saved_lesson(self, email: str, lesson_id: str) -> Dict[str, Any]:
        """
        Bookmark a lesson with set semantics.

        Args:
            email: Owner of the bookmark
            lesson_id: Lesson ID to add

        Returns:
            Update result with matched/modified counts

        Raises:
            NotFoundError: If no user has this email
        """
        user = self.get_by_email(email)
        if not user:
            raise NotFoundError("User not found", details={"email": email})

        already_saved = lesson_id in (user.get("savedLessons") or [])
        self.update(user["id"], {"savedLessons": ArrayUnion([lesson_id])})
        return {
            "acknowledged": True,
            "matchedCount": 1,
            "modifiedCount": 0 if already_saved else 1,
        }

    def get_saved_lesson_ids(self, email: str) -> list:
        user = self.get_by_email(email)
        return list((user or {}).get("savedLessons") or [])

    def grant_premium(self, user_id: str) -> bool:
        """
        Flip ``isPremium`` to true for a non-premium user.

        Returns:
            True if the user was upgraded, False if absent or already premium
        """
        user = self.get_by_id(user_id)
        if not user or user.get("isPremium"):
            return False
        self.update(user_id, {"isPremium": True})
        return True
