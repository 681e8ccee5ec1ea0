"""
Sapiens.io Models
Firestore document representations and data models.
"""

from app.models.user import UserModel, UserRole, normalize_email, user_id_for_email
from app.models.lesson import AccessLevel
from app.models.documents import stamped

__all__ = [
    "UserModel",
    "UserRole",
    "normalize_email",
    "user_id_for_email",
    "AccessLevel",
    "stamped",
]
