"""
User Model
Represents user data stored in the users collection.
"""

import hashlib
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UserRole(str, Enum):
    """Roles a user account can hold."""
    USER = "user"
    ADMIN = "admin"


def normalize_email(email: str) -> str:
    """Emails are unique and matched case-insensitively."""
    return email.strip().lower()


def user_id_for_email(email: str) -> str:
    """Derive the stable document ID for an email address."""
    return hashlib.sha256(normalize_email(email).encode()).hexdigest()[:28]


class UserModel(BaseModel):
    """User document. Unknown profile fields are kept as submitted."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    email: str = Field(description="Unique email address")
    role: UserRole = Field(default=UserRole.USER, description="Account role")
    is_premium: bool = Field(default=False, alias="isPremium", description="Premium membership flag")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        alias="createdAt",
        description="Account creation timestamp",
    )
    saved_lessons: List[str] = Field(
        default_factory=list,
        alias="savedLessons",
        description="Bookmarked lesson IDs",
    )

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Store emails in their normalized form."""
        return normalize_email(v)

    @property
    def uid(self) -> str:
        return user_id_for_email(self.email)

    def to_dict(self) -> Dict[str, Any]:
        """Convert user to dictionary for Firestore storage."""
        data = self.model_dump(by_alias=True)
        data["role"] = self.role.value
        return data
