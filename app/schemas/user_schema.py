"""
User Request/Response Schemas
API schemas for signup and user lookups.
"""

from pydantic import BaseModel, ConfigDict, Field


class SignUpRequest(BaseModel):
    """User signup request. Extra profile fields pass through."""

    model_config = ConfigDict(extra="allow")

    email: str = Field(min_length=3, description="Email address, used as the unique key")


class PremiumStatusResponse(BaseModel):
    """Premium flag for an email."""

    isPremium: bool = Field(description="Whether the user holds a premium membership")


class RoleResponse(BaseModel):
    """Role for an email."""

    role: str = Field(description="User role")
