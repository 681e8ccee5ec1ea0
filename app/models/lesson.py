"""
Lesson Model
Access tiers for lesson documents.
"""

from enum import Enum


class AccessLevel(str, Enum):
    """Lesson visibility tier."""
    FREE = "Free"
    PREMIUM = "Premium"
