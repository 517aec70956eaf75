"""
Auth Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

from .enums import UserStatus
from .user import User, normalize_email, normalize_name
from .session import Session

__all__ = [
    # Enums
    "UserStatus",
    # Entities
    "User",
    "Session",
    # Value helpers
    "normalize_email",
    "normalize_name",
]
