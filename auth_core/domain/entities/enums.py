"""
Auth Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserStatus(str, Enum):
    """User account status"""

    active = "active"
    inactive = "inactive"
