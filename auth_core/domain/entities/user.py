"""
User Entity

The principal that owns sessions. Account management lives outside this
service; the auth core only reads credentials and records logins.
"""

import re
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from ..base import utcnow
from ..errors import ValidationError
from .enums import UserStatus

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
MAX_NAME_LENGTH = 100


def normalize_email(email: Optional[str]) -> str:
    """Trim and lower-case an email address, rejecting malformed input."""
    value = (email or "").strip().lower()
    if not value or not EMAIL_PATTERN.match(value):
        raise ValidationError("INVALID_EMAIL", "Invalid email format", "email")
    return value


def normalize_name(name: Optional[str]) -> str:
    value = (name or "").strip()
    if not value:
        raise ValidationError("INVALID_NAME", "Name cannot be empty", "name")
    if len(value) > MAX_NAME_LENGTH:
        raise ValidationError(
            "NAME_TOO_LONG", f"Name cannot exceed {MAX_NAME_LENGTH} characters", "name"
        )
    return value


class User(SQLModel, table=True):
    """
    User entity - the account a session belongs to.

    Business Rules:
    - Email must be unique across all users (stored lower-case)
    - Password stored as bcrypt hash
    - Only active users may log in or refresh
    - last_login_at is bookkeeping only; failing to record it never blocks a login
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    name: str = Field(max_length=MAX_NAME_LENGTH)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    status: UserStatus = Field(default=UserStatus.active)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    last_login_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    @property
    def is_active(self) -> bool:
        return self.status == UserStatus.active

    def record_login(self) -> None:
        now = utcnow()
        self.last_login_at = now
        self.updated_at = now
