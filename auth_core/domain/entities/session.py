"""
Session Entity

One refresh-token grant for one device.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from ..errors import ValidationError


class Session(SQLModel, table=True):
    """
    Session entity - stores hashed refresh tokens for authentication.

    Business Rules:
    - Only the SHA-256 hash of the refresh token is stored (unique, O(1) lookup)
    - Tokens rotate on each refresh: the old session is revoked, a new one created
    - revoked only ever goes False -> True
    - Validity is computed from revoked and expires_at, never stored

    States: active -> revoked (explicit) or active -> expired (time passes).
    Neither terminal state can be left.
    """

    __tablename__ = "sessions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    refresh_token_hash: str = Field(max_length=64, unique=True, index=True)  # SHA-256 hex
    revoked: bool = Field(default=False)

    # Device / origin metadata
    device_info: Optional[str] = Field(default=None, max_length=255)
    ip_address: Optional[str] = Field(default=None, max_length=64)

    # Timestamps
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_session_expires_at", "expires_at"),
        Index("idx_session_revoked", "revoked"),
    )

    @classmethod
    def create(
        cls,
        user_id: UUID,
        refresh_token_hash: str,
        expires_at: datetime,
        device_info: Optional[str] = None,
        ip_address: Optional[str] = None,
    ) -> "Session":
        """
        Build a new active session.

        Raises:
            ValidationError: empty hash, or expires_at not strictly in the future
        """
        if not refresh_token_hash:
            raise ValidationError(
                "INVALID_REFRESH_TOKEN_HASH",
                "Refresh token hash cannot be empty",
                "refreshTokenHash",
            )

        now = utcnow()
        if expires_at <= now:
            raise ValidationError(
                "INVALID_EXPIRY_TIME",
                "Session expiry time must be in the future",
                "expiresAt",
            )

        return cls(
            user_id=user_id,
            refresh_token_hash=refresh_token_hash,
            expires_at=expires_at,
            revoked=False,
            device_info=device_info,
            ip_address=ip_address,
            created_at=now,
            updated_at=now,
        )

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        return (now or utcnow()) >= self.expires_at

    def is_valid(self, now: Optional[datetime] = None) -> bool:
        return not self.revoked and not self.is_expired(now)

    def revoke(self) -> None:
        # Revoking twice is a no-op
        if self.revoked:
            return
        self.revoked = True
        self.updated_at = utcnow()
