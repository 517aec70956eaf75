"""
Session Management DTOs
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from auth_core.domain.entities import Session


class SessionInfo(BaseModel):
    """One session as shown to its owner. Never includes the token hash."""

    id: str
    device_info: Optional[str] = None
    ip_address: Optional[str] = None
    created_at: datetime
    expires_at: datetime
    revoked: bool
    active: bool

    @classmethod
    def from_session(cls, session: Session) -> "SessionInfo":
        return cls(
            id=str(session.id),
            device_info=session.device_info,
            ip_address=session.ip_address,
            created_at=session.created_at,
            expires_at=session.expires_at,
            revoked=session.revoked,
            active=session.is_valid(),
        )


class RevokeSessionsResponse(BaseModel):
    user_id: str
    revoked_count: int


class PurgeSessionsResponse(BaseModel):
    deleted_count: int
    active_count: int
