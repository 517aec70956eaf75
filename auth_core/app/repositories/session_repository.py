from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from auth_core.domain.entities import Session


class ISessionRepository(ABC):
    """Session repository interface - application layer"""

    @abstractmethod
    async def create(self, session: Session) -> Session:
        """Create a new session"""
        pass

    @abstractmethod
    async def find_by_refresh_token_hash(self, refresh_token_hash: str) -> Optional[Session]:
        """Find session by refresh token hash, revoked or not"""
        pass

    @abstractmethod
    async def find_by_user_id(self, user_id: UUID) -> List[Session]:
        """Get all sessions for a user, newest first"""
        pass

    @abstractmethod
    async def update(self, session: Session) -> Session:
        """Update existing session"""
        pass

    @abstractmethod
    async def delete(self, session_id: UUID) -> bool:
        """Delete a session. Returns True if a row was removed."""
        pass

    @abstractmethod
    async def revoke_if_active(self, session_id: UUID) -> bool:
        """
        Revoke a session only if it is still unrevoked and unexpired.

        Must be a single atomic compare-and-set: of several concurrent callers
        for the same session, exactly one gets True.
        """
        pass

    @abstractmethod
    async def revoke_all_by_user_id(self, user_id: UUID) -> int:
        """Revoke all sessions for a user. Returns count of revoked sessions."""
        pass

    @abstractmethod
    async def delete_expired(self) -> int:
        """Delete expired or revoked sessions. Returns count of deleted rows."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count active (unrevoked, unexpired) sessions"""
        pass
