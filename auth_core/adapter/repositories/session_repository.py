from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, func, or_, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from auth_core.app.repositories.session_repository import ISessionRepository
from auth_core.domain.base import utcnow
from auth_core.domain.entities import Session


class SessionRepository(ISessionRepository):
    """Session repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, session_obj: Session) -> Session:
        """Create a new session"""
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj

    async def find_by_refresh_token_hash(self, refresh_token_hash: str) -> Optional[Session]:
        """
        Find session by refresh token hash.

        Revoked and expired sessions are returned too; the caller decides
        validity so it can log why a token was refused.
        """
        stmt = select(Session).where(Session.refresh_token_hash == refresh_token_hash)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def find_by_user_id(self, user_id: UUID) -> List[Session]:
        """Get all sessions for a user, newest first"""
        stmt = (
            select(Session)
            .where(Session.user_id == user_id)
            .order_by(Session.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def update(self, session_obj: Session) -> Session:
        """Update existing session"""
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj

    async def delete(self, session_id: UUID) -> bool:
        """Delete a session by ID"""
        stmt = delete(Session).where(Session.id == session_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def revoke_if_active(self, session_id: UUID) -> bool:
        """
        Conditionally revoke a session.

        The WHERE clause re-checks revoked/expires_at inside the UPDATE, so the
        database row lock decides which of several concurrent refreshes wins.
        """
        now = utcnow()
        stmt = (
            update(Session)
            .where(
                Session.id == session_id,
                Session.revoked == False,
                Session.expires_at > now,
            )
            .values(revoked=True, updated_at=now)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1

    async def revoke_all_by_user_id(self, user_id: UUID) -> int:
        """Revoke all active sessions for a user"""
        stmt = (
            update(Session)
            .where(Session.user_id == user_id, Session.revoked == False)
            .values(revoked=True, updated_at=utcnow())
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete_expired(self) -> int:
        """Delete sessions that are expired or revoked"""
        stmt = delete(Session).where(
            or_(Session.expires_at < utcnow(), Session.revoked == True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def count(self) -> int:
        """Count active sessions"""
        stmt = (
            select(func.count())
            .select_from(Session)
            .where(Session.revoked == False, Session.expires_at > utcnow())
        )
        result = await self.session.exec(stmt)
        return result.one()
