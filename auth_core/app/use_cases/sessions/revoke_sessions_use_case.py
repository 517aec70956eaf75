"""
Revoke Sessions Use Case

Handles session revocation for security and session management.
"""

import logging
from uuid import UUID

from auth_core.app.use_cases.base import StoreUseCase
from auth_core.domain.errors import AuthError
from auth_core.domain.result import Error, Result, Return
from .dtos import RevokeSessionsResponse

logger = logging.getLogger(__name__)


class RevokeSessionsUseCase(StoreUseCase):
    """
    Use case for revoking every session of a user ("log out everywhere").

    Business Rules:
    - Users revoke their own sessions only
    - Already revoked sessions are left untouched and not counted
    - Access tokens already issued stay valid until they expire
    """

    async def execute(self, user_id: UUID) -> Result[RevokeSessionsResponse]:
        """
        Args:
            user_id: User whose sessions will be revoked

        Returns:
            Result with count of revoked sessions, or Error
        """
        try:
            async with self.uow:
                user = await self._store(self.uow.users.get_by_id(user_id))
                if user is None:
                    return Return.err(Error("USER_NOT_FOUND", "User not found", "user"))

                count = await self._store(
                    self.uow.sessions.revoke_all_by_user_id(user_id),
                    "SESSION_REVOKE_FAILED",
                    "Failed to revoke user sessions",
                )
                await self._store(
                    self.uow.commit(),
                    "SESSION_REVOKE_FAILED",
                    "Failed to revoke user sessions",
                )
        except AuthError as e:
            return self._fail(e, "Revoke sessions")

        logger.info(f"Revoked {count} session(s) for user {user_id}")
        return Return.ok(RevokeSessionsResponse(user_id=str(user_id), revoked_count=count))
