"""
Purge Expired Sessions Use Case

Housekeeping: hard-deletes sessions that can never be used again.
"""

import logging

from auth_core.app.use_cases.base import StoreUseCase
from auth_core.domain.errors import AuthError
from auth_core.domain.result import Result, Return
from .dtos import PurgeSessionsResponse

logger = logging.getLogger(__name__)


class PurgeExpiredSessionsUseCase(StoreUseCase):
    """
    Delete expired and revoked sessions.

    Not part of any request path; meant for a scheduler or an operator.
    """

    async def execute(self) -> Result[PurgeSessionsResponse]:
        try:
            async with self.uow:
                deleted = await self._store(
                    self.uow.sessions.delete_expired(),
                    "SESSION_CLEANUP_FAILED",
                    "Failed to clean up expired sessions",
                )
                await self._store(
                    self.uow.commit(),
                    "SESSION_CLEANUP_FAILED",
                    "Failed to clean up expired sessions",
                )
                active = await self._store(
                    self.uow.sessions.count(),
                    "SESSION_COUNT_FAILED",
                    "Failed to count sessions",
                )
        except AuthError as e:
            return self._fail(e, "Purge sessions")

        logger.info(f"Purged {deleted} session(s), {active} active remaining")
        return Return.ok(PurgeSessionsResponse(deleted_count=deleted, active_count=active))
