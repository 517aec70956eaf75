"""
Logout Use Case

Revokes the session behind a refresh token.
"""

import logging
from typing import Optional

from auth_core.app.services.token_service import ITokenService
from auth_core.app.services.unit_of_work import UnitOfWork
from auth_core.app.use_cases.base import StoreUseCase
from auth_core.domain.errors import AuthError, ValidationError
from auth_core.domain.result import Result, Return
from .dtos import LogoutRequest

logger = logging.getLogger(__name__)


class LogoutUseCase(StoreUseCase):
    """
    Use case for logout.

    Business Rules:
    - Idempotent: unknown or already-revoked tokens succeed without writing
    - Failing to persist the revocation is a failure
    """

    def __init__(
        self,
        uow: UnitOfWork,
        token_service: ITokenService,
        store_timeout: Optional[float] = None,
    ):
        super().__init__(uow, store_timeout)
        self.token_service = token_service

    async def execute(self, request: LogoutRequest) -> Result[bool]:
        """
        Returns:
            Result with True when the session is (now) revoked, or Error
        """
        logger.info("User logout")

        try:
            if not request.refresh_token:
                raise ValidationError(
                    "INVALID_REFRESH_TOKEN",
                    "Refresh token cannot be empty",
                    "refreshToken",
                )

            token_hash = self.token_service.hash_refresh_token(request.refresh_token)

            async with self.uow:
                session = await self._store(
                    self.uow.sessions.find_by_refresh_token_hash(token_hash)
                )

                if session is None:
                    logger.info("Session not found for logout, treating as logged out")
                    return Return.ok(True)

                if session.revoked:
                    logger.info(f"Session {session.id} already revoked")
                    return Return.ok(True)

                session.revoke()
                await self._store(
                    self.uow.sessions.update(session),
                    "SESSION_REVOKE_FAILED",
                    "Failed to revoke session",
                )
                await self._store(
                    self.uow.commit(), "SESSION_REVOKE_FAILED", "Failed to revoke session"
                )
        except AuthError as e:
            return self._fail(e, "Logout")

        logger.info("Successfully logged out user")
        return Return.ok(True)
