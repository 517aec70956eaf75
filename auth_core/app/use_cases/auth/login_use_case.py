"""
Login Use Case

Authenticates a user by email + password and opens a new session.
"""

import logging
from typing import Optional

from auth_core.app.services.password_service import IPasswordService
from auth_core.app.services.token_service import ITokenService
from auth_core.app.services.unit_of_work import UnitOfWork
from auth_core.domain.entities import User, normalize_email
from auth_core.domain.errors import (
    AuthError,
    InfrastructureError,
    ValidationError,
    account_inactive,
    invalid_credentials,
)
from auth_core.domain.result import Result, Return
from .dtos import AuthResponse, LoginRequest, UserInfo
from .session_issuing import SessionIssuingUseCase

logger = logging.getLogger(__name__)


class LoginUseCase(SessionIssuingUseCase):
    """
    Use case for user login and JWT issuance.

    Business Rules:
    - Unknown email and wrong password return the same INVALID_CREDENTIALS
    - Unknown email still spends one bcrypt check (timing equalization)
    - Inactive users get ACCOUNT_INACTIVE
    - Failing to record last_login_at is logged, never fatal
    - Every login creates a new, independent session
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_service: IPasswordService,
        token_service: ITokenService,
        store_timeout: Optional[float] = None,
    ):
        super().__init__(uow, token_service, store_timeout)
        self.password_service = password_service

    async def execute(self, request: LoginRequest) -> Result[AuthResponse]:
        """
        Execute login use case.

        Args:
            request: LoginRequest with email, password and optional metadata

        Returns:
            Result with AuthResponse containing tokens, or Error
        """
        logger.info(f"User login attempt: {request.email}")

        try:
            email = normalize_email(request.email)
            if not request.password:
                raise ValidationError(
                    "INVALID_PASSWORD", "Password cannot be empty", "password"
                )

            async with self.uow:
                user = await self._store(self.uow.users.get_by_email(email))

                if user is None:
                    # Hash anyway so response time does not reveal unknown emails
                    self.password_service.dummy_verify(request.password)
                    raise invalid_credentials()

                if not user.is_active:
                    raise account_inactive()

                self.password_service.verify_password(request.password, user.password_hash)

                user_id, user_email = user.id, user.email
                user.record_login()
                user_info = UserInfo.from_user(user)
                await self._record_login(user)

                token_pair, session = await self._open_session(
                    user_id, user_email, request.device_info, request.ip_address
                )
                session_id = str(session.id)

                await self._store(
                    self.uow.commit(), "SESSION_CREATION_FAILED", "Failed to create session"
                )
        except AuthError as e:
            return self._fail(e, "Login")

        logger.info(f"Successfully logged in user {user_info.id}")
        return Return.ok(
            AuthResponse(
                user=user_info,
                access_token=token_pair.access_token,
                refresh_token=token_pair.refresh_token,
                expires_at=token_pair.expires_at,
                session_id=session_id,
            )
        )

    async def _record_login(self, user: User) -> None:
        """Persist last_login_at in its own commit; failure is swallowed."""
        try:
            await self._store(self.uow.users.update(user))
            await self._store(self.uow.commit())
        except InfrastructureError as e:
            logger.error(f"Failed to update user login time: {e.code}")
            try:
                await self._store(self.uow.rollback())
            except InfrastructureError as rollback_error:
                logger.error(f"Rollback after login time update failed: {rollback_error.code}")
