"""
Register Use Case

Creates an account and opens its first session.
"""

import logging
from typing import Optional

from auth_core.app.services.password_service import IPasswordService
from auth_core.app.services.token_service import ITokenService
from auth_core.app.services.unit_of_work import UnitOfWork
from auth_core.domain.entities import User, normalize_email, normalize_name
from auth_core.domain.errors import AuthError, ValidationError
from auth_core.domain.result import Result, Return
from .dtos import AuthResponse, RegisterRequest, UserInfo
from .session_issuing import SessionIssuingUseCase

logger = logging.getLogger(__name__)


def _duplicate_email() -> ValidationError:
    return ValidationError("DUPLICATE_EMAIL", "Email address already exists", "email")


class RegisterUseCase(SessionIssuingUseCase):
    """
    Register Use Case

    Business Logic:
    1. Validate email format, name and password presence
    2. Reject emails that are already registered (DUPLICATE_EMAIL)
    3. Hash password with bcrypt (length rules enforced here)
    4. Create User
    5. Issue token pair and create Session (refresh TTL)
    6. Commit user + session in one transaction

    A concurrent registration that wins the race surfaces as a unique
    constraint violation and is reported as DUPLICATE_EMAIL too.

    If session creation fails the user is rolled back with it, so no
    credential-bearing account is left without a session.
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

    async def execute(self, request: RegisterRequest) -> Result[AuthResponse]:
        """
        Execute register use case

        Args:
            request: RegisterRequest with email, name, password and optional
                device/origin metadata

        Returns:
            Result[AuthResponse] with user summary and tokens, or Error
        """
        logger.info(f"Registering new user: {request.email}")

        try:
            email = normalize_email(request.email)
            name = normalize_name(request.name)
            if not request.password:
                raise ValidationError(
                    "INVALID_PASSWORD", "Password cannot be empty", "password"
                )

            async with self.uow:
                exists = await self._store(self.uow.users.exists_by_email(email))
                if exists:
                    raise _duplicate_email()

                password_hash = self.password_service.hash_password(request.password)

                user = await self._store(
                    self.uow.users.create(
                        User(email=email, name=name, password_hash=password_hash)
                    ),
                    "USER_CREATION_FAILED",
                    "Failed to create user",
                    conflict=_duplicate_email(),
                )
                user_info = UserInfo.from_user(user)

                token_pair, session = await self._open_session(
                    user.id, user.email, request.device_info, request.ip_address
                )
                session_id = str(session.id)

                await self._store(
                    self.uow.commit(),
                    "USER_CREATION_FAILED",
                    "Failed to create user",
                    conflict=_duplicate_email(),
                )
        except AuthError as e:
            return self._fail(e, "Registration")

        logger.info(f"Successfully registered user {user_info.id}")
        return Return.ok(
            AuthResponse(
                user=user_info,
                access_token=token_pair.access_token,
                refresh_token=token_pair.refresh_token,  # Plain token (user receives this)
                expires_at=token_pair.expires_at,
                session_id=session_id,
            )
        )
