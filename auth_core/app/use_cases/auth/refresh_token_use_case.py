"""
Refresh Token Use Case

Handles JWT token refresh with refresh token rotation for security.
"""

import logging

from auth_core.domain.errors import (
    AuthError,
    ValidationError,
    account_inactive,
    invalid_refresh_token,
)
from auth_core.domain.result import Result, Return
from .dtos import AuthResponse, RefreshTokenRequest, UserInfo
from .session_issuing import SessionIssuingUseCase

logger = logging.getLogger(__name__)


class RefreshTokenUseCase(SessionIssuingUseCase):
    """
    Use case for refreshing JWT access tokens.

    Business Rules:
    - Refresh token rotation: old session revoked, new session created
    - Unknown, revoked and expired tokens all return INVALID_REFRESH_TOKEN
    - Owner must still exist and be active
    - The old session is revoked with a conditional update; a caller that
      loses a concurrent race for the same token gets INVALID_REFRESH_TOKEN
      instead of a second rotation
    """

    async def execute(self, request: RefreshTokenRequest) -> Result[AuthResponse]:
        """
        Execute refresh token use case.

        Args:
            request: RefreshTokenRequest with the token to verify and rotate

        Returns:
            Result with AuthResponse containing new tokens, or Error
        """
        logger.info("Refreshing token")

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
                    logger.warning("Refresh token not found")
                    raise invalid_refresh_token()

                if not session.is_valid():
                    reason = "revoked" if session.revoked else "expired"
                    logger.warning(f"Refresh attempt on {reason} session {session.id}")
                    raise invalid_refresh_token()

                old_session_id = session.id
                user = await self._store(self.uow.users.get_by_id(session.user_id))
                if user is None:
                    logger.error(f"User not found for session {old_session_id}")
                    raise invalid_refresh_token()

                if not user.is_active:
                    raise account_inactive()

                user_info = UserInfo.from_user(user)
                user_id, user_email = user.id, user.email

                revoked = await self._store(
                    self.uow.sessions.revoke_if_active(old_session_id),
                    "SESSION_REVOKE_FAILED",
                    "Failed to revoke session",
                )
                if not revoked:
                    logger.warning(f"Session {old_session_id} was rotated concurrently")
                    raise invalid_refresh_token()

                token_pair, new_session = await self._open_session(
                    user_id, user_email, request.device_info, request.ip_address
                )
                session_id = str(new_session.id)

                await self._store(
                    self.uow.commit(), "SESSION_CREATION_FAILED", "Failed to create session"
                )
        except AuthError as e:
            return self._fail(e, "Token refresh")

        logger.info(f"Successfully refreshed token for user {user_info.id}")
        return Return.ok(
            AuthResponse(
                user=user_info,
                access_token=token_pair.access_token,
                refresh_token=token_pair.refresh_token,
                expires_at=token_pair.expires_at,
                session_id=session_id,
            )
        )
