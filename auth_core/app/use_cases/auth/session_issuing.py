"""
Token issuance + session creation shared by register, login and refresh.
"""

from typing import Optional, Tuple
from uuid import UUID

from auth_core.app.services.token_service import ITokenService, TokenPair
from auth_core.app.services.unit_of_work import UnitOfWork
from auth_core.app.use_cases.base import StoreUseCase
from auth_core.domain.base import utcnow
from auth_core.domain.entities import Session


class SessionIssuingUseCase(StoreUseCase):
    def __init__(
        self,
        uow: UnitOfWork,
        token_service: ITokenService,
        store_timeout: Optional[float] = None,
    ):
        super().__init__(uow, store_timeout)
        self.token_service = token_service

    async def _open_session(
        self,
        user_id: UUID,
        email: str,
        device_info: Optional[str],
        ip_address: Optional[str],
    ) -> Tuple[TokenPair, Session]:
        """
        Mint a token pair and persist a session for its refresh half.

        Does not commit; the caller owns the transaction.
        """
        token_pair = self.token_service.generate_token_pair(str(user_id), email)

        session = Session.create(
            user_id=user_id,
            refresh_token_hash=self.token_service.hash_refresh_token(
                token_pair.refresh_token
            ),
            expires_at=utcnow() + self.token_service.refresh_token_ttl,
            device_info=device_info,
            ip_address=ip_address,
        )
        session = await self._store(
            self.uow.sessions.create(session),
            "SESSION_CREATION_FAILED",
            "Failed to create session",
        )
        return token_pair, session
