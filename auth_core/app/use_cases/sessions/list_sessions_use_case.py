"""
List Sessions Use Case
"""

from typing import List
from uuid import UUID

from auth_core.app.use_cases.base import StoreUseCase
from auth_core.domain.errors import AuthError
from auth_core.domain.result import Result, Return
from .dtos import SessionInfo


class ListSessionsUseCase(StoreUseCase):
    """Return every session of a user, newest first, with computed validity."""

    async def execute(self, user_id: UUID) -> Result[List[SessionInfo]]:
        try:
            async with self.uow:
                sessions = await self._store(self.uow.sessions.find_by_user_id(user_id))
                items = [SessionInfo.from_session(s) for s in sessions]
        except AuthError as e:
            return self._fail(e, "List sessions")

        return Return.ok(items)
