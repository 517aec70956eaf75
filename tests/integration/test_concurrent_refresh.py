import asyncio

import pytest
from sqlalchemy.orm import sessionmaker
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from auth_core.adapter.services.password_service import BcryptPasswordService
from auth_core.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from auth_core.app.services.auth_service import AuthService
from auth_core.app.use_cases.auth import RefreshTokenRequest, RegisterRequest
from auth_core.depends import token_service
from auth_core.domain.entities import Session


@pytest.mark.asyncio
async def test_concurrent_refresh_on_separate_connections_single_winner(engine):
    Sessions = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    password_service = BcryptPasswordService(rounds=4)
    db_sessions = [Sessions() for _ in range(6)]

    def service(db_session) -> AuthService:
        return AuthService(SqlAlchemyUnitOfWork(db_session), password_service, token_service)

    try:
        registered = await service(db_sessions[0]).register(
            RegisterRequest(email="race@example.com", name="Racer", password="SecurePass123!")
        )
        assert registered.errors == []
        request = RefreshTokenRequest(refresh_token=registered.refresh_token)

        results = await asyncio.gather(
            *(service(s).refresh_token(request) for s in db_sessions[1:])
        )

        winners = [r for r in results if not r.errors]
        losers = [r for r in results if r.errors]
        assert len(winners) == 1
        assert len(losers) == 4
        assert all(r.errors[0].code == "INVALID_REFRESH_TOKEN" for r in losers)

        async with Sessions() as fresh:
            stored = (await fresh.exec(select(Session))).all()
        assert len(stored) == 2
        assert sum(1 for s in stored if not s.revoked) == 1
    finally:
        for db_session in db_sessions:
            await db_session.close()
