from datetime import timedelta
from uuid import uuid4

import pytest
from sqlalchemy.exc import SQLAlchemyError

from auth_core.app.use_cases.auth import LogoutRequest, LogoutUseCase
from auth_core.domain.base import utcnow
from auth_core.domain.entities import Session

TOKEN = "refresh-token-to-revoke"


@pytest.fixture
def use_case(mock_uow, token_service):
    return LogoutUseCase(mock_uow, token_service)


@pytest.fixture
def session(mock_uow, token_service):
    session = Session.create(
        user_id=uuid4(),
        refresh_token_hash=token_service.hash_refresh_token(TOKEN),
        expires_at=utcnow() + timedelta(days=7),
    )
    mock_uow.sessions.find_by_refresh_token_hash.return_value = session
    return session


@pytest.mark.asyncio
async def test_successful_logout(use_case, mock_uow, session):
    result = await use_case.execute(LogoutRequest(refresh_token=TOKEN))

    assert result.is_ok()
    assert result.value is True
    assert session.revoked is True
    mock_uow.sessions.update.assert_called_once_with(session)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_logout_unknown_token_succeeds_without_write(use_case, mock_uow):
    result = await use_case.execute(LogoutRequest(refresh_token="never-issued"))

    assert result.is_ok()
    mock_uow.sessions.update.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_logout_already_revoked_is_noop(use_case, mock_uow, session):
    session.revoke()
    revoked_at = session.updated_at

    result = await use_case.execute(LogoutRequest(refresh_token=TOKEN))

    assert result.is_ok()
    assert session.updated_at == revoked_at
    mock_uow.sessions.update.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_logout_store_failure(use_case, mock_uow, session):
    mock_uow.sessions.update.side_effect = SQLAlchemyError("connection reset")

    result = await use_case.execute(LogoutRequest(refresh_token=TOKEN))

    assert result.is_err()
    assert result.error.code == "SESSION_REVOKE_FAILED"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_logout_empty_token(use_case, mock_uow):
    result = await use_case.execute(LogoutRequest(refresh_token=None))

    assert result.is_err()
    assert result.error.code == "INVALID_REFRESH_TOKEN"
    mock_uow.sessions.find_by_refresh_token_hash.assert_not_called()
