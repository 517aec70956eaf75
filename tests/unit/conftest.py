from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest

from auth_core.adapter.services.jwt_service import JWTService
from auth_core.adapter.services.password_service import BcryptPasswordService
from auth_core.domain.entities import User, UserStatus

TEST_SECRET = "unit-test-secret-key-0123456789abcdef"


def _echo(value):
    return value


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.exists_by_email = AsyncMock(return_value=False)
    uow.users.create = AsyncMock(side_effect=_echo)
    uow.users.update = AsyncMock(side_effect=_echo)

    uow.sessions = MagicMock()
    uow.sessions.create = AsyncMock(side_effect=_echo)
    uow.sessions.update = AsyncMock(side_effect=_echo)
    uow.sessions.find_by_refresh_token_hash = AsyncMock(return_value=None)
    uow.sessions.find_by_user_id = AsyncMock(return_value=[])
    uow.sessions.revoke_if_active = AsyncMock(return_value=True)
    uow.sessions.revoke_all_by_user_id = AsyncMock(return_value=0)
    uow.sessions.delete_expired = AsyncMock(return_value=0)
    uow.sessions.count = AsyncMock(return_value=0)

    return uow


@pytest.fixture
def password_service():
    # Minimum cost keeps the suite fast
    return BcryptPasswordService(rounds=4)


@pytest.fixture
def token_service():
    return JWTService(
        secret_key=TEST_SECRET,
        access_token_ttl=timedelta(minutes=15),
        refresh_token_ttl=timedelta(days=7),
        issuer="auth-core-test",
    )


@pytest.fixture
def make_user(password_service):
    def _make_user(
        email="user@example.com",
        password="SecurePass123!",
        status=UserStatus.active,
    ) -> User:
        return User(
            email=email,
            name="Test User",
            password_hash=password_service.hash_password(password),
            status=status,
        )

    return _make_user
