from unittest.mock import patch

import pytest
from sqlalchemy.exc import SQLAlchemyError

from auth_core.app.use_cases.auth import LoginRequest, LoginUseCase
from auth_core.domain.entities import UserStatus


@pytest.fixture
def use_case(mock_uow, password_service, token_service):
    return LoginUseCase(mock_uow, password_service, token_service)


@pytest.mark.asyncio
async def test_successful_login(use_case, mock_uow, make_user, token_service):
    user = make_user()
    mock_uow.users.get_by_email.return_value = user

    result = await use_case.execute(
        LoginRequest(email="user@example.com", password="SecurePass123!", device_info="cli")
    )

    assert result.is_ok()
    data = result.value
    assert data.user.id == str(user.id)
    assert data.user.email == "user@example.com"

    claims = token_service.validate_access_token(data.access_token)
    assert claims.sub == str(user.id)

    mock_uow.users.get_by_email.assert_called_once_with("user@example.com")
    mock_uow.sessions.create.assert_called_once()
    session = mock_uow.sessions.create.call_args.args[0]
    assert session.user_id == user.id
    assert session.device_info == "cli"

    # last_login_at commit + session commit
    mock_uow.users.update.assert_called_once()
    assert user.last_login_at is not None
    assert mock_uow.commit.call_count == 2


@pytest.mark.asyncio
async def test_login_normalizes_email(use_case, mock_uow, make_user):
    mock_uow.users.get_by_email.return_value = make_user()

    result = await use_case.execute(
        LoginRequest(email="  USER@Example.com ", password="SecurePass123!")
    )

    assert result.is_ok()
    mock_uow.users.get_by_email.assert_called_once_with("user@example.com")


@pytest.mark.asyncio
async def test_login_wrong_password(use_case, mock_uow, make_user):
    mock_uow.users.get_by_email.return_value = make_user()

    result = await use_case.execute(
        LoginRequest(email="user@example.com", password="WrongPassword!")
    )

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"
    assert result.error.message == "Invalid email or password"
    mock_uow.sessions.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_login_unknown_email_matches_wrong_password(use_case, mock_uow, password_service):
    with patch.object(
        password_service, "dummy_verify", wraps=password_service.dummy_verify
    ) as dummy_verify:
        result = await use_case.execute(
            LoginRequest(email="nobody@example.com", password="SecurePass123!")
        )

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"
    assert result.error.message == "Invalid email or password"
    assert result.error.field == "credentials"
    dummy_verify.assert_called_once_with("SecurePass123!")
    mock_uow.sessions.create.assert_not_called()


@pytest.mark.asyncio
async def test_login_inactive_account(use_case, mock_uow, make_user):
    mock_uow.users.get_by_email.return_value = make_user(status=UserStatus.inactive)

    result = await use_case.execute(
        LoginRequest(email="user@example.com", password="SecurePass123!")
    )

    assert result.is_err()
    assert result.error.code == "ACCOUNT_INACTIVE"
    assert result.value is None
    mock_uow.sessions.create.assert_not_called()
    mock_uow.users.update.assert_not_called()


@pytest.mark.asyncio
async def test_login_survives_last_login_failure(use_case, mock_uow, make_user):
    mock_uow.users.get_by_email.return_value = make_user()
    mock_uow.users.update.side_effect = SQLAlchemyError("locked")

    result = await use_case.execute(
        LoginRequest(email="user@example.com", password="SecurePass123!")
    )

    assert result.is_ok()
    assert result.value.access_token
    mock_uow.rollback.assert_called_once()
    mock_uow.sessions.create.assert_called_once()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_login_session_failure(use_case, mock_uow, make_user):
    mock_uow.users.get_by_email.return_value = make_user()
    mock_uow.sessions.create.side_effect = SQLAlchemyError("disk full")

    result = await use_case.execute(
        LoginRequest(email="user@example.com", password="SecurePass123!")
    )

    assert result.is_err()
    assert result.error.code == "SESSION_CREATION_FAILED"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "email, password, code",
    [
        ("bad-email", "SecurePass123!", "INVALID_EMAIL"),
        ("user@example.com", "", "INVALID_PASSWORD"),
        ("user@example.com", None, "INVALID_PASSWORD"),
    ],
)
async def test_login_rejects_invalid_input(use_case, mock_uow, email, password, code):
    result = await use_case.execute(LoginRequest(email=email, password=password))

    assert result.is_err()
    assert result.error.code == code
    mock_uow.users.get_by_email.assert_not_called()


@pytest.mark.asyncio
async def test_login_survives_failed_rollback_after_last_login_failure(
    use_case, mock_uow, make_user
):
    mock_uow.users.get_by_email.return_value = make_user()
    mock_uow.users.update.side_effect = SQLAlchemyError("locked")
    mock_uow.rollback.side_effect = SQLAlchemyError("connection lost")

    result = await use_case.execute(
        LoginRequest(email="user@example.com", password="SecurePass123!")
    )

    assert result.is_ok()
    mock_uow.rollback.assert_called_once()
    mock_uow.sessions.create.assert_called_once()
