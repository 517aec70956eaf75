from datetime import timedelta

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from auth_core.adapter.services.jwt_service import JWTService
from auth_core.adapter.services.password_service import BcryptPasswordService
from auth_core.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from auth_core.api.error import ClientError
from auth_core.app.services.auth_service import AuthService
from auth_core.app.services.unit_of_work import UnitOfWork
from auth_core.app.use_cases.auth import TokenClaims
from auth_core.domain.result import Error

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

password_service = BcryptPasswordService(rounds=ApplicationConfig.BCRYPT_ROUNDS)

token_service = JWTService(
    secret_key=ApplicationConfig.JWT_SECRET,
    access_token_ttl=timedelta(minutes=ApplicationConfig.ACCESS_TOKEN_TTL_MINUTES),
    refresh_token_ttl=timedelta(days=ApplicationConfig.REFRESH_TOKEN_TTL_DAYS),
    issuer=ApplicationConfig.JWT_ISSUER,
    audience=ApplicationConfig.JWT_AUDIENCE,
    algorithm=ApplicationConfig.JWT_ALGORITHM,
)

security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_store_timeout() -> float:
    return ApplicationConfig.STORE_TIMEOUT_SECONDS


async def get_auth_service(
    uow: UnitOfWork = Depends(get_unit_of_work),
    store_timeout: float = Depends(get_store_timeout),
) -> AuthService:
    return AuthService(uow, password_service, token_service, store_timeout)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    auth_service: AuthService = Depends(get_auth_service),
) -> TokenClaims:
    """
    Dependency to extract and verify the access token from the Authorization header.

    Returns:
        TokenClaims with user_id and email

    Raises:
        ClientError: 401 if the token is missing, invalid or expired
    """
    if credentials is None:
        raise ClientError(
            Error("INVALID_TOKEN", "Missing bearer token", "accessToken"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    result = auth_service.validate_access_token(credentials.credentials)
    if result.is_err():
        raise ClientError(result.error, status_code=status.HTTP_401_UNAUTHORIZED)

    return result.value
