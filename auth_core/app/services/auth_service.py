"""
Auth Service

The core's outward contract. Each call runs one use case and maps its
Result onto the AuthResult/LogoutResult shape callers consume: they check
the errors list, never catch exceptions for expected outcomes.
"""

from typing import Optional

from auth_core.app.services.password_service import IPasswordService
from auth_core.app.services.token_service import ITokenService
from auth_core.app.services.unit_of_work import UnitOfWork
from auth_core.app.use_cases.auth import (
    AuthResult,
    LoginRequest,
    LoginUseCase,
    LogoutRequest,
    LogoutResult,
    LogoutUseCase,
    RefreshTokenRequest,
    RefreshTokenUseCase,
    RegisterRequest,
    RegisterUseCase,
    TokenClaims,
    ValidateAccessTokenUseCase,
)
from auth_core.domain.result import Result


class AuthService:
    def __init__(
        self,
        uow: UnitOfWork,
        password_service: IPasswordService,
        token_service: ITokenService,
        store_timeout: Optional[float] = None,
    ):
        self.uow = uow
        self.password_service = password_service
        self.token_service = token_service
        self.store_timeout = store_timeout

    async def register(self, request: RegisterRequest) -> AuthResult:
        use_case = RegisterUseCase(
            self.uow, self.password_service, self.token_service, self.store_timeout
        )
        return AuthResult.from_result(await use_case.execute(request))

    async def login(self, request: LoginRequest) -> AuthResult:
        use_case = LoginUseCase(
            self.uow, self.password_service, self.token_service, self.store_timeout
        )
        return AuthResult.from_result(await use_case.execute(request))

    async def refresh_token(self, request: RefreshTokenRequest) -> AuthResult:
        use_case = RefreshTokenUseCase(self.uow, self.token_service, self.store_timeout)
        return AuthResult.from_result(await use_case.execute(request))

    async def logout(self, request: LogoutRequest) -> LogoutResult:
        use_case = LogoutUseCase(self.uow, self.token_service, self.store_timeout)
        return LogoutResult.from_result(await use_case.execute(request))

    def validate_access_token(self, token: str) -> Result[TokenClaims]:
        return ValidateAccessTokenUseCase(self.token_service).execute(token)
