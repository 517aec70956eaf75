from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from pydantic import BaseModel, Field

from auth_core.api.error import raise_for_errors
from auth_core.app.services.auth_service import AuthService
from auth_core.app.use_cases.auth import (
    AuthResult,
    LoginRequest,
    LogoutRequest,
    RefreshTokenRequest,
    RegisterRequest,
    TokenClaims,
    UserInfo,
)
from auth_core.depends import get_auth_service, get_current_user

router = APIRouter(prefix="/auth", tags=["Authentication"])


class RegisterPayload(BaseModel):
    """
    Register HTTP request payload

    Shape only: email format, name and password rules are enforced by the
    use case so every client sees the same error codes.
    """

    email: Optional[str] = Field(None, description="User email address")
    name: Optional[str] = Field(None, description="Display name (max 100 chars)")
    password: Optional[str] = Field(None, description="Password (8-128 chars)")


class LoginPayload(BaseModel):
    email: Optional[str] = Field(None, description="User email address")
    password: Optional[str] = Field(None, description="User password")


class RefreshPayload(BaseModel):
    refresh_token: Optional[str] = Field(None, description="Refresh token")


class TokenResponse(BaseModel):
    user: UserInfo
    access_token: str
    refresh_token: str
    token_type: str = "Bearer"
    expires_at: datetime

    @classmethod
    def from_result(cls, result: AuthResult) -> "TokenResponse":
        return cls(
            user=result.user,
            access_token=result.access_token,
            refresh_token=result.refresh_token,
            expires_at=result.expires_at,
        )


class LogoutResponse(BaseModel):
    success: bool


class MeResponse(BaseModel):
    user_id: str
    email: str


def _client_metadata(request: Request) -> dict:
    return {
        "device_info": request.headers.get("user-agent"),
        "ip_address": request.client.host if request.client else None,
    }


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=TokenResponse)
async def register(
    payload: RegisterPayload,
    request: Request,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register

    Creates the account and its first session.

    Raises:
        - 400 Bad Request: INVALID_EMAIL, INVALID_NAME, NAME_TOO_LONG, password rules
        - 409 Conflict: DUPLICATE_EMAIL
        - 500 Internal Server Error: store or signing failure
    """
    result = await auth_service.register(
        RegisterRequest(**payload.model_dump(), **_client_metadata(request))
    )
    raise_for_errors(result.errors)
    return TokenResponse.from_result(result)


@router.post("/login", status_code=status.HTTP_200_OK, response_model=TokenResponse)
async def login(
    payload: LoginPayload,
    request: Request,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Login

    Raises:
        - 401 Unauthorized: INVALID_CREDENTIALS (unknown email or wrong password)
        - 403 Forbidden: ACCOUNT_INACTIVE
        - 500 Internal Server Error: store or signing failure
    """
    result = await auth_service.login(
        LoginRequest(**payload.model_dump(), **_client_metadata(request))
    )
    raise_for_errors(result.errors)
    return TokenResponse.from_result(result)


@router.post("/refresh", status_code=status.HTTP_200_OK, response_model=TokenResponse)
async def refresh(
    payload: RefreshPayload,
    request: Request,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Refresh Token

    Rotates the refresh token: the presented one is revoked and a new pair
    is returned.

    Raises:
        - 401 Unauthorized: INVALID_REFRESH_TOKEN (unknown, revoked or expired)
        - 403 Forbidden: ACCOUNT_INACTIVE
        - 500 Internal Server Error: store or signing failure
    """
    result = await auth_service.refresh_token(
        RefreshTokenRequest(**payload.model_dump(), **_client_metadata(request))
    )
    raise_for_errors(result.errors)
    return TokenResponse.from_result(result)


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=LogoutResponse)
async def logout(
    payload: RefreshPayload,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Logout

    Idempotent: logging out an unknown or already revoked token succeeds.
    """
    result = await auth_service.logout(LogoutRequest(refresh_token=payload.refresh_token))
    raise_for_errors(result.errors)
    return LogoutResponse(success=result.success)


@router.get("/me", status_code=status.HTTP_200_OK, response_model=MeResponse)
async def me(current_user: TokenClaims = Depends(get_current_user)):
    """Identity carried by the bearer access token"""
    return MeResponse(user_id=current_user.user_id, email=current_user.email)
