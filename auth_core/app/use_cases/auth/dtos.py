"""
Authentication Use Case DTOs (Data Transfer Objects)

Requests are the core's input contract, results its output contract. Input
fields are optional on purpose: missing values are reported as structured
validation errors by the use cases, not as pydantic exceptions.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from auth_core.domain.entities import User
from auth_core.domain.result import Error, Result


# ============================================================================
# Request DTOs
# ============================================================================


class RegisterRequest(BaseModel):
    """Create an account and open its first session"""

    email: Optional[str] = None
    name: Optional[str] = None
    password: Optional[str] = None
    device_info: Optional[str] = None
    ip_address: Optional[str] = None


class LoginRequest(BaseModel):
    """Authenticate with email + password and open a new session"""

    email: Optional[str] = None
    password: Optional[str] = None
    device_info: Optional[str] = None
    ip_address: Optional[str] = None


class RefreshTokenRequest(BaseModel):
    """Rotate a refresh token"""

    refresh_token: Optional[str] = None
    device_info: Optional[str] = None
    ip_address: Optional[str] = None


class LogoutRequest(BaseModel):
    """Revoke the session behind a refresh token"""

    refresh_token: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class UserInfo(BaseModel):
    """User summary in authentication responses"""

    id: str
    email: str
    name: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(
            id=str(user.id),
            email=user.email,
            name=user.name,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class AuthResponse(BaseModel):
    """Successful register/login/refresh payload"""

    user: UserInfo
    access_token: str
    refresh_token: str
    expires_at: datetime
    session_id: str


class ErrorInfo(BaseModel):
    """One classified error"""

    code: str
    message: str
    field: Optional[str] = None

    @classmethod
    def from_error(cls, error: Error) -> "ErrorInfo":
        return cls(code=error.code, message=error.message, field=error.field)


class AuthResult(BaseModel):
    """
    Outcome of register/login/refresh.

    Success carries tokens and an empty errors list; failure carries no
    tokens and at least one error.
    """

    user: Optional[UserInfo] = None
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    expires_at: Optional[datetime] = None
    errors: List[ErrorInfo] = []

    @classmethod
    def from_result(cls, result: Result[AuthResponse]) -> "AuthResult":
        if result.is_err():
            return cls(errors=[ErrorInfo.from_error(e) for e in result.errors])
        data = result.value
        return cls(
            user=data.user,
            access_token=data.access_token,
            refresh_token=data.refresh_token,
            expires_at=data.expires_at,
        )


class LogoutResult(BaseModel):
    """Outcome of logout"""

    success: bool
    errors: List[ErrorInfo] = []

    @classmethod
    def from_result(cls, result: Result) -> "LogoutResult":
        if result.is_err():
            return cls(
                success=False,
                errors=[ErrorInfo.from_error(e) for e in result.errors],
            )
        return cls(success=True)


class TokenClaims(BaseModel):
    """Identity projection of a validated access token"""

    user_id: str
    email: str
