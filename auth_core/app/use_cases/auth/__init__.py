"""
Authentication Use Cases

All authentication-related business logic.
"""

from .register_use_case import RegisterUseCase
from .login_use_case import LoginUseCase
from .refresh_token_use_case import RefreshTokenUseCase
from .logout_use_case import LogoutUseCase
from .validate_access_token_use_case import ValidateAccessTokenUseCase
from .dtos import (
    RegisterRequest,
    LoginRequest,
    RefreshTokenRequest,
    LogoutRequest,
    AuthResponse,
    AuthResult,
    LogoutResult,
    ErrorInfo,
    UserInfo,
    TokenClaims,
)

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "RefreshTokenUseCase",
    "LogoutUseCase",
    "ValidateAccessTokenUseCase",
    # DTOs - Requests
    "RegisterRequest",
    "LoginRequest",
    "RefreshTokenRequest",
    "LogoutRequest",
    # DTOs - Results
    "AuthResponse",
    "AuthResult",
    "LogoutResult",
    "TokenClaims",
    # DTOs - Nested Models
    "ErrorInfo",
    "UserInfo",
]
