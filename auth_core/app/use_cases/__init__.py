"""
Use Cases

Organized by domain folder:
- auth/: register, login, refresh, logout, access token validation
- sessions/: listing, bulk revocation and purging of sessions
"""

from .auth import (
    LoginUseCase,
    LogoutUseCase,
    RefreshTokenUseCase,
    RegisterUseCase,
    ValidateAccessTokenUseCase,
)
from .sessions import (
    ListSessionsUseCase,
    PurgeExpiredSessionsUseCase,
    RevokeSessionsUseCase,
)

__all__ = [
    # Auth
    "RegisterUseCase",
    "LoginUseCase",
    "RefreshTokenUseCase",
    "LogoutUseCase",
    "ValidateAccessTokenUseCase",
    # Sessions
    "ListSessionsUseCase",
    "RevokeSessionsUseCase",
    "PurgeExpiredSessionsUseCase",
]
