"""
Session Management Use Cases
"""

from .list_sessions_use_case import ListSessionsUseCase
from .revoke_sessions_use_case import RevokeSessionsUseCase
from .purge_expired_sessions_use_case import PurgeExpiredSessionsUseCase
from .dtos import SessionInfo, RevokeSessionsResponse, PurgeSessionsResponse

__all__ = [
    "ListSessionsUseCase",
    "RevokeSessionsUseCase",
    "PurgeExpiredSessionsUseCase",
    "SessionInfo",
    "RevokeSessionsResponse",
    "PurgeSessionsResponse",
]
