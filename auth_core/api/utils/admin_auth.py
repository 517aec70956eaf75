"""
Admin API Key Authentication

Guards operator endpoints such as the expired-session purge.
"""

import secrets

from fastapi import Header, status

from config import ApplicationConfig
from auth_core.api.error import ClientError
from auth_core.domain.result import Error


async def verify_admin_api_key(x_admin_api_key: str = Header(None)):
    """
    Verify the X-Admin-API-Key header.

    Raises:
        ClientError: 401 if key is missing or invalid

    Returns:
        True if valid
    """
    if not x_admin_api_key:
        raise ClientError(
            Error("UNAUTHORIZED", "Admin API key required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    if not secrets.compare_digest(
        x_admin_api_key.encode("utf-8"), ApplicationConfig.ADMIN_API_KEY.encode("utf-8")
    ):
        raise ClientError(
            Error("INVALID_API_KEY", "Invalid admin API key"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return True
