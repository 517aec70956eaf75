from typing import List

from fastapi import status

from auth_core.app.use_cases.auth import ErrorInfo
from auth_core.domain.result import Error

# Error codes that are the client's fault, by HTTP status
CLIENT_ERROR_STATUS = {
    "INVALID_EMAIL": status.HTTP_400_BAD_REQUEST,
    "INVALID_NAME": status.HTTP_400_BAD_REQUEST,
    "NAME_TOO_LONG": status.HTTP_400_BAD_REQUEST,
    "INVALID_PASSWORD": status.HTTP_400_BAD_REQUEST,
    "PASSWORD_TOO_SHORT": status.HTTP_400_BAD_REQUEST,
    "PASSWORD_TOO_LONG": status.HTTP_400_BAD_REQUEST,
    "DUPLICATE_EMAIL": status.HTTP_409_CONFLICT,
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
    "INVALID_REFRESH_TOKEN": status.HTTP_401_UNAUTHORIZED,
    "INVALID_TOKEN": status.HTTP_401_UNAUTHORIZED,
    "TOKEN_EXPIRED": status.HTTP_401_UNAUTHORIZED,
    "ACCOUNT_INACTIVE": status.HTTP_403_FORBIDDEN,
    "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
}


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def raise_for_errors(errors: List[ErrorInfo]) -> None:
    """Turn the first error of a failed result into a ClientError/ServerError"""
    if not errors:
        return
    first = errors[0]
    error = Error(first.code, first.message, first.field)
    if first.code in CLIENT_ERROR_STATUS:
        raise ClientError(error, status_code=CLIENT_ERROR_STATUS[first.code])
    raise ServerError(error)
