"""
Authentication error taxonomy.

Every expected failure is an AuthError subclass carrying the
code/message/field triple callers key their behavior off. Use cases catch
AuthError and turn it into an Error value; anything else is unexpected and
propagates.
"""

from typing import Optional

from .result import Error


class AuthError(Exception):
    def __init__(self, code: str, message: str, field: Optional[str] = None):
        self.code = code
        self.message = message
        self.field = field
        super().__init__(f"{field}: {message}" if field else message)

    def to_error(self) -> Error:
        return Error(self.code, self.message, self.field)


class ValidationError(AuthError):
    """Malformed or missing input, detected before any I/O"""


class CredentialError(AuthError):
    """Wrong password or unknown account (deliberately indistinguishable)"""


class AccountStateError(AuthError):
    """Account exists but may not authenticate"""


class TokenError(AuthError):
    """Malformed, unsigned, wrong-algorithm or expired access token"""


class SessionError(AuthError):
    """Refresh token unknown, revoked or expired"""


class InfrastructureError(AuthError):
    """Store or signing failure on a critical path"""


# Factories for errors raised from more than one workflow.
def invalid_credentials() -> CredentialError:
    return CredentialError("INVALID_CREDENTIALS", "Invalid email or password", "credentials")


def account_inactive() -> AccountStateError:
    return AccountStateError("ACCOUNT_INACTIVE", "Account is inactive", "account")


def invalid_refresh_token() -> SessionError:
    return SessionError(
        "INVALID_REFRESH_TOKEN", "Invalid or expired refresh token", "refreshToken"
    )
