from abc import ABC, abstractmethod
from datetime import datetime, timedelta

from pydantic import BaseModel


class TokenPair(BaseModel):
    """Access + refresh token pair. Never persisted as a unit."""

    access_token: str
    refresh_token: str
    expires_at: datetime  # access token expiry


class AccessTokenClaims(BaseModel):
    """Decoded, verified access token claims"""

    sub: str
    email: str
    iss: str
    aud: str
    iat: int
    nbf: int
    exp: int


class ITokenService(ABC):
    """Token issuing interface - application layer"""

    access_token_ttl: timedelta
    refresh_token_ttl: timedelta

    @abstractmethod
    def generate_token_pair(self, user_id: str, email: str) -> TokenPair:
        """Mint a signed access token and a random refresh token"""
        pass

    @abstractmethod
    def validate_access_token(self, token: str) -> AccessTokenClaims:
        """Verify and decode an access token. Raises TokenError."""
        pass

    @abstractmethod
    def hash_refresh_token(self, refresh_token: str) -> str:
        """Deterministic lookup key for a refresh token"""
        pass
