import hashlib
import secrets
from datetime import UTC, datetime, timedelta

from jose import ExpiredSignatureError, JWTError, jwt
from pydantic import ValidationError as PydanticValidationError

from auth_core.app.services.token_service import AccessTokenClaims, ITokenService, TokenPair
from auth_core.domain.errors import InfrastructureError, TokenError


def _invalid_token(message: str = "Invalid or expired access token") -> TokenError:
    return TokenError("INVALID_TOKEN", message, "accessToken")


class JWTService(ITokenService):
    """
    JWT access tokens + opaque refresh tokens.

    Access tokens are HS256-signed by default and carry sub, email, iss, aud,
    iat, nbf and exp. Refresh tokens are 256 random bits with no structure;
    only their SHA-256 hash is ever stored.
    """

    def __init__(
        self,
        secret_key: str,
        access_token_ttl: timedelta,
        refresh_token_ttl: timedelta,
        issuer: str,
        audience: str = "api",
        algorithm: str = "HS256",
    ):
        if not secret_key:
            raise ValueError("JWT secret cannot be empty")

        self.secret_key = secret_key
        self.access_token_ttl = access_token_ttl
        self.refresh_token_ttl = refresh_token_ttl
        self.issuer = issuer
        self.audience = audience
        self.algorithm = algorithm

    def generate_token_pair(self, user_id: str, email: str) -> TokenPair:
        """
        Generate a new access/refresh token pair.

        Args:
            user_id: Subject of the access token
            email: User email, carried as a claim

        Returns:
            TokenPair whose expires_at is the access token expiry
        """
        now = datetime.now(UTC).replace(microsecond=0)
        expires_at = now + self.access_token_ttl
        payload = {
            "sub": str(user_id),
            "email": email,
            "iss": self.issuer,
            "aud": self.audience,
            "iat": now,
            "nbf": now,
            "exp": expires_at,
        }
        try:
            access_token = jwt.encode(payload, self.secret_key, algorithm=self.algorithm)
        except JWTError:
            raise InfrastructureError(
                "TOKEN_GENERATION_FAILED",
                "Failed to generate authentication tokens",
                "tokens",
            )

        return TokenPair(
            access_token=access_token,
            refresh_token=self._generate_refresh_token(),
            expires_at=expires_at,
        )

    def validate_access_token(self, token: str) -> AccessTokenClaims:
        """
        Verify and decode an access token.

        Raises:
            TokenError: INVALID_TOKEN for malformed, unsigned, wrong-algorithm,
                tampered or foreign tokens; TOKEN_EXPIRED once past exp
        """
        try:
            header = jwt.get_unverified_header(token)
        except JWTError:
            raise _invalid_token()

        # Refuse anything not signed the way we sign (alg=none, RS/HS confusion)
        if header.get("alg") != self.algorithm:
            raise _invalid_token("Unexpected signing method")

        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                audience=self.audience,
                issuer=self.issuer,
            )
        except ExpiredSignatureError:
            raise TokenError("TOKEN_EXPIRED", "Access token has expired", "accessToken")
        except JWTError:
            raise _invalid_token()

        try:
            claims = AccessTokenClaims(**payload)
        except PydanticValidationError:
            raise _invalid_token("Invalid token claims")

        if claims.exp <= int(datetime.now(UTC).timestamp()):
            raise TokenError("TOKEN_EXPIRED", "Access token has expired", "accessToken")

        return claims

    def hash_refresh_token(self, refresh_token: str) -> str:
        return hashlib.sha256(refresh_token.encode("utf-8")).hexdigest()

    @staticmethod
    def _generate_refresh_token() -> str:
        return secrets.token_urlsafe(32)
