from uuid import UUID

from auth_core.app.services.token_service import ITokenService
from auth_core.domain.errors import TokenError
from auth_core.domain.result import Result, Return
from .dtos import TokenClaims


class ValidateAccessTokenUseCase:
    """Verify an access token and project it to the caller's identity."""

    def __init__(self, token_service: ITokenService):
        self.token_service = token_service

    def execute(self, token: str) -> Result[TokenClaims]:
        if not token:
            return Return.err(
                TokenError("INVALID_TOKEN", "Access token cannot be empty", "accessToken").to_error()
            )

        try:
            claims = self.token_service.validate_access_token(token)
            # Subjects are user ids; anything else was not minted for a user
            UUID(claims.sub)
        except TokenError as e:
            return Return.err(e.to_error())
        except ValueError:
            return Return.err(
                TokenError("INVALID_TOKEN", "Invalid token subject", "accessToken").to_error()
            )

        return Return.ok(TokenClaims(user_id=claims.sub, email=claims.email))
