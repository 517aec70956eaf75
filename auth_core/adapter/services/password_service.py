import base64
import hashlib
from typing import Optional

import bcrypt

from auth_core.app.services.password_service import IPasswordService
from auth_core.domain.errors import ValidationError, invalid_credentials

MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 128


class BcryptPasswordService(IPasswordService):
    """
    bcrypt password hashing.

    bcrypt only reads the first 72 bytes of its input, so the password is
    first reduced to a base64 SHA-256 digest (44 ASCII bytes). Every one of the
    128 allowed characters stays significant.
    """

    def __init__(self, rounds: int = 12):
        self.rounds = rounds
        self._dummy_hash: Optional[bytes] = None

    @staticmethod
    def _prehash(password: str) -> bytes:
        return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())

    def hash_password(self, password: str) -> str:
        if not password:
            raise ValidationError("INVALID_PASSWORD", "Password cannot be empty", "password")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                "PASSWORD_TOO_SHORT",
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
                "password",
            )
        if len(password) > MAX_PASSWORD_LENGTH:
            raise ValidationError(
                "PASSWORD_TOO_LONG",
                f"Password cannot exceed {MAX_PASSWORD_LENGTH} characters",
                "password",
            )

        hashed = bcrypt.hashpw(self._prehash(password), bcrypt.gensalt(self.rounds))
        return hashed.decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> None:
        # Wrong password and unreadable hash are reported identically
        try:
            matched = bcrypt.checkpw(
                self._prehash(password or ""), password_hash.encode("utf-8")
            )
        except (ValueError, AttributeError):
            matched = False

        if not matched:
            raise invalid_credentials()

    def dummy_verify(self, password: str) -> None:
        if self._dummy_hash is None:
            self._dummy_hash = bcrypt.hashpw(
                self._prehash("dummy_password"), bcrypt.gensalt(self.rounds)
            )
        bcrypt.checkpw(self._prehash(password or ""), self._dummy_hash)
