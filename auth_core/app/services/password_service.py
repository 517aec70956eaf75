from abc import ABC, abstractmethod


class IPasswordService(ABC):
    """Password hashing interface - application layer"""

    @abstractmethod
    def hash_password(self, password: str) -> str:
        """Hash a password. Raises ValidationError on length violations."""
        pass

    @abstractmethod
    def verify_password(self, password: str, password_hash: str) -> None:
        """Raise CredentialError unless password matches password_hash"""
        pass

    @abstractmethod
    def dummy_verify(self, password: str) -> None:
        """Spend one verification's worth of time without a real hash"""
        pass
