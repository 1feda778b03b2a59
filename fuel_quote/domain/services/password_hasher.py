from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """One-way password hashing capability"""

    @abstractmethod
    def hash(self, plain_password: str) -> str:
        """Hash a password. Raises HashingError if the primitive fails."""
        pass

    @abstractmethod
    def verify(self, plain_password: str, password_hash: str) -> bool:
        """Check a password against a stored hash"""
        pass
