# Standard library imports
from typing import Optional

# Local application imports
from ...core.exceptions import HashingError
from ...core.security import hash_password, verify_password
from ...domain.services.password_hasher import PasswordHasher


class BcryptPasswordHasher(PasswordHasher):
    """bcrypt implementation of PasswordHasher"""

    def __init__(self, rounds: Optional[int] = None) -> None:
        self.rounds = rounds

    def hash(self, plain_password: str) -> str:
        try:
            return hash_password(plain_password, rounds=self.rounds)
        except (ValueError, TypeError) as e:
            raise HashingError(f"Error hashing password: {str(e)}")

    def verify(self, plain_password: str, password_hash: str) -> bool:
        return verify_password(plain_password, password_hash)
