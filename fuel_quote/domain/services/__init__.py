"""Capability interfaces the use cases depend on (hashing, session tokens)"""

from .password_hasher import PasswordHasher
from .token_issuer import TokenIssuer

__all__ = ["PasswordHasher", "TokenIssuer"]
