from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class TokenIssuer(ABC):
    """
    Session token capability.

    Tokens are opaque to the rest of the application; swapping the signing
    scheme only means providing another implementation.
    """

    @abstractmethod
    def issue(self, claims: Dict[str, Any], ttl_minutes: Optional[int] = None) -> str:
        """Sign claims into a token valid for ttl_minutes"""
        pass

    @abstractmethod
    def verify(self, token: str) -> Dict[str, Any]:
        """Return the claims of a valid token. Raises InvalidTokenError otherwise."""
        pass
