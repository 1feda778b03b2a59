# Standard library imports
from typing import Any, Dict, Optional

# Local application imports
from ...core.security import create_jwt_token, decode_jwt_token
from ...domain.services.token_issuer import TokenIssuer


class JwtTokenIssuer(TokenIssuer):
    """PyJWT implementation of TokenIssuer (HMAC-signed, expiring tokens)"""

    def __init__(self, default_ttl_minutes: Optional[int] = None) -> None:
        self.default_ttl_minutes = default_ttl_minutes

    def issue(self, claims: Dict[str, Any], ttl_minutes: Optional[int] = None) -> str:
        if ttl_minutes is None:
            ttl_minutes = self.default_ttl_minutes
        return create_jwt_token(claims, expires_minutes=ttl_minutes)

    def verify(self, token: str) -> Dict[str, Any]:
        return decode_jwt_token(token)
