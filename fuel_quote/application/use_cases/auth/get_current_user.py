# Standard library imports
from typing import Optional

# Local application imports
from ....core.exceptions import InvalidTokenError
from ....domain.services.token_issuer import TokenIssuer
from ...dto.auth_dto import CurrentUser


class GetCurrentUserUseCase:
    """Use case for resolving the session owner from a token"""

    def __init__(self, token_issuer: TokenIssuer) -> None:
        self.token_issuer = token_issuer

    async def execute(self, token: str) -> CurrentUser:
        """
        Get the username carried by a session token

        Raises:
            InvalidTokenError: If the token is invalid, expired or carries no username
        """
        payload = self.token_issuer.verify(token)

        username: Optional[str] = payload.get("username")
        if not username:
            raise InvalidTokenError("Invalid authentication payload: missing username")

        return CurrentUser(username=username)
