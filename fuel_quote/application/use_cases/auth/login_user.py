# Standard library imports
import logging

# Local application imports
from ....core.exceptions import InvalidCredentialsError
from ....domain.repositories.account_repository import AccountRepository
from ....domain.services.password_hasher import PasswordHasher
from ....domain.services.token_issuer import TokenIssuer
from ...dto.auth_dto import UserLoginRequest, LoginResponse

logger = logging.getLogger(__name__)

PROFILE_ROUTE = "/profile"
COMPLETE_PROFILE_ROUTE = "/complete-profile"


class LoginUserUseCase:
    """Use case for authenticating an account and issuing a session token"""

    def __init__(
        self,
        account_repository: AccountRepository,
        password_hasher: PasswordHasher,
        token_issuer: TokenIssuer,
    ) -> None:
        self.account_repository = account_repository
        self.password_hasher = password_hasher
        self.token_issuer = token_issuer

    async def execute(self, request: UserLoginRequest) -> LoginResponse:
        """
        Authenticate and generate a session token

        Args:
            request: Login request with username and password

        Returns:
            LoginResponse with the token and where the client should go next

        Raises:
            InvalidCredentialsError: Unknown username or wrong password (same error for both)
        """
        account = await self.account_repository.find_by_username(request.username)
        if account is None or not self.password_hasher.verify(request.password, account.password_hash):
            logger.info(f"Invalid credentials for user: {request.username}")
            raise InvalidCredentialsError()

        token = self.token_issuer.issue({"username": account.username})
        redirect_to = PROFILE_ROUTE if account.profile_complete else COMPLETE_PROFILE_ROUTE

        logger.info(f"Login successful for user: {account.username}")
        return LoginResponse(token=token, redirect_to=redirect_to)
