# Standard library imports
import logging

# Local application imports
from ....core.exceptions import UsernameTakenError, ValidationError
from ....core.security import MAX_PASSWORD_BYTES
from ....domain.repositories.account_repository import AccountRepository
from ....domain.services.password_hasher import PasswordHasher
from ....domain.services.token_issuer import TokenIssuer
from ...dto.auth_dto import UserRegistrationRequest, RegistrationResponse

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new account"""

    def __init__(
        self,
        account_repository: AccountRepository,
        password_hasher: PasswordHasher,
        token_issuer: TokenIssuer,
    ) -> None:
        self.account_repository = account_repository
        self.password_hasher = password_hasher
        self.token_issuer = token_issuer

    async def execute(self, request: UserRegistrationRequest) -> RegistrationResponse:
        """
        Register a new account and open a session for it

        Args:
            request: Registration request with username and password

        Returns:
            RegistrationResponse with confirmation message and session token

        Raises:
            ValidationError: If the username is blank or the password exceeds bcrypt's byte limit
            UsernameTakenError: If an account with this username already exists
            HashingError: If the password could not be hashed
            PersistenceError: On storage failure
        """
        if not request.username.strip():
            raise ValidationError("Username and password are required")
        if len(request.password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")

        # Check if username is already registered
        existing_account = await self.account_repository.find_by_username(request.username)
        if existing_account is not None:
            logger.info(f"Registration rejected, username already taken: {request.username}")
            raise UsernameTakenError(request.username)

        password_hash = self.password_hasher.hash(request.password)

        # The store's uniqueness constraint settles concurrent registrations
        account = await self.account_repository.insert(request.username, password_hash)

        token = self.token_issuer.issue({"username": account.username})

        logger.info(f"User registered successfully: {account.username} (user_id={account.id})")
        return RegistrationResponse(message="User registered successfully", token=token)
