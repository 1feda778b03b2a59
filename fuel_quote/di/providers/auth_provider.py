from typing import TYPE_CHECKING
from ...domain.repositories.account_repository import AccountRepository
from ...domain.services.password_hasher import PasswordHasher
from ...domain.services.token_issuer import TokenIssuer
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AuthProvider:
    """Authentication use case provider - registers all auth-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all authentication use cases.
        Use cases are created on-demand via factories.
        """
        container.register_factory(
            RegisterUserUseCase,
            lambda: RegisterUserUseCase(
                account_repository=container.get(AccountRepository),
                password_hasher=container.get(PasswordHasher),
                token_issuer=container.get(TokenIssuer),
            )
        )

        container.register_factory(
            LoginUserUseCase,
            lambda: LoginUserUseCase(
                account_repository=container.get(AccountRepository),
                password_hasher=container.get(PasswordHasher),
                token_issuer=container.get(TokenIssuer),
            )
        )

        container.register_factory(
            GetCurrentUserUseCase,
            lambda: GetCurrentUserUseCase(
                token_issuer=container.get(TokenIssuer)
            )
        )
