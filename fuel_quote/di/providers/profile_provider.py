from typing import TYPE_CHECKING
from ...domain.repositories.account_repository import AccountRepository
from ...application.use_cases.profile.complete_profile import CompleteProfileUseCase
from ...application.use_cases.profile.get_profile import GetProfileUseCase
from ...application.use_cases.profile.update_profile import UpdateProfileUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ProfileProvider:
    """Profile use case provider - registers all profile-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            CompleteProfileUseCase,
            lambda: CompleteProfileUseCase(
                account_repository=container.get(AccountRepository)
            )
        )

        container.register_factory(
            GetProfileUseCase,
            lambda: GetProfileUseCase(
                account_repository=container.get(AccountRepository)
            )
        )

        container.register_factory(
            UpdateProfileUseCase,
            lambda: UpdateProfileUseCase(
                account_repository=container.get(AccountRepository)
            )
        )
