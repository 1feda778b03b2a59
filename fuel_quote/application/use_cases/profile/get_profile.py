# Local application imports
from ....core.exceptions import ProfileNotFoundError
from ....domain.repositories.account_repository import AccountRepository
from ...dto.profile_dto import ProfileResponse


class GetProfileUseCase:
    """Use case for reading a completed profile"""

    def __init__(self, account_repository: AccountRepository) -> None:
        self.account_repository = account_repository

    async def execute(self, username: str) -> ProfileResponse:
        """
        Raises:
            ProfileNotFoundError: If the account is missing or its profile was never completed
        """
        account = await self.account_repository.find_by_username(username)
        if account is None or not account.profile_complete or account.profile is None:
            raise ProfileNotFoundError(username)

        profile = account.profile
        return ProfileResponse(
            username=account.username,
            full_name=profile.full_name,
            address_1=profile.address_1,
            address_2=profile.address_2,
            city=profile.city,
            state=profile.state,
            zipcode=profile.zipcode,
        )
