# Standard library imports
import logging

# Local application imports
from ....core.exceptions import UserNotFoundError
from ....domain.repositories.account_repository import AccountRepository
from ....domain.models.account import Profile
from ...dto.profile_dto import CompleteProfileRequest, MessageResponse

logger = logging.getLogger(__name__)


class CompleteProfileUseCase:
    """Use case for first-time profile completion"""

    def __init__(self, account_repository: AccountRepository) -> None:
        self.account_repository = account_repository

    async def execute(self, request: CompleteProfileRequest) -> MessageResponse:
        """
        Set the profile fields and mark the profile complete in one update.

        Calling it again for a completed profile overwrites the fields;
        profile_complete stays True.

        Raises:
            UserNotFoundError: If no account has this username
            PersistenceError: On storage failure
        """
        account = await self.account_repository.find_by_username(request.username)
        if account is None:
            raise UserNotFoundError(request.username)

        if account.profile_complete:
            logger.info(f"Profile for {request.username} already complete, overwriting fields")

        profile = Profile(
            full_name=request.full_name,
            address_1=request.address_1,
            address_2=request.address_2,
            city=request.city,
            state=request.state,
            zipcode=request.zipcode,
        )
        matched = await self.account_repository.update_profile(
            request.username, profile, mark_complete=True
        )
        if not matched:
            raise UserNotFoundError(request.username)

        logger.info(f"Profile completed for user: {request.username}")
        return MessageResponse(message="Profile completed and registered successfully")
