# Standard library imports
import logging

# Local application imports
from ....core.exceptions import UserNotFoundError, ValidationError
from ....domain.repositories.account_repository import AccountRepository
from ....domain.models.account import Profile
from ...dto.profile_dto import UpdateProfileRequest, ProfileResponse

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("full_name", "address_1", "city", "state", "zipcode")


class UpdateProfileUseCase:
    """Use case for editing an existing profile"""

    def __init__(self, account_repository: AccountRepository) -> None:
        self.account_repository = account_repository

    async def execute(self, request: UpdateProfileRequest) -> ProfileResponse:
        """
        Persist new profile values and echo the submitted fields back.

        Does not touch profile_complete.

        Raises:
            ValidationError: If any required profile field (or the username) is missing
            UserNotFoundError: If no account matched the username
            PersistenceError: On storage failure
        """
        missing = [name for name in REQUIRED_FIELDS if not getattr(request, name)]
        if missing or not request.username:
            raise ValidationError(
                "Missing required fields",
                details={"missing": missing + ([] if request.username else ["username"])},
            )

        profile = Profile(
            full_name=request.full_name,
            address_1=request.address_1,
            address_2=request.address_2,
            city=request.city,
            state=request.state,
            zipcode=request.zipcode,
        )
        matched = await self.account_repository.update_profile(request.username, profile)
        if not matched:
            raise UserNotFoundError(request.username)

        logger.info(f"Profile updated for user: {request.username}")
        return ProfileResponse(
            username=request.username,
            full_name=request.full_name,
            address_1=request.address_1,
            address_2=request.address_2,
            city=request.city,
            state=request.state,
            zipcode=request.zipcode,
        )
