# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.auth_dto import CurrentUser
from ...application.dto.profile_dto import (
    CompleteProfileRequest,
    UpdateProfileRequest,
    ProfileResponse,
    MessageResponse,
)
from ...application.use_cases.profile.complete_profile import CompleteProfileUseCase
from ...application.use_cases.profile.get_profile import GetProfileUseCase
from ...application.use_cases.profile.update_profile import UpdateProfileUseCase
from ...core.exceptions import FuelQuoteError
from ...di.container import get_container
from .dependencies import get_current_user
from .errors import to_http_exception


router = APIRouter(tags=["profile"])


@router.post("/complete", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def complete_profile(request: CompleteProfileRequest) -> MessageResponse:
    """
    Complete the profile of a freshly registered account
    
    Args:
        request: Profile fields and the owning username
        
    Returns:
        MessageResponse confirming the profile was stored
    """
    container = get_container()
    complete_profile_use_case = container.get(CompleteProfileUseCase)

    try:
        return await complete_profile_use_case.execute(request)
    except FuelQuoteError as exception:
        raise to_http_exception(exception)


@router.get("", response_model=ProfileResponse)
async def get_profile(
    current_user: CurrentUser = Depends(get_current_user),
) -> ProfileResponse:
    """
    Get the profile of the authenticated user
    
    Args:
        current_user: Current authenticated user (from dependency)
        
    Returns:
        ProfileResponse
    """
    container = get_container()
    get_profile_use_case = container.get(GetProfileUseCase)

    try:
        return await get_profile_use_case.execute(current_user.username)
    except FuelQuoteError as exception:
        raise to_http_exception(exception)


@router.put("", response_model=ProfileResponse)
async def update_profile(request: UpdateProfileRequest) -> ProfileResponse:
    """
    Replace the profile fields of an account
    
    Args:
        request: New profile values and the owning username
        
    Returns:
        ProfileResponse echoing the stored values
    """
    container = get_container()
    update_profile_use_case = container.get(UpdateProfileUseCase)

    try:
        return await update_profile_use_case.execute(request)
    except FuelQuoteError as exception:
        raise to_http_exception(exception)
