from .complete_profile import CompleteProfileUseCase
from .get_profile import GetProfileUseCase
from .update_profile import UpdateProfileUseCase

__all__ = ["CompleteProfileUseCase", "GetProfileUseCase", "UpdateProfileUseCase"]
