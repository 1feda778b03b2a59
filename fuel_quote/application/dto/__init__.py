from .auth_dto import (
    UserRegistrationRequest,
    UserLoginRequest,
    RegistrationResponse,
    LoginResponse,
    CurrentUser,
)
from .profile_dto import (
    CompleteProfileRequest,
    UpdateProfileRequest,
    ProfileResponse,
    MessageResponse,
)
from .quote_dto import QuoteCreateRequest, QuoteResponse, QuotePreviewResponse

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "RegistrationResponse",
    "LoginResponse",
    "CurrentUser",
    "CompleteProfileRequest",
    "UpdateProfileRequest",
    "ProfileResponse",
    "MessageResponse",
    "QuoteCreateRequest",
    "QuoteResponse",
    "QuotePreviewResponse",
]
