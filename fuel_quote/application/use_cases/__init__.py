from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    GetCurrentUserUseCase,
)
from .profile import (
    CompleteProfileUseCase,
    GetProfileUseCase,
    UpdateProfileUseCase,
)
from .quote import (
    CreateQuoteUseCase,
    GetQuoteHistoryUseCase,
    PreviewQuoteUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "GetCurrentUserUseCase",
    "CompleteProfileUseCase",
    "GetProfileUseCase",
    "UpdateProfileUseCase",
    "CreateQuoteUseCase",
    "GetQuoteHistoryUseCase",
    "PreviewQuoteUseCase",
]
