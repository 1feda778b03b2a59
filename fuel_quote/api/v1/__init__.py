from .auth_controller import router as auth_router
from .profile_controller import router as profile_router
from .quote_controller import router as quote_router


__all__ = ["auth_router", "profile_router", "quote_router"]
