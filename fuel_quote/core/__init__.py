from .config import Settings, get_settings
from .exceptions import FuelQuoteError, get_user_message, is_internal_error

__all__ = [
    "Settings",
    "get_settings",
    "FuelQuoteError",
    "get_user_message",
    "is_internal_error",
]
