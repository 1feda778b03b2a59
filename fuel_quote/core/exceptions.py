"""
Exception hierarchy for the fuel quote backend.

Every error raised by use cases and repositories inherits from FuelQuoteError
and carries a user-facing message plus the HTTP status it maps to. Expected
outcomes (bad input, bad credentials, missing resources, username conflicts)
keep a stable message; storage and hashing faults always surface as a generic
internal error.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


INTERNAL_ERROR_MESSAGE = "Internal server error"


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class FuelQuoteError(Exception):
    """Base exception for all fuel quote errors."""

    status_code: int = 500
    default_user_message: str = INTERNAL_ERROR_MESSAGE

    def __init__(
        self,
        message: Optional[str] = None,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        message = message or self.default_user_message
        super().__init__(message)
        self.message = message
        self.user_message = user_message or self.default_user_message
        self.details = details or {}


# -----------------------------------------------------------------------------
# Client faults
# -----------------------------------------------------------------------------


class ValidationError(FuelQuoteError):
    """Raised when required fields are missing or invalid."""

    status_code = 400
    default_user_message = "Missing required fields"

    def __init__(self, message: Optional[str] = None, **kwargs):
        # The validation message is safe to show as-is
        kwargs.setdefault("user_message", message)
        super().__init__(message, **kwargs)


class InvalidCredentialsError(FuelQuoteError):
    """Raised on a failed login. Never says whether username or password was wrong."""

    status_code = 401
    default_user_message = "Invalid username or password"


class InvalidTokenError(FuelQuoteError):
    """Raised when a session token is malformed, tampered with or expired."""

    status_code = 401
    default_user_message = "Invalid or expired token"


class UserNotFoundError(FuelQuoteError):
    """Raised when no account exists for a username."""

    status_code = 404
    default_user_message = "User not found"

    def __init__(self, username: str):
        super().__init__(
            f"User not found: {username}",
            details={"username": username},
        )
        self.username = username


class ProfileNotFoundError(FuelQuoteError):
    """Raised when the account is missing or its profile was never completed."""

    status_code = 404
    default_user_message = "User profile not found"

    def __init__(self, username: str):
        super().__init__(
            f"User profile not found: {username}",
            details={"username": username},
        )
        self.username = username


class UsernameTakenError(FuelQuoteError):
    """Raised when registering a username that already exists."""

    status_code = 409
    default_user_message = "Username is already taken"

    def __init__(self, username: str):
        super().__init__(
            f"Username is already taken: {username}",
            details={"username": username},
        )
        self.username = username


# -----------------------------------------------------------------------------
# Internal faults
# -----------------------------------------------------------------------------


class PersistenceError(FuelQuoteError):
    """Raised when the storage collaborator fails."""

    def __init__(self, message: str, operation: Optional[str] = None, **kwargs):
        super().__init__(message, user_message=INTERNAL_ERROR_MESSAGE, **kwargs)
        self.operation = operation


class HashingError(FuelQuoteError):
    """Raised when the password hashing capability fails."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, user_message=INTERNAL_ERROR_MESSAGE, **kwargs)


# -----------------------------------------------------------------------------
# Safe user-facing message
# -----------------------------------------------------------------------------

def get_user_message(exc: BaseException) -> str:
    """
    Return a safe, user-facing message for any exception.
    Use this at API/use-case boundaries so internal details are never exposed.
    """
    if isinstance(exc, FuelQuoteError) and getattr(exc, "user_message", None):
        return exc.user_message
    return INTERNAL_ERROR_MESSAGE


def is_internal_error(exc: BaseException) -> bool:
    """True for faults that must be logged and hidden behind a generic 500."""
    return not isinstance(exc, FuelQuoteError) or exc.status_code >= 500
