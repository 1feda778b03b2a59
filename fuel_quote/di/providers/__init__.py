from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .security_provider import SecurityProvider
from .auth_provider import AuthProvider
from .profile_provider import ProfileProvider
from .quote_provider import QuoteProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "SecurityProvider",
    "AuthProvider",
    "ProfileProvider",
    "QuoteProvider",
]
