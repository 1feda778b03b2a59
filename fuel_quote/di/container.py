# Standard library imports
from typing import Optional

# Local application imports
from .base_container import BaseContainer
from .providers import (
    AuthProvider,
    DatabaseProvider,
    ProfileProvider,
    QuoteProvider,
    RepositoryProvider,
    SecurityProvider,
)


class DIContainer(BaseContainer):
    """
    Application container, built by running each provider in dependency order:

    DatabaseProvider    Motor collections (skipped for in-memory storage)
    RepositoryProvider  AccountRepository / QuoteRepository for STORAGE_BACKEND
    SecurityProvider    PasswordHasher, TokenIssuer, PricingEngine
    Auth/Profile/Quote  use case factories over everything above
    """

    def __init__(self) -> None:
        super().__init__()
        self.setup()

    def setup(self) -> None:
        for provider in (
            DatabaseProvider,
            RepositoryProvider,
            SecurityProvider,
            AuthProvider,
            ProfileProvider,
            QuoteProvider,
        ):
            provider.register(self)


_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """Process-wide container, created on first use"""
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def reset_container() -> None:
    """Forget the process-wide container; the next get_container() rebuilds it"""
    global _container
    _container = None
