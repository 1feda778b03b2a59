from .account_repository import AccountRepository
from .quote_repository import QuoteRepository

__all__ = ["AccountRepository", "QuoteRepository"]
