from .in_memory_account_repository import InMemoryAccountRepository
from .in_memory_quote_repository import InMemoryQuoteRepository

__all__ = ["InMemoryAccountRepository", "InMemoryQuoteRepository"]
