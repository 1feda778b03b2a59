import logging
from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.account_repository import AccountRepository
from ...domain.repositories.quote_repository import QuoteRepository
from ...infrastructure.db.mongo_account_repository import MongoAccountRepository
from ...infrastructure.db.mongo_quote_repository import MongoQuoteRepository
from ...infrastructure.memory import InMemoryAccountRepository, InMemoryQuoteRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer

logger = logging.getLogger(__name__)


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations for the configured storage backend.
        """
        backend = get_settings().storage_backend

        if backend == "memory":
            logger.warning("Using in-memory storage; accounts and quotes are lost on restart")
            container.register_singleton(AccountRepository, InMemoryAccountRepository())
            container.register_singleton(QuoteRepository, InMemoryQuoteRepository())
            return

        if backend != "mongo":
            raise ValueError(f"Unknown STORAGE_BACKEND: {backend}")

        counter_collection = container.get("counter_collection")

        container.register_singleton(
            AccountRepository,
            MongoAccountRepository(
                account_collection=container.get("account_collection"),
                counter_collection=counter_collection,
            )
        )

        container.register_singleton(
            QuoteRepository,
            MongoQuoteRepository(
                quote_collection=container.get("quote_collection"),
                counter_collection=counter_collection,
            )
        )
