from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...infrastructure.db.mongo_connection import (
    get_account_collection,
    get_quote_collection,
    get_counter_collection,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all database collections in the container.
        Nothing is registered unless the MongoDB backend is configured.
        """
        if get_settings().storage_backend != "mongo":
            return

        container.register_singleton("account_collection", get_account_collection())
        container.register_singleton("quote_collection", get_quote_collection())
        container.register_singleton("counter_collection", get_counter_collection())
