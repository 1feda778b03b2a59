from .mongo_connection import (
    get_database,
    get_account_collection,
    get_quote_collection,
    get_counter_collection,
    ensure_indexes,
    close_database,
)
from .mongo_account_repository import MongoAccountRepository
from .mongo_quote_repository import MongoQuoteRepository

__all__ = [
    "get_database",
    "get_account_collection",
    "get_quote_collection",
    "get_counter_collection",
    "ensure_indexes",
    "close_database",
    "MongoAccountRepository",
    "MongoQuoteRepository",
]
