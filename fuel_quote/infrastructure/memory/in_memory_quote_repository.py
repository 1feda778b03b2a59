"""In-memory QuoteRepository for local runs and tests."""
# Standard library imports
import asyncio
from dataclasses import replace
from typing import List

# Local application imports
from ...domain.repositories.quote_repository import QuoteRepository
from ...domain.models.quote import Quote
from ...utils.datetime_utils import utc_now


class InMemoryQuoteRepository(QuoteRepository):
    """Process-local quote store. Quotes are frozen dataclasses, so they are shared as-is."""

    def __init__(self) -> None:
        self._quotes: List[Quote] = []
        self._next_id = 1
        self._lock = asyncio.Lock()

    async def count_for_user(self, user_id: int) -> int:
        return sum(1 for quote in self._quotes if quote.user_id == user_id)

    async def insert(self, quote: Quote) -> Quote:
        async with self._lock:
            saved = replace(quote, quote_id=self._next_id, created_at=utc_now())
            self._next_id += 1
            self._quotes.append(saved)
            return saved

    async def list_for_user(self, user_id: int) -> List[Quote]:
        owned = [quote for quote in self._quotes if quote.user_id == user_id]
        # quote_id breaks ties between quotes created within the same clock tick
        return sorted(owned, key=lambda q: (q.created_at, q.quote_id), reverse=True)
