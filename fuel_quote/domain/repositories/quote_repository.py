from abc import ABC, abstractmethod
from typing import List

from ..models.quote import Quote


class QuoteRepository(ABC):
    """Repository interface - defines contract for quote data access"""

    @abstractmethod
    async def count_for_user(self, user_id: int) -> int:
        """Number of quotes owned by the user"""
        pass

    @abstractmethod
    async def insert(self, quote: Quote) -> Quote:
        """Persist a quote and return it with quote_id and created_at assigned"""
        pass

    @abstractmethod
    async def list_for_user(self, user_id: int) -> List[Quote]:
        """All quotes owned by the user, most recent first"""
        pass
