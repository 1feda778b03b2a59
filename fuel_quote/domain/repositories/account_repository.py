from abc import ABC, abstractmethod
from typing import Optional
from ..models.account import Account, Profile


class AccountRepository(ABC):
    """
    Repository interface - defines contract for account data access.

    Implementations must enforce username uniqueness at the storage layer:
    `insert` raises UsernameTakenError when a concurrent registration won
    the race.
    """

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[Account]:
        """Find account by username"""
        pass

    @abstractmethod
    async def insert(self, username: str, password_hash: str) -> Account:
        """Create a new account with profile_complete=False"""
        pass

    @abstractmethod
    async def update_profile(
        self,
        username: str,
        profile: Profile,
        mark_complete: bool = False,
    ) -> bool:
        """Set profile fields (and optionally profile_complete). Returns False if no account matched."""
        pass
