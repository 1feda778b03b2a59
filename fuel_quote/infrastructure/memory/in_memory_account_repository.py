"""In-memory AccountRepository for local runs and tests."""
# Standard library imports
import asyncio
import copy
import logging
from typing import Dict, Iterable, Optional

# Local application imports
from ...core.exceptions import UsernameTakenError
from ...domain.repositories.account_repository import AccountRepository
from ...domain.models.account import Account, Profile

logger = logging.getLogger(__name__)


class InMemoryAccountRepository(AccountRepository):
    """
    Process-local account store.

    State is created explicitly (empty, or seeded with accounts) and every
    mutation runs under one asyncio lock, so check-and-insert on a username is
    atomic. Nothing survives a restart; use the MongoDB repository for real
    deployments.
    """

    def __init__(self, seed: Optional[Iterable[Account]] = None) -> None:
        self._accounts: Dict[str, Account] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()
        for account in seed or []:
            self._store(account)

    def _store(self, account: Account) -> Account:
        if account.username in self._accounts:
            raise UsernameTakenError(account.username)
        stored = copy.deepcopy(account)
        if stored.id is None:
            stored.id = self._next_id
        self._next_id = max(self._next_id, stored.id + 1)
        self._accounts[stored.username] = stored
        return copy.deepcopy(stored)

    async def find_by_username(self, username: str) -> Optional[Account]:
        account = self._accounts.get(username)
        return copy.deepcopy(account) if account is not None else None

    async def insert(self, username: str, password_hash: str) -> Account:
        async with self._lock:
            return self._store(Account(id=None, username=username, password_hash=password_hash))

    async def update_profile(
        self,
        username: str,
        profile: Profile,
        mark_complete: bool = False,
    ) -> bool:
        async with self._lock:
            account = self._accounts.get(username)
            if account is None:
                return False
            account.profile = copy.deepcopy(profile)
            if mark_complete:
                account.profile_complete = True
            return True
