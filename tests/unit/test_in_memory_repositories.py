"""
Unit tests for the in-memory repositories.
"""
import asyncio
from datetime import date
from decimal import Decimal

import pytest
from fuel_quote.core.exceptions import UsernameTakenError
from fuel_quote.domain.models.account import Account, Profile
from fuel_quote.domain.models.quote import Quote
from fuel_quote.infrastructure.memory import InMemoryAccountRepository, InMemoryQuoteRepository


def make_quote(user_id, gallons="100"):
    return Quote(
        quote_id=None,
        user_id=user_id,
        gallons_requested=Decimal(gallons),
        delivery_address="1 Main St",
        delivery_date=date(2024, 4, 10),
        price_per_gallon=Decimal("1.76"),
        total_amount_due=Decimal("176.00"),
    )


class TestInMemoryAccountRepository:

    @pytest.mark.asyncio
    async def test_insert_assigns_sequential_ids(self, account_repository):
        first = await account_repository.insert("alice", "h1")
        second = await account_repository.insert("bob", "h2")
        assert (first.id, second.id) == (1, 2)
        assert first.profile_complete is False

    @pytest.mark.asyncio
    async def test_duplicate_username_rejected(self, account_repository):
        await account_repository.insert("alice", "h1")
        with pytest.raises(UsernameTakenError):
            await account_repository.insert("alice", "h2")

    @pytest.mark.asyncio
    async def test_concurrent_inserts_same_username(self, account_repository):
        results = await asyncio.gather(
            *(account_repository.insert("alice", f"h{i}") for i in range(3)),
            return_exceptions=True,
        )
        assert sum(isinstance(r, Account) for r in results) == 1
        assert sum(isinstance(r, UsernameTakenError) for r in results) == 2

    @pytest.mark.asyncio
    async def test_find_missing_returns_none(self, account_repository):
        assert await account_repository.find_by_username("ghost") is None

    @pytest.mark.asyncio
    async def test_returned_accounts_are_copies(self, account_repository):
        await account_repository.insert("alice", "h1")
        account = await account_repository.find_by_username("alice")
        account.profile_complete = True

        stored = await account_repository.find_by_username("alice")
        assert stored.profile_complete is False

    @pytest.mark.asyncio
    async def test_update_profile(self, account_repository):
        await account_repository.insert("alice", "h1")
        profile = Profile(full_name="Alice", address_1="1 Main", city="Houston", state="TX", zipcode="77001")

        assert await account_repository.update_profile("alice", profile) is True
        account = await account_repository.find_by_username("alice")
        assert account.profile == profile
        assert account.profile_complete is False

        await account_repository.update_profile("alice", profile, mark_complete=True)
        assert (await account_repository.find_by_username("alice")).profile_complete is True

    @pytest.mark.asyncio
    async def test_update_unknown_returns_false(self, account_repository):
        profile = Profile(full_name="A", address_1="B", city="C", state="TX", zipcode="77001")
        assert await account_repository.update_profile("ghost", profile) is False

    @pytest.mark.asyncio
    async def test_seeded(self):
        repo = InMemoryAccountRepository(seed=[Account(id=10, username="seeded", password_hash="h")])
        assert (await repo.find_by_username("seeded")).id == 10
        assert (await repo.insert("next", "h")).id == 11

    def test_seed_with_duplicate_rejected(self):
        with pytest.raises(UsernameTakenError):
            InMemoryAccountRepository(
                seed=[
                    Account(id=None, username="dup", password_hash="h"),
                    Account(id=None, username="dup", password_hash="h"),
                ]
            )


class TestInMemoryQuoteRepository:

    @pytest.mark.asyncio
    async def test_insert_assigns_id_and_timestamp(self, quote_repository):
        saved = await quote_repository.insert(make_quote(1))
        assert saved.quote_id == 1
        assert saved.created_at is not None
        assert saved.total_amount_due == Decimal("176.00")

    @pytest.mark.asyncio
    async def test_count_scoped_to_user(self, quote_repository):
        await quote_repository.insert(make_quote(1))
        await quote_repository.insert(make_quote(1))
        await quote_repository.insert(make_quote(2))
        assert await quote_repository.count_for_user(1) == 2
        assert await quote_repository.count_for_user(2) == 1
        assert await quote_repository.count_for_user(3) == 0

    @pytest.mark.asyncio
    async def test_list_newest_first(self, quote_repository):
        for gallons in ("10", "20", "30"):
            await quote_repository.insert(make_quote(1, gallons))

        listed = await quote_repository.list_for_user(1)
        assert [q.gallons_requested for q in listed] == [Decimal("30"), Decimal("20"), Decimal("10")]

    @pytest.mark.asyncio
    async def test_list_empty(self):
        assert await InMemoryQuoteRepository().list_for_user(1) == []
