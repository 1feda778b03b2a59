"""
Unit tests for the MongoDB repositories, using mocked Motor collections.
"""
from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson.decimal128 import Decimal128
from pymongo.errors import DuplicateKeyError, PyMongoError

from fuel_quote.core.exceptions import PersistenceError, UsernameTakenError
from fuel_quote.domain.models.account import Profile
from fuel_quote.domain.models.quote import Quote
from fuel_quote.infrastructure.db.mongo_account_repository import MongoAccountRepository
from fuel_quote.infrastructure.db.mongo_quote_repository import MongoQuoteRepository
from fuel_quote.infrastructure.db.mongo_sequence import next_sequence


class AsyncCursor:
    """Stand-in for a Motor cursor: supports `async for`"""

    def __init__(self, documents):
        self._documents = list(documents)

    def __aiter__(self):
        return self

    async def __anext__(self):
        if not self._documents:
            raise StopAsyncIteration
        return self._documents.pop(0)


@pytest.fixture
def counter_collection():
    collection = MagicMock()
    collection.find_one_and_update = AsyncMock(return_value={"_id": "accounts", "seq": 7})
    return collection


@pytest.fixture
def account_collection():
    collection = MagicMock()
    collection.find_one = AsyncMock()
    collection.insert_one = AsyncMock()
    collection.update_one = AsyncMock()
    return collection


@pytest.fixture
def quote_collection():
    collection = MagicMock()
    collection.count_documents = AsyncMock()
    collection.insert_one = AsyncMock()
    return collection


class TestNextSequence:

    @pytest.mark.asyncio
    async def test_increments_named_counter(self, counter_collection):
        assert await next_sequence(counter_collection, "accounts") == 7

        args, kwargs = counter_collection.find_one_and_update.call_args
        assert args[0] == {"_id": "accounts"}
        assert args[1] == {"$inc": {"seq": 1}}
        assert kwargs["upsert"] is True


class TestMongoAccountRepository:

    @pytest.mark.asyncio
    async def test_find_by_username_maps_profile(self, account_collection, counter_collection):
        account_collection.find_one.return_value = {
            "user_id": 3,
            "username": "alice",
            "password_hash": "h",
            "profile_complete": True,
            "full_name": "Alice Smith",
            "address_1": "1 Main St",
            "address_2": None,
            "city": "Houston",
            "state": "TX",
            "zipcode": "77001",
        }
        repo = MongoAccountRepository(account_collection, counter_collection)

        account = await repo.find_by_username("alice")
        assert account.id == 3
        assert account.profile_complete is True
        assert account.profile.city == "Houston"
        account_collection.find_one.assert_called_once_with({"username": "alice"})

    @pytest.mark.asyncio
    async def test_find_without_profile(self, account_collection, counter_collection):
        account_collection.find_one.return_value = {"user_id": 1, "username": "bob", "password_hash": "h"}
        account = await MongoAccountRepository(account_collection, counter_collection).find_by_username("bob")
        assert account.profile is None
        assert account.profile_complete is False

    @pytest.mark.asyncio
    async def test_find_missing(self, account_collection, counter_collection):
        account_collection.find_one.return_value = None
        repo = MongoAccountRepository(account_collection, counter_collection)
        assert await repo.find_by_username("ghost") is None

    @pytest.mark.asyncio
    async def test_insert_uses_sequence_id(self, account_collection, counter_collection):
        repo = MongoAccountRepository(account_collection, counter_collection)
        account = await repo.insert("alice", "hash")

        assert account.id == 7
        assert account.username == "alice"
        document = account_collection.insert_one.call_args.args[0]
        assert document["password_hash"] == "hash"
        assert document["profile_complete"] is False

    @pytest.mark.asyncio
    async def test_insert_blank_username_writes_nothing(self, account_collection, counter_collection):
        repo = MongoAccountRepository(account_collection, counter_collection)
        with pytest.raises(ValueError):
            await repo.insert("   ", "hash")
        counter_collection.find_one_and_update.assert_not_called()
        account_collection.insert_one.assert_not_called()

    @pytest.mark.asyncio
    async def test_duplicate_key_is_username_taken(self, account_collection, counter_collection):
        account_collection.insert_one.side_effect = DuplicateKeyError("E11000 duplicate key")
        repo = MongoAccountRepository(account_collection, counter_collection)
        with pytest.raises(UsernameTakenError):
            await repo.insert("alice", "hash")

    @pytest.mark.asyncio
    async def test_driver_error_is_persistence_error(self, account_collection, counter_collection):
        account_collection.find_one.side_effect = PyMongoError("connection refused")
        repo = MongoAccountRepository(account_collection, counter_collection)
        with pytest.raises(PersistenceError):
            await repo.find_by_username("alice")

    @pytest.mark.asyncio
    async def test_update_profile_mark_complete(self, account_collection, counter_collection):
        account_collection.update_one.return_value = MagicMock(matched_count=1)
        repo = MongoAccountRepository(account_collection, counter_collection)
        profile = Profile(full_name="A", address_1="B", city="C", state="TX", zipcode="77001")

        assert await repo.update_profile("alice", profile, mark_complete=True) is True
        query, update = account_collection.update_one.call_args.args
        assert query == {"username": "alice"}
        assert update["$set"]["profile_complete"] is True
        assert update["$set"]["full_name"] == "A"

    @pytest.mark.asyncio
    async def test_update_profile_no_match(self, account_collection, counter_collection):
        account_collection.update_one.return_value = MagicMock(matched_count=0)
        repo = MongoAccountRepository(account_collection, counter_collection)
        profile = Profile(full_name="A", address_1="B", city="C", state="TX", zipcode="77001")

        assert await repo.update_profile("ghost", profile) is False
        update = account_collection.update_one.call_args.args[1]
        assert "profile_complete" not in update["$set"]


class TestMongoQuoteRepository:

    def make_quote(self):
        return Quote(
            quote_id=None,
            user_id=3,
            gallons_requested=Decimal("100"),
            delivery_address="1 Main St",
            delivery_date=date(2024, 4, 10),
            price_per_gallon=Decimal("1.76"),
            total_amount_due=Decimal("176.00"),
        )

    @pytest.mark.asyncio
    async def test_insert_stores_decimal128_and_iso_date(self, quote_collection, counter_collection):
        counter_collection.find_one_and_update.return_value = {"_id": "quotes", "seq": 12}
        repo = MongoQuoteRepository(quote_collection, counter_collection)

        saved = await repo.insert(self.make_quote())
        assert saved.quote_id == 12
        assert saved.created_at is not None

        document = quote_collection.insert_one.call_args.args[0]
        assert document["price_per_gallon"] == Decimal128("1.76")
        assert document["delivery_date"] == "2024-04-10"
        assert document["quote_id"] == 12

    @pytest.mark.asyncio
    async def test_list_maps_documents_newest_first_query(self, quote_collection, counter_collection):
        created = datetime(2024, 4, 1, tzinfo=timezone.utc)
        quote_collection.find.return_value.sort.return_value = AsyncCursor([
            {
                "quote_id": 2,
                "user_id": 3,
                "gallons_requested": Decimal128("2000"),
                "delivery_address": "1 Main St",
                "delivery_date": "2024-04-10",
                "price_per_gallon": Decimal128("1.74"),
                "total_amount_due": Decimal128("3480.00"),
                "created_at": created,
            }
        ])
        repo = MongoQuoteRepository(quote_collection, counter_collection)

        quotes = await repo.list_for_user(3)
        assert len(quotes) == 1
        assert quotes[0].price_per_gallon == Decimal("1.74")
        assert quotes[0].delivery_date == date(2024, 4, 10)
        assert quotes[0].created_at == created

        quote_collection.find.assert_called_once_with({"user_id": 3})
        sort_spec = quote_collection.find.return_value.sort.call_args.args[0]
        assert sort_spec == [("created_at", -1), ("quote_id", -1)]

    @pytest.mark.asyncio
    async def test_count_for_user(self, quote_collection, counter_collection):
        quote_collection.count_documents.return_value = 4
        repo = MongoQuoteRepository(quote_collection, counter_collection)
        assert await repo.count_for_user(3) == 4
        quote_collection.count_documents.assert_called_once_with({"user_id": 3})

    @pytest.mark.asyncio
    async def test_insert_failure_is_persistence_error(self, quote_collection, counter_collection):
        quote_collection.insert_one.side_effect = PyMongoError("write concern error")
        repo = MongoQuoteRepository(quote_collection, counter_collection)
        with pytest.raises(PersistenceError):
            await repo.insert(self.make_quote())
