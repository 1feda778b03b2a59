# Standard library imports
from dataclasses import replace
from decimal import Decimal
from typing import List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson.decimal128 import Decimal128
from pymongo.errors import PyMongoError

# Local application imports
from ...core.exceptions import PersistenceError
from ...domain.repositories.quote_repository import QuoteRepository
from ...domain.models.quote import Quote
from ...domain.constants import QuoteFields, CounterFields
from ...utils.datetime_utils import utc_now, ensure_utc, parse_date
from .mongo_connection import get_quote_collection, get_counter_collection
from .mongo_sequence import next_sequence


def _to_decimal(value) -> Decimal:
    if isinstance(value, Decimal128):
        return value.to_decimal()
    return Decimal(str(value))


class MongoQuoteRepository(QuoteRepository):
    """MongoDB implementation of QuoteRepository"""

    def __init__(
        self,
        quote_collection: Optional[AsyncIOMotorCollection] = None,
        counter_collection: Optional[AsyncIOMotorCollection] = None,
    ) -> None:
        self.quote_collection = quote_collection if quote_collection is not None else get_quote_collection()
        self.counter_collection = counter_collection if counter_collection is not None else get_counter_collection()

    async def count_for_user(self, user_id: int) -> int:
        try:
            return await self.quote_collection.count_documents({QuoteFields.USER_ID: user_id})
        except PyMongoError as e:
            raise PersistenceError(f"Error counting quotes: {str(e)}", operation="count_quotes")

    async def insert(self, quote: Quote) -> Quote:
        if not quote:
            raise ValueError("Quote cannot be None")

        try:
            saved = replace(
                quote,
                quote_id=await next_sequence(self.counter_collection, CounterFields.QUOTES),
                created_at=utc_now(),
            )
            await self.quote_collection.insert_one(self._quote_to_document(saved))
        except PyMongoError as e:
            raise PersistenceError(f"Error saving quote: {str(e)}", operation="insert_quote")

        return saved

    async def list_for_user(self, user_id: int) -> List[Quote]:
        try:
            cursor = (
                self.quote_collection.find({QuoteFields.USER_ID: user_id})
                .sort([(QuoteFields.CREATED_AT, -1), (QuoteFields.QUOTE_ID, -1)])
            )
            items: List[Quote] = []
            async for doc in cursor:
                items.append(self._document_to_quote(doc))
        except PyMongoError as e:
            raise PersistenceError(f"Error listing quotes: {str(e)}", operation="list_quotes")
        return items

    def _quote_to_document(self, quote: Quote) -> dict:
        return {
            QuoteFields.QUOTE_ID: quote.quote_id,
            QuoteFields.USER_ID: quote.user_id,
            QuoteFields.GALLONS_REQUESTED: Decimal128(quote.gallons_requested),
            QuoteFields.DELIVERY_ADDRESS: quote.delivery_address,
            # BSON has no date-only type
            QuoteFields.DELIVERY_DATE: quote.delivery_date.isoformat(),
            QuoteFields.PRICE_PER_GALLON: Decimal128(quote.price_per_gallon),
            QuoteFields.TOTAL_AMOUNT_DUE: Decimal128(quote.total_amount_due),
            QuoteFields.CREATED_AT: quote.created_at,
        }

    def _document_to_quote(self, doc: dict) -> Quote:
        return Quote(
            quote_id=doc.get(QuoteFields.QUOTE_ID),
            user_id=doc.get(QuoteFields.USER_ID),
            gallons_requested=_to_decimal(doc.get(QuoteFields.GALLONS_REQUESTED, 0)),
            delivery_address=doc.get(QuoteFields.DELIVERY_ADDRESS) or "",
            delivery_date=parse_date(doc.get(QuoteFields.DELIVERY_DATE)),
            price_per_gallon=_to_decimal(doc.get(QuoteFields.PRICE_PER_GALLON, 0)),
            total_amount_due=_to_decimal(doc.get(QuoteFields.TOTAL_AMOUNT_DUE, 0)),
            created_at=ensure_utc(doc.get(QuoteFields.CREATED_AT)),
        )
