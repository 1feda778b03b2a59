# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument

# Local application imports
from ...domain.constants import CounterFields


async def next_sequence(counter_collection: AsyncIOMotorCollection, name: str) -> int:
    """
    Atomically increment and return the named integer sequence.

    Starts at 1 for a sequence that does not exist yet. Ids are unique and
    monotonic in allocation order.
    """
    document = await counter_collection.find_one_and_update(
        {CounterFields.MONGO_ID: name},
        {"$inc": {CounterFields.SEQUENCE: 1}},
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )
    return int(document[CounterFields.SEQUENCE])
