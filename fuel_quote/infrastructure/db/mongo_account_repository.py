# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...core.exceptions import PersistenceError, UsernameTakenError
from ...domain.repositories.account_repository import AccountRepository
from ...domain.models.account import Account, Profile
from ...domain.constants import AccountFields, CounterFields
from ...utils.datetime_utils import utc_now
from .mongo_connection import get_account_collection, get_counter_collection
from .mongo_sequence import next_sequence

logger = logging.getLogger(__name__)


class MongoAccountRepository(AccountRepository):
    """MongoDB implementation of AccountRepository"""

    def __init__(
        self,
        account_collection: Optional[AsyncIOMotorCollection] = None,
        counter_collection: Optional[AsyncIOMotorCollection] = None,
    ) -> None:
        self.account_collection = account_collection if account_collection is not None else get_account_collection()
        self.counter_collection = counter_collection if counter_collection is not None else get_counter_collection()

    async def find_by_username(self, username: str) -> Optional[Account]:
        """
        Find account by username

        Args:
            username: Username to search for

        Returns:
            Account domain model if found, None otherwise
        """
        if not username:
            return None

        try:
            document = await self.account_collection.find_one({AccountFields.USERNAME: username})
        except PyMongoError as e:
            raise PersistenceError(f"Error finding account by username: {str(e)}", operation="find_by_username")

        if document is None:
            return None
        return self._document_to_account(document)

    async def insert(self, username: str, password_hash: str) -> Account:
        """
        Create a new account

        Args:
            username: Unique username
            password_hash: Already-hashed password

        Returns:
            Saved Account with its integer user id

        Raises:
            ValueError: If username or password_hash is blank (nothing is written)
            UsernameTakenError: If the unique username index rejects the insert
            PersistenceError: On any other storage fault
        """
        # Domain validation runs before anything is written
        account = Account(id=None, username=username, password_hash=password_hash)

        try:
            account.id = await next_sequence(self.counter_collection, CounterFields.ACCOUNTS)
            document = {
                AccountFields.ID: account.id,
                AccountFields.USERNAME: account.username,
                AccountFields.PASSWORD_HASH: account.password_hash,
                AccountFields.PROFILE_COMPLETE: False,
                AccountFields.CREATED_AT: utc_now(),
            }
            await self.account_collection.insert_one(document)
        except DuplicateKeyError:
            raise UsernameTakenError(username)
        except PyMongoError as e:
            raise PersistenceError(f"Error saving account: {str(e)}", operation="insert_account")

        return account

    async def update_profile(
        self,
        username: str,
        profile: Profile,
        mark_complete: bool = False,
    ) -> bool:
        """
        Set the profile fields of an account

        Args:
            username: Account to update
            profile: New profile values
            mark_complete: Also set profile_complete=True (profile completion)

        Returns:
            True if an account matched, False otherwise
        """
        update = {
            AccountFields.FULL_NAME: profile.full_name,
            AccountFields.ADDRESS_1: profile.address_1,
            AccountFields.ADDRESS_2: profile.address_2,
            AccountFields.CITY: profile.city,
            AccountFields.STATE: profile.state,
            AccountFields.ZIPCODE: profile.zipcode,
        }
        if mark_complete:
            update[AccountFields.PROFILE_COMPLETE] = True

        try:
            result = await self.account_collection.update_one(
                {AccountFields.USERNAME: username},
                {"$set": update},
            )
        except PyMongoError as e:
            raise PersistenceError(f"Error updating profile: {str(e)}", operation="update_profile")

        return result.matched_count > 0

    def _document_to_account(self, document: dict) -> Account:
        """
        Convert MongoDB document to Account domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            Account domain model
        """
        profile = None
        if document.get(AccountFields.FULL_NAME):
            profile = Profile(
                full_name=document.get(AccountFields.FULL_NAME, ""),
                address_1=document.get(AccountFields.ADDRESS_1, ""),
                address_2=document.get(AccountFields.ADDRESS_2),
                city=document.get(AccountFields.CITY, ""),
                state=document.get(AccountFields.STATE, ""),
                zipcode=document.get(AccountFields.ZIPCODE, ""),
            )

        return Account(
            id=document.get(AccountFields.ID),
            username=document.get(AccountFields.USERNAME, ""),
            password_hash=document.get(AccountFields.PASSWORD_HASH, ""),
            profile_complete=bool(document.get(AccountFields.PROFILE_COMPLETE, False)),
            profile=profile,
        )
