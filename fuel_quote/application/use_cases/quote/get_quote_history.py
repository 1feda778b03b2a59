# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.account_repository import AccountRepository
from ....domain.repositories.quote_repository import QuoteRepository
from ...dto.quote_dto import QuoteResponse
from .quote_pricing import quote_to_response


class GetQuoteHistoryUseCase:
    """Use case for listing an account's quotes, most recent first"""

    def __init__(
        self,
        account_repository: AccountRepository,
        quote_repository: QuoteRepository,
    ) -> None:
        self.account_repository = account_repository
        self.quote_repository = quote_repository

    async def execute(self, username: str) -> List[QuoteResponse]:
        """
        List quotes owned by the username

        Returns:
            QuoteResponse objects ordered by created_at descending; empty if the
            username has no quotes (or no account)
        """
        account = await self.account_repository.find_by_username(username)
        if account is None:
            return []

        quotes = await self.quote_repository.list_for_user(account.id)
        return [quote_to_response(quote) for quote in quotes]
