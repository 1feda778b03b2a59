# Standard library imports
import logging

# Local application imports
from ....domain.models.quote import Quote
from ....domain.pricing.pricing_engine import PricingEngine
from ....domain.repositories.account_repository import AccountRepository
from ....domain.repositories.quote_repository import QuoteRepository
from ...dto.quote_dto import QuoteCreateRequest, QuoteResponse
from .quote_pricing import price_for_user, quote_to_response

logger = logging.getLogger(__name__)


class CreateQuoteUseCase:
    """Use case for pricing and saving a fuel quote"""

    def __init__(
        self,
        account_repository: AccountRepository,
        quote_repository: QuoteRepository,
        pricing_engine: PricingEngine,
    ) -> None:
        self.account_repository = account_repository
        self.quote_repository = quote_repository
        self.pricing_engine = pricing_engine

    async def execute(self, request: QuoteCreateRequest) -> QuoteResponse:
        """
        Price a delivery request and persist it as a new quote

        Args:
            request: Quote request for the given username

        Returns:
            QuoteResponse for the persisted quote, including its quote_id

        Raises:
            ValidationError: If gallons_requested <= 0
            UserNotFoundError: If no account has the username
            PersistenceError: On storage failure (lookup, history check or insert)
        """
        priced = await price_for_user(
            self.account_repository,
            self.quote_repository,
            self.pricing_engine,
            request,
        )

        quote = Quote(
            quote_id=None,
            user_id=priced.account.id,
            gallons_requested=priced.request.gallons_requested,
            delivery_address=priced.request.delivery_address,
            delivery_date=priced.request.delivery_date,
            price_per_gallon=priced.price.price_per_gallon,
            total_amount_due=priced.price.total_amount_due,
        )
        saved_quote = await self.quote_repository.insert(quote)

        logger.info(
            f"Quote {saved_quote.quote_id} created for user {request.username}: "
            f"{saved_quote.gallons_requested} gal at {saved_quote.price_per_gallon}"
        )
        return quote_to_response(saved_quote)
