# Local application imports
from ....domain.pricing.pricing_engine import PricingEngine
from ....domain.repositories.account_repository import AccountRepository
from ....domain.repositories.quote_repository import QuoteRepository
from ...dto.quote_dto import QuoteCreateRequest, QuotePreviewResponse
from .quote_pricing import price_for_user


class PreviewQuoteUseCase:
    """Use case for pricing a delivery request without saving it"""

    def __init__(
        self,
        account_repository: AccountRepository,
        quote_repository: QuoteRepository,
        pricing_engine: PricingEngine,
    ) -> None:
        self.account_repository = account_repository
        self.quote_repository = quote_repository
        self.pricing_engine = pricing_engine

    async def execute(self, request: QuoteCreateRequest) -> QuotePreviewResponse:
        """
        Same pricing as quote creation; never writes a quote or assigns a quote_id.
        """
        priced = await price_for_user(
            self.account_repository,
            self.quote_repository,
            self.pricing_engine,
            request,
        )

        return QuotePreviewResponse(
            user_id=priced.account.id,
            gallons_requested=float(priced.request.gallons_requested),
            delivery_address=priced.request.delivery_address,
            delivery_date=priced.request.delivery_date,
            has_history=priced.request.has_history,
            price_per_gallon=float(priced.price.price_per_gallon),
            total_amount_due=float(priced.price.total_amount_due),
        )
