"""Pricing path shared by quote creation and preview."""
# Standard library imports
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

# Local application imports
from ....core.exceptions import UserNotFoundError, ValidationError
from ....domain.models.account import Account
from ....domain.models.quote import MAX_GALLONS_REQUESTED, Quote, QuoteRequest
from ....domain.pricing.pricing_engine import PricingEngine, QuotePrice
from ....domain.repositories.account_repository import AccountRepository
from ....domain.repositories.quote_repository import QuoteRepository
from ...dto.quote_dto import QuoteCreateRequest, QuoteResponse


@dataclass(frozen=True)
class PricedRequest:
    account: Account
    request: QuoteRequest
    price: QuotePrice


def parse_gallons(value) -> Decimal:
    """Convert requested gallons to Decimal, rejecting amounts outside (0, MAX_GALLONS_REQUESTED]"""
    try:
        gallons = Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError("Gallons requested must be a number")
    if not gallons.is_finite() or gallons <= 0:
        raise ValidationError("Gallons requested must be greater than zero")
    if gallons > MAX_GALLONS_REQUESTED:
        raise ValidationError(f"Gallons requested must be at most {MAX_GALLONS_REQUESTED}")
    return gallons


async def price_for_user(
    account_repository: AccountRepository,
    quote_repository: QuoteRepository,
    pricing_engine: PricingEngine,
    request: QuoteCreateRequest,
) -> PricedRequest:
    """
    Resolve the account, derive its history flag and price the request.

    Raises:
        ValidationError: If gallons_requested <= 0
        UserNotFoundError: If no account has the username
        PersistenceError: On storage failure
    """
    gallons = parse_gallons(request.gallons_requested)

    account = await account_repository.find_by_username(request.username)
    if account is None:
        raise UserNotFoundError(request.username)

    has_history = await quote_repository.count_for_user(account.id) > 0

    quote_request = QuoteRequest(
        gallons_requested=gallons,
        state=request.state,
        delivery_date=request.delivery_date,
        has_history=has_history,
        delivery_address=request.delivery_address,
    )
    return PricedRequest(
        account=account,
        request=quote_request,
        price=pricing_engine.calculate(quote_request),
    )


def quote_to_response(quote: Quote) -> QuoteResponse:
    return QuoteResponse(
        quote_id=quote.quote_id,
        user_id=quote.user_id,
        gallons_requested=float(quote.gallons_requested),
        delivery_address=quote.delivery_address,
        delivery_date=quote.delivery_date,
        price_per_gallon=float(quote.price_per_gallon),
        total_amount_due=float(quote.total_amount_due),
        created_at=quote.created_at,
    )
