from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional


# Largest single delivery accepted; keeps prices well inside Decimal / Decimal128 precision
MAX_GALLONS_REQUESTED = Decimal("1000000000")


@dataclass(frozen=True)
class QuoteRequest:
    """Input to the pricing engine. `has_history` is derived, never user-supplied."""
    gallons_requested: Decimal
    state: str
    delivery_date: date
    has_history: bool = False
    delivery_address: str = ""


@dataclass(frozen=True)
class Quote:
    """
    Immutable priced delivery request owned by an account.

    `quote_id` and `created_at` are None until the quote is persisted.
    """
    quote_id: Optional[int]
    user_id: int
    gallons_requested: Decimal
    delivery_address: str
    delivery_date: date
    price_per_gallon: Decimal
    total_amount_due: Decimal
    created_at: Optional[datetime] = None
