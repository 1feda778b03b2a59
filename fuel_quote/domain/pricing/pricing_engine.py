# Standard library imports
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

# Local application imports
from ..models.quote import QuoteRequest
from .rate_table import RateTable, StandardRateTable


CENTS = Decimal("0.01")


def round2(value: Decimal) -> Decimal:
    """Round a money amount to cents, halves away from zero"""
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class QuotePrice:
    """Result of pricing a quote request"""
    price_per_gallon: Decimal
    total_amount_due: Decimal
    margin: Decimal
    margin_factor: Decimal


class PricingEngine:
    """
    Turns a quote request into a per-gallon price and a total.

    Composition order:
        margin_factor    = location - history + gallons + profit
        margin           = current_price * margin_factor
        price_per_gallon = round2(current_price + margin)
        total_amount_due = round2(price_per_gallon * gallons_requested)

    The total is derived from the rounded unit price so the displayed unit
    price and total always agree.
    """

    def __init__(self, rate_table: Optional[RateTable] = None) -> None:
        self.rate_table = rate_table or StandardRateTable()

    def calculate(self, request: QuoteRequest) -> QuotePrice:
        """
        Price a quote request.

        Args:
            request: Quote request; gallons_requested must already be > 0

        Returns:
            QuotePrice with the rounded unit price and total
        """
        rates = self.rate_table
        gallons = Decimal(str(request.gallons_requested))

        margin_factor = (
            rates.location_factor(request.state)
            - rates.history_factor(request.has_history)
            + rates.gallons_factor(gallons)
            + rates.profit_factor()
        )
        current_price = rates.current_price()
        margin = current_price * margin_factor

        price_per_gallon = round2(current_price + margin)
        total_amount_due = round2(price_per_gallon * gallons)

        return QuotePrice(
            price_per_gallon=price_per_gallon,
            total_amount_due=total_amount_due,
            margin=margin,
            margin_factor=margin_factor,
        )
