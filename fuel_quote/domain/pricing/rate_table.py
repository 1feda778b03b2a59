"""
Rate tables for fuel pricing.

A rate table supplies the per-gallon base price and the margin factors the
pricing engine composes. Swap the table to change prices without touching the
engine or the quote use cases.
"""

# Standard library imports
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal


class RateTable(ABC):
    """Contract for the coefficients behind a quote"""

    @abstractmethod
    def current_price(self) -> Decimal:
        """Base price per gallon"""
        pass

    @abstractmethod
    def location_factor(self, state: str) -> Decimal:
        """Surcharge factor for the destination jurisdiction"""
        pass

    @abstractmethod
    def history_factor(self, has_history: bool) -> Decimal:
        """Loyalty discount factor (subtracted from the margin)"""
        pass

    @abstractmethod
    def gallons_factor(self, gallons_requested: Decimal) -> Decimal:
        """Volume tier factor, lower for larger deliveries"""
        pass

    @abstractmethod
    def profit_factor(self) -> Decimal:
        """Company profit factor"""
        pass


@dataclass(frozen=True)
class StandardRateTable(RateTable):
    """
    Default rate table.

    Calibrated so that 100 gallons to TX with history and 2000 gallons to TX
    without history both price at 1.74 per gallon.
    """

    base_price: Decimal = Decimal("1.50")
    home_state: str = "TX"
    in_state_rate: Decimal = Decimal("0.02")
    out_of_state_rate: Decimal = Decimal("0.04")
    history_rate: Decimal = Decimal("0.01")
    volume_threshold: Decimal = Decimal("1000")
    high_volume_rate: Decimal = Decimal("0.02")
    low_volume_rate: Decimal = Decimal("0.03")
    profit_rate: Decimal = Decimal("0.12")

    def current_price(self) -> Decimal:
        return self.base_price

    def location_factor(self, state: str) -> Decimal:
        if (state or "").strip().upper() == self.home_state:
            return self.in_state_rate
        return self.out_of_state_rate

    def history_factor(self, has_history: bool) -> Decimal:
        return self.history_rate if has_history else Decimal("0")

    def gallons_factor(self, gallons_requested: Decimal) -> Decimal:
        if gallons_requested > self.volume_threshold:
            return self.high_volume_rate
        return self.low_volume_rate

    def profit_factor(self) -> Decimal:
        return self.profit_rate
