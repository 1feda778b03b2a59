from .rate_table import RateTable, StandardRateTable
from .pricing_engine import PricingEngine, QuotePrice, round2

__all__ = ["RateTable", "StandardRateTable", "PricingEngine", "QuotePrice", "round2"]
