from .account import Account, Profile
from .quote import MAX_GALLONS_REQUESTED, Quote, QuoteRequest

__all__ = ["Account", "Profile", "MAX_GALLONS_REQUESTED", "Quote", "QuoteRequest"]
