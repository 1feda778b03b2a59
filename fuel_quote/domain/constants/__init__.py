"""Constants for domain model field names"""

from .account_fields import AccountFields
from .quote_fields import QuoteFields, CounterFields

__all__ = [
    "AccountFields",
    "QuoteFields",
    "CounterFields",
]
