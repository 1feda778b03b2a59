class QuoteFields:
    """MongoDB field names for quotes collection"""

    MONGO_ID = "_id"

    QUOTE_ID = "quote_id"
    USER_ID = "user_id"

    GALLONS_REQUESTED = "gallons_requested"
    DELIVERY_ADDRESS = "delivery_address"
    DELIVERY_DATE = "delivery_date"

    PRICE_PER_GALLON = "price_per_gallon"
    TOTAL_AMOUNT_DUE = "total_amount_due"

    CREATED_AT = "created_at"


class CounterFields:
    """MongoDB field names for the counters collection (integer id sequences)"""

    MONGO_ID = "_id"
    SEQUENCE = "seq"

    # Sequence names
    ACCOUNTS = "accounts"
    QUOTES = "quotes"
