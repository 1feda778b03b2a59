from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ...domain.models.quote import MAX_GALLONS_REQUESTED


class QuoteCreateRequest(BaseModel):
    """DTO for quote creation / preview request"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    username: str = Field(min_length=1)
    gallons_requested: float = Field(gt=0, le=float(MAX_GALLONS_REQUESTED))
    delivery_address: str = ""
    delivery_date: date
    state: str = Field(default="", max_length=2)


class QuoteResponse(BaseModel):
    """DTO for a persisted quote"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    quote_id: int = Field(alias="quote_id")
    user_id: int = Field(alias="userID")
    gallons_requested: float
    delivery_address: str
    delivery_date: date
    price_per_gallon: float
    total_amount_due: float
    created_at: Optional[datetime] = None


class QuotePreviewResponse(BaseModel):
    """DTO for a priced but unsaved quote"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_id: int = Field(alias="userID")
    gallons_requested: float
    delivery_address: str
    delivery_date: date
    has_history: bool
    price_per_gallon: float
    total_amount_due: float
