from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    """Accepts and emits camelCase (fullName, address1, ...)"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CompleteProfileRequest(_CamelModel):
    """DTO for first-time profile completion"""
    username: str = Field(min_length=1)
    full_name: str = Field(min_length=1, max_length=50)
    address_1: str = Field(min_length=1, max_length=100)
    address_2: Optional[str] = Field(default=None, max_length=100)
    city: str = Field(min_length=1, max_length=100)
    state: str = Field(min_length=2, max_length=2)
    zipcode: str = Field(min_length=5, max_length=9)


class UpdateProfileRequest(_CamelModel):
    """
    DTO for profile update.

    Every field is optional here so that missing required fields are reported
    by the use case as a single "Missing required fields" error.
    """
    username: Optional[str] = None
    full_name: Optional[str] = None
    address_1: Optional[str] = None
    address_2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zipcode: Optional[str] = None


class ProfileResponse(_CamelModel):
    """DTO for profile read / update echo"""
    username: str
    full_name: str
    address_1: str
    address_2: Optional[str] = None
    city: str
    state: str
    zipcode: str


class MessageResponse(BaseModel):
    """Plain confirmation message"""
    message: str
