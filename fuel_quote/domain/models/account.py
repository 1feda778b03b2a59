from dataclasses import dataclass
from typing import Optional


@dataclass
class Profile:
    """Delivery profile attached to an account once completed"""
    full_name: str
    address_1: str
    city: str
    state: str
    zipcode: str
    address_2: Optional[str] = None


@dataclass
class Account:
    """
    Pure domain model for an Account entity.

    Holds the credential (only ever the hash) and the optional delivery profile.
    `profile_complete` flips to True once, on profile completion, and never
    goes back.
    """
    id: Optional[int]
    username: str
    password_hash: str
    profile_complete: bool = False
    profile: Optional[Profile] = None

    def __post_init__(self):
        """Business validations"""
        if not self.username or not self.username.strip():
            raise ValueError("Username is required")
        if not self.password_hash:
            raise ValueError("Password hash is required")
