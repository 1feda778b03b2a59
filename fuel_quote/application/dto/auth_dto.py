from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from ...core.security import MAX_PASSWORD_BYTES


class _Credentials(BaseModel):
    """Username/password pair shared by registration and login"""
    username: str = Field(max_length=100)
    password: str

    @field_validator("username")
    @classmethod
    def username_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise PydanticCustomError("blank", "Username is required")
        return value

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError("blank", "Password is required")
        # bcrypt rejects input longer than 72 bytes; multi-byte characters count per byte
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise PydanticCustomError(
                "password_too_long",
                "Password must be at most {max_bytes} bytes",
                {"max_bytes": MAX_PASSWORD_BYTES},
            )
        return value


class UserRegistrationRequest(_Credentials):
    """DTO for user registration request"""


class UserLoginRequest(_Credentials):
    """DTO for user login request"""


class RegistrationResponse(BaseModel):
    """DTO for registration response"""
    message: str
    token: str


class LoginResponse(BaseModel):
    """DTO for login response"""
    model_config = ConfigDict(populate_by_name=True)

    token: str
    redirect_to: str = Field(alias="redirectTo")


class CurrentUser(BaseModel):
    """Identity carried by a verified session token"""
    username: str
