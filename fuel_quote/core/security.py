"""
Password hashing (bcrypt) and session tokens (PyJWT, HMAC-signed).

Adapters in infrastructure/security wrap these helpers behind the
PasswordHasher and TokenIssuer interfaces the use cases depend on.
"""
# Standard library imports
from datetime import timedelta
from typing import Any, Dict, Optional

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError as JwtInvalidTokenError

# Local application imports
from .config import get_settings
from .exceptions import InvalidTokenError
from ..utils.datetime_utils import utc_now

# bcrypt only hashes (and bcrypt>=5 only accepts) this many bytes of password
MAX_PASSWORD_BYTES = 72


def _utf8(value: str) -> bytes:
    return value.encode("utf-8")


def hash_password(plain_password: str, rounds: Optional[int] = None) -> str:
    """
    Salt and hash a password with bcrypt.

    Raises ValueError for passwords longer than MAX_PASSWORD_BYTES.

    The cost factor is BCRYPT_ROUNDS unless `rounds` is given; a fresh salt is
    drawn on every call, so equal passwords give different hashes.
    """
    if len(_utf8(plain_password)) > MAX_PASSWORD_BYTES:
        raise ValueError(f"password cannot be longer than {MAX_PASSWORD_BYTES} bytes")
    cost = rounds if rounds is not None else get_settings().bcrypt_rounds
    return bcrypt.hashpw(_utf8(plain_password), bcrypt.gensalt(rounds=cost)).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a password against a stored bcrypt hash. Malformed hashes never match."""
    try:
        return bcrypt.checkpw(_utf8(plain_password), _utf8(hashed_password))
    except (ValueError, TypeError):
        return False


def create_jwt_token(payload: Dict[str, Any], expires_minutes: Optional[int] = None) -> str:
    """
    Sign a session token carrying `payload` plus iat/exp claims.

    Args:
        payload: Claims to embed (the session owner's username)
        expires_minutes: Lifetime; ACCESS_TOKEN_EXPIRE_MINUTES when omitted
    """
    settings = get_settings()
    lifetime = timedelta(
        minutes=settings.access_token_expire_minutes if expires_minutes is None else expires_minutes
    )
    issued_at = utc_now().replace(microsecond=0)

    claims = dict(payload)
    claims["iat"] = issued_at
    claims["exp"] = issued_at + lifetime
    return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_jwt_token(token: str) -> Dict[str, Any]:
    """
    Verify signature and expiry, returning the claims.

    Raises:
        InvalidTokenError: Malformed, tampered with, signed with another key or expired
    """
    settings = get_settings()
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JwtInvalidTokenError as e:
        raise InvalidTokenError(f"Invalid token: {str(e)}")
