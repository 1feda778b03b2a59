from .bcrypt_password_hasher import BcryptPasswordHasher
from .jwt_token_issuer import JwtTokenIssuer

__all__ = ["BcryptPasswordHasher", "JwtTokenIssuer"]
