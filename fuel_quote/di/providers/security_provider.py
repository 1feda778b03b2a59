from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.pricing import PricingEngine, StandardRateTable
from ...domain.services.password_hasher import PasswordHasher
from ...domain.services.token_issuer import TokenIssuer
from ...infrastructure.security import BcryptPasswordHasher, JwtTokenIssuer

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class SecurityProvider:
    """Registers the stateless capabilities: password hashing, session tokens, pricing"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        settings = get_settings()

        container.register_singleton(
            PasswordHasher,
            BcryptPasswordHasher(rounds=settings.bcrypt_rounds)
        )
        container.register_singleton(
            TokenIssuer,
            JwtTokenIssuer(default_ttl_minutes=settings.access_token_expire_minutes)
        )
        container.register_singleton(
            PricingEngine,
            PricingEngine(rate_table=StandardRateTable())
        )
