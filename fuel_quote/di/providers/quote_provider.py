from typing import TYPE_CHECKING
from ...domain.pricing import PricingEngine
from ...domain.repositories.account_repository import AccountRepository
from ...domain.repositories.quote_repository import QuoteRepository
from ...application.use_cases.quote.create_quote import CreateQuoteUseCase
from ...application.use_cases.quote.get_quote_history import GetQuoteHistoryUseCase
from ...application.use_cases.quote.preview_quote import PreviewQuoteUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class QuoteProvider:
    """Quote use case provider - registers quote creation, preview and history"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all quote use cases.
        Use cases are created on-demand via factories.
        """
        container.register_factory(
            CreateQuoteUseCase,
            lambda: CreateQuoteUseCase(
                account_repository=container.get(AccountRepository),
                quote_repository=container.get(QuoteRepository),
                pricing_engine=container.get(PricingEngine),
            )
        )

        container.register_factory(
            PreviewQuoteUseCase,
            lambda: PreviewQuoteUseCase(
                account_repository=container.get(AccountRepository),
                quote_repository=container.get(QuoteRepository),
                pricing_engine=container.get(PricingEngine),
            )
        )

        container.register_factory(
            GetQuoteHistoryUseCase,
            lambda: GetQuoteHistoryUseCase(
                account_repository=container.get(AccountRepository),
                quote_repository=container.get(QuoteRepository),
            )
        )
