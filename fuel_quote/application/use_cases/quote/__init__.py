from .create_quote import CreateQuoteUseCase
from .get_quote_history import GetQuoteHistoryUseCase
from .preview_quote import PreviewQuoteUseCase

__all__ = ["CreateQuoteUseCase", "GetQuoteHistoryUseCase", "PreviewQuoteUseCase"]
