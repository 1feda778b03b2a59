# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.auth_dto import CurrentUser
from ...application.dto.quote_dto import QuoteCreateRequest, QuoteResponse, QuotePreviewResponse
from ...application.use_cases.quote.create_quote import CreateQuoteUseCase
from ...application.use_cases.quote.preview_quote import PreviewQuoteUseCase
from ...application.use_cases.quote.get_quote_history import GetQuoteHistoryUseCase
from ...core.exceptions import FuelQuoteError
from ...di.container import get_container
from .dependencies import get_current_user
from .errors import to_http_exception


router = APIRouter(tags=["quotes"])


@router.post("", response_model=QuoteResponse, status_code=status.HTTP_201_CREATED)
async def create_quote(request: QuoteCreateRequest) -> QuoteResponse:
    """
    Price a delivery request and store it as a quote
    
    Args:
        request: Quote request
        
    Returns:
        QuoteResponse with the assigned quote id and computed price
    """
    container = get_container()
    create_quote_use_case = container.get(CreateQuoteUseCase)

    try:
        return await create_quote_use_case.execute(request)
    except FuelQuoteError as exception:
        raise to_http_exception(exception)


@router.post("/preview", response_model=QuotePreviewResponse)
async def preview_quote(request: QuoteCreateRequest) -> QuotePreviewResponse:
    """Price a delivery request without storing it"""
    container = get_container()
    preview_quote_use_case = container.get(PreviewQuoteUseCase)

    try:
        return await preview_quote_use_case.execute(request)
    except FuelQuoteError as exception:
        raise to_http_exception(exception)


@router.get("/history", response_model=List[QuoteResponse])
async def get_quote_history(
    current_user: CurrentUser = Depends(get_current_user),
) -> List[QuoteResponse]:
    """
    List the authenticated user's quotes, newest first
    
    Args:
        current_user: Current authenticated user (from dependency)
        
    Returns:
        List of QuoteResponse objects (empty if there are none)
    """
    container = get_container()
    get_quote_history_use_case = container.get(GetQuoteHistoryUseCase)

    try:
        return await get_quote_history_use_case.execute(current_user.username)
    except FuelQuoteError as exception:
        raise to_http_exception(exception)
