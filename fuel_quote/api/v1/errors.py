# Standard library imports
import logging

# External package imports
from fastapi import HTTPException

# Local application imports
from ...core.exceptions import FuelQuoteError, get_user_message, is_internal_error

logger = logging.getLogger(__name__)


def to_http_exception(exception: FuelQuoteError) -> HTTPException:
    """
    Map a domain error to the HTTPException a controller should raise.

    Client errors carry their user message. Internal errors are logged with
    their cause and answered with the generic internal error message.
    """
    if is_internal_error(exception):
        logger.error(f"Internal error while handling request: {exception}", exc_info=exception)

    headers = None
    if exception.status_code == 401:
        headers = {"WWW-Authenticate": "Bearer"}

    return HTTPException(
        status_code=exception.status_code,
        detail=get_user_message(exception),
        headers=headers,
    )
