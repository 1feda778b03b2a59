# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from .api.v1 import auth_router, profile_router, quote_router
from .core.config import get_settings
from .core.exceptions import INTERNAL_ERROR_MESSAGE
from .infrastructure.db.mongo_connection import ensure_indexes, close_database

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Missing required fields"

# Message for a missing or blank required field, per route
_CREDENTIALS_REQUIRED = "Username and password are required"
_QUOTE_FIELDS_REQUIRED = "Gallons requested and delivery date are required"
REQUIRED_FIELD_MESSAGES = {
    "/api/v1/auth/register": _CREDENTIALS_REQUIRED,
    "/api/v1/auth/login": _CREDENTIALS_REQUIRED,
    "/api/v1/profile/complete": "Full name, address, city, state, and zipcode are required",
    "/api/v1/quotes": _QUOTE_FIELDS_REQUIRED,
    "/api/v1/quotes/preview": _QUOTE_FIELDS_REQUIRED,
}
_REQUIRED_ERROR_TYPES = {"missing", "blank"}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Creates the MongoDB indexes on startup (unique usernames depend on them)
    and closes the MongoDB client on shutdown.
    """
    settings = get_settings()

    if settings.storage_backend == "mongo":
        try:
            await ensure_indexes()
        except Exception as e:
            # Don't fail app startup if MongoDB is not reachable yet
            logger.error(f"Failed to ensure MongoDB indexes: {e}", exc_info=True)

    yield

    try:
        close_database()
    except Exception as e:
        logger.error(f"Error closing MongoDB connection: {e}", exc_info=True)

    logger.info("Application shutdown complete")


def _validation_message(exc: RequestValidationError, path: str = "") -> str:
    """Collapse pydantic errors into the single message the API returns"""
    errors = exc.errors()
    if not errors or any(error.get("type") in _REQUIRED_ERROR_TYPES for error in errors):
        return REQUIRED_FIELD_MESSAGES.get(path.rstrip("/"), MISSING_FIELDS_MESSAGE)

    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid value")
    return f"{field}: {message}" if field else message


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = _validation_message(exc, request.url.path)
    logger.info(f"Rejected {request.method} {request.url.path}: {message}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": message},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": INTERNAL_ERROR_MESSAGE},
    )


def configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - Error body rendering ({"error": message})
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    configure_logging(settings.log_level)

    # Create FastAPI app
    application = FastAPI(
        title="Fuel Quote API",
        version="1.0.0",
        description="Fuel delivery quote pricing with account and profile management",
        lifespan=lifespan
    )

    # Add CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(Exception, unhandled_exception_handler)

    # Register API routers
    application.include_router(auth_router, prefix="/api/v1/auth")
    application.include_router(profile_router, prefix="/api/v1/profile")
    application.include_router(quote_router, prefix="/api/v1/quotes")

    @application.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok"}

    return application


# Create application instance
app = create_application()
