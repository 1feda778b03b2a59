# External package imports
from fastapi import APIRouter, status

# Local application imports
from ...application.dto.auth_dto import (
    UserRegistrationRequest,
    UserLoginRequest,
    RegistrationResponse,
    LoginResponse,
)
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...core.exceptions import FuelQuoteError
from ...di.container import get_container
from .errors import to_http_exception

router = APIRouter(tags=["authentication"])


@router.post("/register", response_model=RegistrationResponse, status_code=status.HTTP_201_CREATED)
async def register_user(request: UserRegistrationRequest) -> RegistrationResponse:
    """
    Register a new user
    
    Args:
        request: User registration request
        
    Returns:
        RegistrationResponse with a session token for the new account
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)
    
    try:
        return await register_use_case.execute(request)
    except FuelQuoteError as exception:
        raise to_http_exception(exception)


@router.post("/login", response_model=LoginResponse)
async def login_user(request: UserLoginRequest) -> LoginResponse:
    """
    Authenticate user and get a session token
    
    Args:
        request: User login request
        
    Returns:
        LoginResponse with token and the route the client should open next
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)
    
    try:
        return await login_use_case.execute(request)
    except FuelQuoteError as exception:
        raise to_http_exception(exception)
