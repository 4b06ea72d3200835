# Authentication API routes for user registration, login, and profile lookup

from fastapi import APIRouter, Depends, status

from todo_api.dependencies.auth import get_current_user
from todo_api.exceptions import InternalError, TodoAPIError
from todo_api.models import User
from todo_api.schemas import AuthResponse, UserInfo, UserLogin, UserRegister
from todo_api.services.user_service import UserService, validate_credentials
from todo_api.utils.auth import create_access_token
from todo_api.utils.logger import setup_logger

logger = setup_logger("api.auth")

router = APIRouter(prefix="/auth", tags=["Auth"])


def _auth_response(user: User) -> AuthResponse:
    return AuthResponse(
        user=UserInfo.model_validate(user), token=create_access_token(user.id)
    )


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def register_user(
    user_data: UserRegister,
    user_service: UserService = Depends(),
):
    """Register a new user and return it together with an access token."""
    try:
        user = await user_service.register(user_data.username, user_data.password)
        return _auth_response(user)
    except (TodoAPIError, OSError):
        raise
    except Exception as e:
        logger.error(f"Registration error: {e}", exc_info=True)
        raise InternalError("Failed to register user") from e


@router.post("/login", response_model=AuthResponse)
async def login_user(
    user_data: UserLogin,
    user_service: UserService = Depends(),
):
    """Authenticate user and return JWT token for API access."""
    try:
        validate_credentials(user_data.username, user_data.password)
        user = await user_service.authenticate(user_data.username, user_data.password)
        logger.info(f"User {user.id} logged in")
        return _auth_response(user)
    except (TodoAPIError, OSError):
        raise
    except Exception as e:
        logger.error(f"Login error: {e}", exc_info=True)
        raise InternalError("Failed to login") from e


@router.get("/me", response_model=UserInfo)
async def get_current_user_info(
    current_user: User = Depends(get_current_user),
):
    """Retrieve current authenticated user's profile information."""
    return UserInfo.model_validate(current_user)
