"""Authentication routes (register, login, logout).

Handlers are plain ``def`` so FastAPI runs the blocking pymongo and bcrypt
calls in its threadpool. A missing body is treated as an empty object.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_account_service
from api.models import (
    AuthResponse,
    LoginRequest,
    LogoutRequest,
    MessageResponse,
    PublicUser,
    RegisterRequest,
)
from domain.model.errors import (
    DuplicateError,
    InvalidCredentialsError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from services.account_service import AccountService


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["auth"])

INTERNAL_ERROR_MESSAGE = "Internal server error"


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    request: RegisterRequest | None = None,
    service: AccountService = Depends(get_account_service),
):
    """Register a new user.

    Raises:
        HTTPException: 400 if a field is missing or the email is taken, 500 on storage failure
    """
    request = request or RegisterRequest()
    try:
        user = service.register(
            user_name=request.user_name,
            email=request.email,
            password=request.password,
        )
    except (ValidationError, DuplicateError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StorageError as e:
        logger.error("Error saving user", extra={"email": request.email, "error": str(e)})
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR_MESSAGE)

    return AuthResponse(
        message="User registered successfully. Please wait for admin verification.",
        user=PublicUser.from_domain(user),
    )


@router.post("/login", response_model=AuthResponse)
def login(
    request: LoginRequest | None = None,
    service: AccountService = Depends(get_account_service),
):
    """Verify credentials and mark the user online.

    Raises:
        HTTPException: 400 if credentials are invalid, 500 on storage failure
    """
    request = request or LoginRequest()
    try:
        user = service.login(email=request.email, password=request.password)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StorageError as e:
        logger.error("Error during login", extra={"email": request.email, "error": str(e)})
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR_MESSAGE)

    return AuthResponse(message="Login successful", user=PublicUser.from_domain(user))


@router.post("/logout", response_model=MessageResponse)
def logout(
    request: LogoutRequest | None = None,
    service: AccountService = Depends(get_account_service),
):
    """Mark the user offline.

    Raises:
        HTTPException: 400 if email is missing or unknown, 500 on storage failure
    """
    request = request or LogoutRequest()
    try:
        service.logout(email=request.email)
    except (ValidationError, NotFoundError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StorageError as e:
        logger.error("Error during logout", extra={"email": request.email, "error": str(e)})
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR_MESSAGE)

    return MessageResponse(message="Logout successful.")
