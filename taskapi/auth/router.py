"""
Task Manager API - Authentication Router

Endpoints for user registration and login.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse
from motor.motor_asyncio import AsyncIOMotorDatabase

from taskapi.database import get_database
from taskapi.auth.schemas import UserRegisterRequest, UserLoginRequest
from taskapi.auth.service import AuthService
from taskapi.auth.repository import MongoUserRepository, UserRepositoryInterface
from taskapi.errors import NotFoundError

logger = logging.getLogger(__name__)

LOGIN_FAILED_MESSAGE = "Username or Password not found"


async def get_user_repository(
    db: Annotated[AsyncIOMotorDatabase, Depends(get_database)]
) -> UserRepositoryInterface:
    """Dependency to get the user repository instance."""
    return MongoUserRepository(db)


async def get_auth_service(
    repository: Annotated[UserRepositoryInterface, Depends(get_user_repository)]
) -> AuthService:
    """Dependency to get AuthService instance."""
    return AuthService(repository)


router = APIRouter(prefix="/api/auth", tags=["Authentication"])


@router.post(
    "/register",
    response_class=PlainTextResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={400: {"description": "Invalid input or username already taken"}},
)
async def register(
    request: UserRegisterRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> str:
    """
    Create a new user account with a username and password.

    - Username must be 3-50 characters, alphanumeric with underscores
    - Password must be 8-72 characters
    """
    user = await auth_service.register_user(
        username=request.username,
        password=request.password,
    )

    if user is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username already exists",
        )

    logger.info(f"Registered user {user.username} ({user.id})")
    return "User registered successfully"


@router.post(
    "/login",
    response_class=PlainTextResponse,
    summary="Login and get a JWT token",
    responses={
        404: {"description": "Invalid username or password"},
        500: {"description": "Internal server error"},
    },
)
async def login(
    request: UserLoginRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> str:
    """
    Authenticate a user and return a JWT token valid for one hour.

    Send the token on task requests as:
    `Authorization: Bearer <token>`
    """
    user = await auth_service.authenticate_user(
        username=request.username,
        password=request.password,
    )

    # Same response for unknown user and wrong password
    if user is None:
        raise NotFoundError(LOGIN_FAILED_MESSAGE)

    return auth_service.issue_token(user)
