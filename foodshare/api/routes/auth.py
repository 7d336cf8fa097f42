"""
Authentication API Routes for FoodShare.

Handles:
- User registration (Sign Up)
- User login (credential check)
"""

from fastapi import APIRouter, Depends, status
from fastapi.concurrency import run_in_threadpool
from loguru import logger

from foodshare.api.dependencies import get_user_repository
from foodshare.api.schemas import (
    ErrorResponse,
    LoginRequest,
    MessageResponse,
    SignupRequest,
)
from foodshare.exceptions import AuthenticationError, DatabaseError
from foodshare.security import get_password_hash, verify_password
from foodshare.storage.repositories import UserRepository

router = APIRouter(tags=["auth"])


@router.post(
    "/signup",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses={500: {"model": ErrorResponse}},
)
async def signup(
    user: SignupRequest,
    users: UserRepository = Depends(get_user_repository),
):
    """Register a new user."""
    try:
        hashed_password = await run_in_threadpool(get_password_hash, user.password)
    except ValueError as e:
        logger.error(f"Password hashing failed for {user.email}: {e}")
        raise DatabaseError() from e

    await users.create(user.username, user.email, hashed_password)

    logger.info(f"Registered user {user.username}")
    return MessageResponse(message="User created!")


@router.post(
    "/login",
    response_model=MessageResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Unknown user or wrong password"},
        500: {"model": ErrorResponse},
    },
)
async def login(
    credentials: LoginRequest,
    users: UserRepository = Depends(get_user_repository),
):
    """Check credentials and greet the user."""
    user = await users.get_by_email(credentials.email)

    if user is None:
        raise AuthenticationError("User not found")

    valid = await run_in_threadpool(verify_password, credentials.password, user.password)
    if not valid:
        raise AuthenticationError("Invalid password")

    return MessageResponse(message=f"Welcome {user.username}!")
