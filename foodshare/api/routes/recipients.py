"""
Recipient API Routes

Registration and listing of food recipients.
"""

from fastapi import APIRouter, Depends, status
from loguru import logger

from foodshare.api.dependencies import get_recipient_repository
from foodshare.api.schemas import (
    ErrorResponse,
    MessageResponse,
    RecipientCreate,
    RecipientResponse,
)
from foodshare.exceptions import DatabaseError, ValidationError
from foodshare.storage.repositories import RecipientRepository

router = APIRouter(prefix="/recipients", tags=["recipients"])


@router.post(
    "",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Missing required field"},
        500: {"model": ErrorResponse},
    },
)
async def register_recipient(
    recipient: RecipientCreate,
    repo: RecipientRepository = Depends(get_recipient_repository),
):
    """Register a recipient. Name, email, phone and address are required."""
    if not (recipient.name and recipient.email and recipient.phone and recipient.address):
        raise ValidationError("All fields are required")

    try:
        await repo.create(
            name=recipient.name,
            email=recipient.email,
            phone=recipient.phone,
            address=recipient.address,
            capacity=recipient.capacity,
        )
    except DatabaseError as e:
        raise DatabaseError("Database error while registering recipient") from e

    logger.info(f"Registered recipient {recipient.name}")
    return MessageResponse(message=f"Recipient {recipient.name} registered successfully!")


@router.get(
    "",
    response_model=list[RecipientResponse],
    responses={500: {"model": ErrorResponse}},
)
async def list_recipients(
    repo: RecipientRepository = Depends(get_recipient_repository),
):
    """List every recipient."""
    try:
        return await repo.list_all()
    except DatabaseError as e:
        raise DatabaseError("Failed to fetch recipients") from e
