"""
AI Matching API Routes

Ranks recipients for each food item with the scoring oracle.
"""

from fastapi import APIRouter, Depends
from loguru import logger

from foodshare.api.dependencies import (
    get_food_repository,
    get_matching_engine,
    get_recipient_repository,
)
from foodshare.api.schemas import ErrorResponse, MatchResponse
from foodshare.exceptions import DatabaseError, ValidationError
from foodshare.matching.engine import MatchingEngine
from foodshare.storage.repositories import FoodRepository, RecipientRepository

router = APIRouter(tags=["matching"])


@router.get(
    "/ai-match",
    response_model=list[MatchResponse],
    responses={
        400: {"model": ErrorResponse, "description": "No foods or recipients"},
        500: {"model": ErrorResponse},
    },
)
async def ai_match(
    foods_repo: FoodRepository = Depends(get_food_repository),
    recipients_repo: RecipientRepository = Depends(get_recipient_repository),
    engine: MatchingEngine = Depends(get_matching_engine),
):
    """
    Match each food item to its best-scoring recipient.

    Issues one oracle call per (food, recipient) pair. Foods for which no
    oracle call succeeded are left out of the result.
    """
    try:
        foods = await foods_repo.list_all()
        recipients = await recipients_repo.list_all()
    except DatabaseError as e:
        raise DatabaseError("AI matching failed") from e

    if not foods or not recipients:
        logger.info("No foods or recipients available")
        raise ValidationError("No foods or recipients available")

    return await engine.compute_matches(foods, recipients)
