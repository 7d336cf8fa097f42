"""
Food API Routes
"""

from fastapi import APIRouter, Depends

from foodshare.api.dependencies import get_food_repository
from foodshare.api.schemas import ErrorResponse, FoodResponse
from foodshare.exceptions import DatabaseError
from foodshare.storage.repositories import FoodRepository

router = APIRouter(prefix="/foods", tags=["foods"])


@router.get(
    "",
    response_model=list[FoodResponse],
    responses={500: {"model": ErrorResponse}},
)
async def list_foods(
    repo: FoodRepository = Depends(get_food_repository),
):
    """List every available food item."""
    try:
        return await repo.list_all()
    except DatabaseError as e:
        raise DatabaseError("Failed to fetch foods") from e
