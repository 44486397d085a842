"""Food catalog endpoints."""

from uuid import UUID

from fastapi import (
    APIRouter,
    Depends,
    HTTPException,
    Query,
    Request,
    Response,
    status,
)

from slimming_tracker.api.dependencies import get_user_id
from slimming_tracker.api.schemas import FoodCreate
from slimming_tracker.api.views import food_view
from slimming_tracker.containers import AppContainer
from slimming_tracker.domain.foods import FoodFilters

router = APIRouter(
    prefix="/api/foods", tags=["foods"], dependencies=[Depends(get_user_id)]
)


@router.get("")
async def list_foods(
    request: Request, limit: int = 100, offset: int = 0
) -> list[dict[str, object]]:
    """Return a page of the catalog ordered by name."""
    container: AppContainer = request.app.state.container
    foods = container.food_service.list_foods(limit=max(limit, 1), offset=max(offset, 0))
    return [food_view(food) for food in foods]


@router.get("/search")
async def search_foods(
    request: Request,
    q: str | None = None,
    category: str | None = None,
    is_free_food: bool | None = Query(default=None, alias="isFreeFood"),
    is_speed_food: bool | None = Query(default=None, alias="isSpeedFood"),
) -> list[dict[str, object]]:
    """Search by name; ``isFreeFood`` and ``isSpeedFood`` filter by flag."""
    container: AppContainer = request.app.state.container
    filters = FoodFilters(
        category=category,
        is_free_food=is_free_food,
        is_speed_food=is_speed_food,
    )
    foods = container.food_service.search(q, filters)
    return [food_view(food) for food in foods]


@router.get("/recent")
async def recent_foods(request: Request, days: int = 7) -> list[dict[str, object]]:
    """Return foods added in the last few days."""
    container: AppContainer = request.app.state.container
    return [food_view(food) for food in container.food_service.recent(days=days)]


@router.get("/{food_id}")
async def get_food(food_id: UUID, request: Request) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    food = container.food_service.get_food(food_id)
    if food is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Food not found")
    return food_view(food)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_food(
    body: FoodCreate, request: Request, user_id: UUID = Depends(get_user_id)
) -> dict[str, object]:
    """Add a food to the shared catalog."""
    container: AppContainer = request.app.state.container
    food = container.food_service.create_food(
        user_id,
        {
            "name": body.name.strip(),
            "syn_value": 0.0 if body.is_free_food else body.syn_value,
            "is_free_food": body.is_free_food,
            "is_speed_food": body.is_speed_food,
            "healthy_extra_type": body.healthy_extra_type,
            "portion_size": body.portion_size,
            "portion_unit": body.portion_unit,
            "category": body.category,
        },
    )
    return food_view(food)


@router.delete("/{food_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_food(
    food_id: UUID, request: Request, user_id: UUID = Depends(get_user_id)
) -> Response:
    """Delete a food the caller created."""
    container: AppContainer = request.app.state.container
    if not container.food_service.delete_food(user_id, food_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Food not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
