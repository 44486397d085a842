"""Food diary endpoints."""

import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from slimming_tracker.api.dependencies import get_user_id
from slimming_tracker.api.schemas import DiaryEntryCreate, DiaryEntryUpdate
from slimming_tracker.api.views import entry_view, summary_view
from slimming_tracker.containers import AppContainer
from slimming_tracker.services.diary import UnknownFoodError

router = APIRouter(prefix="/api/diary", tags=["diary"])


def _require_date(value: datetime.date | None) -> datetime.date:
    if value is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Date is required"
        )
    return value


@router.get("")
async def list_entries(
    request: Request,
    date: datetime.date | None = None,
    user_id: UUID = Depends(get_user_id),
) -> list[dict[str, object]]:
    """Return a day's entries with their foods."""
    container: AppContainer = request.app.state.container
    entries = container.diary_service.list_entries(user_id, _require_date(date))
    return [entry_view(entry) for entry in entries]


@router.get("/summary")
async def daily_summary(
    request: Request,
    date: datetime.date | None = None,
    user_id: UUID = Depends(get_user_id),
) -> dict[str, object]:
    """Return the day's syn total against the user's allowance."""
    container: AppContainer = request.app.state.container
    summary = container.diary_service.daily_summary(user_id, _require_date(date))
    return summary_view(summary)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_entry(
    body: DiaryEntryCreate, request: Request, user_id: UUID = Depends(get_user_id)
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    try:
        entry = container.diary_service.add_entry(
            user_id,
            day=body.date,
            meal_type=body.meal_type,
            food_id=body.food_id,
            quantity=body.quantity,
            is_healthy_extra=body.is_healthy_extra,
            syn_value_consumed=body.syn_value_consumed,
        )
    except UnknownFoodError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Food not found"
        ) from exc
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    return entry_view(entry)


@router.put("/{entry_id}")
async def update_entry(
    entry_id: UUID,
    body: DiaryEntryUpdate,
    request: Request,
    user_id: UUID = Depends(get_user_id),
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    try:
        entry = container.diary_service.update_entry(
            user_id, entry_id, body.model_dump(exclude_unset=True)
        )
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    if entry is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Entry not found"
        )
    return entry_view(entry)


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entry(
    entry_id: UUID, request: Request, user_id: UUID = Depends(get_user_id)
) -> Response:
    container: AppContainer = request.app.state.container
    if not container.diary_service.delete_entry(user_id, entry_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Entry not found"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
