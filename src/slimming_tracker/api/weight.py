"""Weight log endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from slimming_tracker.api.dependencies import get_user_id
from slimming_tracker.api.schemas import WeightLogCreate, WeightLogUpdate
from slimming_tracker.api.views import weight_view
from slimming_tracker.containers import AppContainer

router = APIRouter(prefix="/api/weight", tags=["weight"])


@router.get("")
async def list_logs(
    request: Request, user_id: UUID = Depends(get_user_id)
) -> list[dict[str, object]]:
    """Return weigh-ins, newest first."""
    container: AppContainer = request.app.state.container
    return [weight_view(log) for log in container.weight_service.list_logs(user_id)]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_log(
    body: WeightLogCreate, request: Request, user_id: UUID = Depends(get_user_id)
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    log = container.weight_service.record(user_id, body.date, body.weight, body.notes)
    return weight_view(log)


@router.put("/{log_id}")
async def update_log(
    log_id: UUID,
    body: WeightLogUpdate,
    request: Request,
    user_id: UUID = Depends(get_user_id),
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    log = container.weight_service.update(
        user_id, log_id, body.model_dump(exclude_unset=True)
    )
    if log is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Weight log not found"
        )
    return weight_view(log)


@router.delete("/{log_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_log(
    log_id: UUID, request: Request, user_id: UUID = Depends(get_user_id)
) -> Response:
    container: AppContainer = request.app.state.container
    if not container.weight_service.delete(user_id, log_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Weight log not found"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
