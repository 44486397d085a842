"""Admin endpoints for the syn value migration."""

from fastapi import APIRouter, Depends, Request

from slimming_tracker.api.dependencies import require_admin
from slimming_tracker.api.views import migration_view
from slimming_tracker.containers import AppContainer

router = APIRouter(
    prefix="/api/migrations",
    tags=["migrations"],
    dependencies=[Depends(require_admin)],
)


@router.get("/syn-values")
async def check_syn_values(request: Request) -> dict[str, object]:
    """Report every catalog food and whether its syns need rescaling."""
    container: AppContainer = request.app.state.container
    rows = container.migration_service.check()
    return {
        "success": True,
        "count": len(rows),
        "products": [
            {
                "name": food.name,
                "synValue": food.syn_value,
                "portionSize": food.portion_size,
                "portionUnit": food.portion_unit,
                "category": food.category,
                "needsFix": flagged,
            }
            for food, flagged in rows
        ],
    }


@router.post("/fix-syn-values")
async def fix_syn_values(request: Request) -> dict[str, object]:
    """Rescale per-100g syn values on commercial foods to their portion."""
    container: AppContainer = request.app.state.container
    return migration_view(container.migration_service.fix())
