"""Open Food Facts product endpoints."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, status

from slimming_tracker.api.dependencies import get_user_id
from slimming_tracker.api.schemas import ProductSave
from slimming_tracker.api.views import food_view, product_view, search_page_view
from slimming_tracker.containers import AppContainer
from slimming_tracker.services.products import (
    ProductAlreadySavedError,
    ProductLookupError,
    SearchQueryTooShortError,
)

router = APIRouter(
    prefix="/api/products", tags=["products"], dependencies=[Depends(get_user_id)]
)

_logger = logging.getLogger(__name__)


@router.get("/barcode/{barcode}")
async def lookup_barcode(barcode: str, request: Request) -> dict[str, object]:
    """Look up a scanned barcode and estimate its syns per serving."""
    container: AppContainer = request.app.state.container
    try:
        product = await container.product_service.lookup_barcode(barcode.strip())
    except ProductLookupError as exc:
        _logger.warning("Barcode lookup failed: barcode=%s error=%s", barcode, exc)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail="Product lookup failed"
        ) from exc
    if product is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Product not found"
        )
    return product_view(product)


@router.get("/search")
async def search_products(
    request: Request, q: str = "", page: int = 1
) -> dict[str, object]:
    """Search UK products by name, ten per page."""
    container: AppContainer = request.app.state.container
    try:
        result = await container.product_service.search(q, page=max(page, 1))
    except SearchQueryTooShortError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    except ProductLookupError as exc:
        _logger.warning("Product search failed: query=%s error=%s", q, exc)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail="Product search failed"
        ) from exc
    return search_page_view(result)


@router.post("/save", status_code=status.HTTP_201_CREATED)
async def save_product(
    body: ProductSave, request: Request, user_id: UUID = Depends(get_user_id)
) -> dict[str, object]:
    """Copy a product into the catalog with its per-serving syns."""
    container: AppContainer = request.app.state.container
    try:
        food = container.product_service.save_product(
            user_id,
            barcode=body.barcode.strip(),
            name=body.name.strip(),
            syn_value=body.syn_value,
            is_free_food=body.is_free,
            is_speed_food=body.is_speed,
            serving_size=body.serving_size,
            portion_size=body.portion_size,
        )
    except ProductAlreadySavedError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Product already exists in database",
        ) from exc
    return food_view(food)
