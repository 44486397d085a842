"""Product lookup service integrating Open Food Facts with syn estimates."""

import asyncio
import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING
from uuid import UUID

from slimming_tracker.adapters.openfoodfacts_client import OpenFoodFactsClient
from slimming_tracker.domain.foods import PER_SERVING, Food
from slimming_tracker.domain.nutrition import (
    NutritionFacts,
    ProductResult,
    ProductSearchPage,
)
from slimming_tracker.services.cache import Cache
from slimming_tracker.services.foods import FoodService
from slimming_tracker.services.syns import (
    DEFAULT_THRESHOLDS,
    SynThresholds,
    classify_food,
    parse_serving_grams,
    round_to_half,
)

_NUTRIMENT_KEYS = {
    "calories": "energy-kcal_100g",
    "saturated_fat": "saturated-fat_100g",
    "sugars": "sugars_100g",
    "protein": "proteins_100g",
    "carbs": "carbohydrates_100g",
    "fat": "fat_100g",
    "fiber": "fiber_100g",
    "salt": "salt_100g",
}

UNKNOWN_PRODUCT_NAME = "Unknown Product"
DEFAULT_SERVING_TEXT = "100g"
COMMERCIAL_CATEGORY = "commercial"
MIN_QUERY_LENGTH = 2

_logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


class ProductAlreadySavedError(ValueError):
    """Raised when a product with the same barcode is already in the catalog."""


class SearchQueryTooShortError(ValueError):
    """Raised when a product search query is too short to send upstream."""


class ProductLookupError(RuntimeError):
    """Raised when Open Food Facts cannot be reached or returns garbage."""


@dataclass
class ProductService:
    """Looks up external products and prices them in syns."""

    client: OpenFoodFactsClient
    cache: Cache
    food_service: FoodService
    thresholds: SynThresholds = field(default=DEFAULT_THRESHOLDS)
    search_ttl_seconds: int = 3600
    product_ttl_seconds: int = 86400
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    async def lookup_barcode(self, barcode: str) -> ProductResult | None:
        """Return the classified product for a barcode, or None if unknown."""
        cache_key = f"off:product:{barcode}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, ProductResult):
            return cached

        payload = await self._call_with_retry(
            lambda: self.client.get_product(barcode),
            action=f"get_product:{barcode}",
        )
        product = payload.get("product")
        if payload.get("status") != 1 or not isinstance(product, dict):
            _logger.info("Product not found: barcode=%s", barcode)
            return None

        result = self._to_result(product)
        self.cache.set(cache_key, result, ttl_seconds=self.product_ttl_seconds)
        return result

    async def search(
        self, query: str, page: int = 1, page_size: int = 10
    ) -> ProductSearchPage:
        """Search products by name and classify each result."""
        cleaned = query.strip()
        if len(cleaned) < MIN_QUERY_LENGTH:
            raise SearchQueryTooShortError(
                f"Search query must be at least {MIN_QUERY_LENGTH} characters"
            )

        cache_key = f"off:search:{cleaned.lower()}:{page}:{page_size}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, ProductSearchPage):
            return cached

        payload = await self._call_with_retry(
            lambda: self.client.search_products(cleaned, page=page, page_size=page_size),
            action="search",
        )
        products = [
            self._to_result(product)
            for product in payload.get("products", [])
            if isinstance(product, dict)
        ]
        result = ProductSearchPage(
            products=products,
            count=int(payload.get("count") or 0),
            page=int(payload.get("page") or page),
            page_size=int(payload.get("page_size") or page_size),
        )
        self.cache.set(cache_key, result, ttl_seconds=self.search_ttl_seconds)
        _logger.info("Product search: query=%s results=%s", cleaned, len(products))
        return result

    def save_product(  # noqa: PLR0913
        self,
        user_id: UUID,
        *,
        barcode: str,
        name: str,
        syn_value: float,
        is_free_food: bool,
        is_speed_food: bool,
        serving_size: str | None = None,
        portion_size: float | None = None,
    ) -> Food:
        """Persist a looked-up product as a per-serving catalog food."""
        if self.food_service.find_by_barcode(barcode) is not None:
            raise ProductAlreadySavedError(barcode)

        portion = portion_size if portion_size and portion_size > 0 else None
        if portion is None:
            portion = parse_serving_grams(
                serving_size, max_grams=self.thresholds.max_serving_grams
            )
        return self.food_service.create_food(
            user_id,
            {
                "name": name,
                "syn_value": 0.0 if is_free_food else round_to_half(syn_value),
                "is_free_food": is_free_food,
                "is_speed_food": is_speed_food,
                "healthy_extra_type": None,
                "portion_size": portion,
                "portion_unit": "g",
                "category": COMMERCIAL_CATEGORY,
                "barcode": barcode,
                "basis": PER_SERVING,
            },
        )

    def _to_result(self, product: dict[str, object]) -> ProductResult:
        name = str(product.get("product_name") or UNKNOWN_PRODUCT_NAME)
        nutrition = extract_nutrition(product.get("nutriments"))
        serving_size = product.get("serving_size")
        raw_categories = product.get("categories_tags")
        categories = (
            [str(tag) for tag in raw_categories]
            if isinstance(raw_categories, list)
            else []
        )
        classification = classify_food(
            nutrition,
            name,
            categories=categories,
            serving_size=serving_size if isinstance(serving_size, str) else None,
            thresholds=self.thresholds,
        )
        brand = product.get("brands")
        image_url = product.get("image_url")
        return ProductResult(
            barcode=str(product.get("code") or ""),
            name=name,
            brand=str(brand) if brand else None,
            nutrition=nutrition,
            classification=classification,
            serving_size=(
                serving_size
                if isinstance(serving_size, str) and serving_size
                else DEFAULT_SERVING_TEXT
            ),
            categories=categories,
            image_url=str(image_url) if image_url else None,
        )

    async def _call_with_retry(
        self, func: "Callable[[], Awaitable[dict[str, object]]]", *, action: str
    ) -> dict[str, object]:
        """Call an async function with a short retry."""
        attempt = 0
        while True:
            try:
                return await func()
            except Exception as exc:
                attempt += 1
                _logger.warning(
                    "Open Food Facts %s failed (attempt %s/%s, status=%s): %s",
                    action,
                    attempt,
                    self.retry_attempts + 1,
                    _status_code_from_exception(exc),
                    exc,
                )
                if attempt > self.retry_attempts:
                    raise ProductLookupError(action) from exc
                await asyncio.sleep(self.retry_delay_seconds)


def extract_nutrition(nutriments: object) -> NutritionFacts:
    """Map Open Food Facts per-100g nutriments onto NutritionFacts."""
    if not isinstance(nutriments, dict):
        return NutritionFacts()
    values: dict[str, float] = {}
    for field_name, key in _NUTRIMENT_KEYS.items():
        amount = nutriments.get(key)
        try:
            value = float(amount) if amount is not None else 0.0
        except (TypeError, ValueError):
            value = 0.0
        values[field_name] = value if math.isfinite(value) else 0.0
    return NutritionFacts(**values)


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
