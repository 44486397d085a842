"""Services for the shared food catalog."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from slimming_tracker.domain.foods import Food, FoodFilters

SEARCH_LIMIT = 50

_logger = logging.getLogger(__name__)


class FoodRepository(Protocol):
    """Persistence interface for catalog foods."""

    def create_food(self, payload: dict[str, object], created_by: UUID | None) -> Food:
        """Create a food and return it."""

    def get_food(self, food_id: UUID) -> Food | None:
        """Return a food by id, if present."""

    def list_foods(self, limit: int, offset: int) -> list[Food]:
        """Return foods ordered by name."""

    def search_foods(self, query: str, filters: FoodFilters, limit: int) -> list[Food]:
        """Return foods whose name contains the query."""

    def find_by_barcode(self, barcode: str) -> Food | None:
        """Return the food saved from an external product, if any."""

    def list_recent_foods(self, days: int, limit: int) -> list[Food]:
        """Return foods created in the last ``days`` days, newest first."""

    def update_syn_value(self, food_id: UUID, syn_value: float) -> None:
        """Store a per-serving syn value and mark the food per serving."""

    def delete_food(self, food_id: UUID, created_by: UUID | None) -> bool:
        """Delete a food, restricted to its creator when given."""

    def count_foods(self) -> int:
        """Return the number of foods in the catalog."""


@dataclass
class FoodService:
    """Application service for catalog operations."""

    repository: FoodRepository

    def list_foods(self, limit: int = 100, offset: int = 0) -> list[Food]:
        """Return a page of the catalog."""
        return self.repository.list_foods(limit, offset)

    def search(self, query: str | None, filters: FoodFilters | None = None) -> list[Food]:
        """Search foods by name with optional flag and category filters."""
        return self.repository.search_foods(
            (query or "").strip(), filters or FoodFilters(), SEARCH_LIMIT
        )

    def get_food(self, food_id: UUID) -> Food | None:
        """Return a single food."""
        return self.repository.get_food(food_id)

    def create_food(self, user_id: UUID, payload: dict[str, object]) -> Food:
        """Create a food on behalf of a user."""
        return self.repository.create_food(payload, created_by=user_id)

    def find_by_barcode(self, barcode: str) -> Food | None:
        """Return a food previously saved from an external product."""
        return self.repository.find_by_barcode(barcode)

    def recent(self, days: int = 7, limit: int = 100) -> list[Food]:
        """Return recently added foods."""
        return self.repository.list_recent_foods(days, limit)

    def set_serving_syns(self, food_id: UUID, syn_value: float) -> None:
        """Store a corrected per-serving syn value."""
        self.repository.update_syn_value(food_id, syn_value)

    def delete_food(self, user_id: UUID, food_id: UUID) -> bool:
        """Delete a food the user created; shared foods are left alone."""
        return self.repository.delete_food(food_id, created_by=user_id)

    def seed_if_empty(self, foods: list[dict[str, object]]) -> int:
        """Insert starter foods when the catalog is empty."""
        if self.repository.count_foods() > 0:
            return 0
        for payload in foods:
            self.repository.create_food(payload, created_by=None)
        _logger.info("Seeded food catalog: foods=%s", len(foods))
        return len(foods)
