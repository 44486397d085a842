"""Food diary service."""

from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from slimming_tracker.domain.diary import MEAL_TYPES, DailySummary, DiaryEntry
from slimming_tracker.domain.foods import Food
from slimming_tracker.domain.models import DEFAULT_DAILY_SYN_ALLOWANCE
from slimming_tracker.services.foods import FoodService
from slimming_tracker.services.syns import round_to_half
from slimming_tracker.services.users import UserService

_UPDATABLE_COLUMNS = {
    "date",
    "meal_type",
    "food_id",
    "quantity",
    "syn_value_consumed",
    "is_healthy_extra",
}


class UnknownFoodError(ValueError):
    """Raised when a diary entry references a food that does not exist."""


class DiaryRepository(Protocol):
    """Persistence interface for diary entries."""

    def create_entry(self, user_id: UUID, payload: dict[str, object]) -> DiaryEntry:
        """Create an entry and return it."""

    def list_entries(self, user_id: UUID, day: date) -> list[DiaryEntry]:
        """Return a user's entries for a day, with their foods attached."""

    def update_entry(
        self, entry_id: UUID, user_id: UUID, columns: dict[str, object]
    ) -> DiaryEntry | None:
        """Update a user's entry and return it, if it exists."""

    def delete_entry(self, entry_id: UUID, user_id: UUID) -> bool:
        """Delete a user's entry."""


@dataclass
class DiaryService:
    """Service for logging foods against a day."""

    repository: DiaryRepository
    food_service: FoodService
    user_service: UserService

    def list_entries(self, user_id: UUID, day: date) -> list[DiaryEntry]:
        """Return the entries logged on a day."""
        return self.repository.list_entries(user_id, day)

    def add_entry(  # noqa: PLR0913
        self,
        user_id: UUID,
        *,
        day: date,
        meal_type: str,
        food_id: UUID,
        quantity: float = 1.0,
        is_healthy_extra: bool = False,
        syn_value_consumed: float | None = None,
    ) -> DiaryEntry:
        """Log a food; syns are derived from the food unless given."""
        if meal_type not in MEAL_TYPES:
            raise ValueError(f"Unknown meal type: {meal_type}")
        food = self.food_service.get_food(food_id)
        if food is None:
            raise UnknownFoodError(str(food_id))
        if syn_value_consumed is None:
            syn_value_consumed = syns_consumed(food, quantity, is_healthy_extra)
        return self.repository.create_entry(
            user_id,
            {
                "date": day.isoformat(),
                "meal_type": meal_type,
                "food_id": str(food_id),
                "quantity": quantity,
                "syn_value_consumed": syn_value_consumed,
                "is_healthy_extra": is_healthy_extra,
            },
        )

    def update_entry(
        self, user_id: UUID, entry_id: UUID, changes: dict[str, object]
    ) -> DiaryEntry | None:
        """Update an entry owned by the user."""
        meal_type = changes.get("meal_type")
        if meal_type is not None and meal_type not in MEAL_TYPES:
            raise ValueError(f"Unknown meal type: {meal_type}")
        columns = {
            key: value
            for key, value in changes.items()
            if key in _UPDATABLE_COLUMNS and value is not None
        }
        return self.repository.update_entry(entry_id, user_id, columns)

    def delete_entry(self, user_id: UUID, entry_id: UUID) -> bool:
        """Delete an entry owned by the user."""
        return self.repository.delete_entry(entry_id, user_id)

    def daily_summary(self, user_id: UUID, day: date) -> DailySummary:
        """Total a day's syns against the user's allowance."""
        entries = self.repository.list_entries(user_id, day)
        profile = self.user_service.get_profile(user_id)
        allowance = (
            profile.daily_syn_allowance if profile else DEFAULT_DAILY_SYN_ALLOWANCE
        )
        total = sum(
            entry.syn_value_consumed for entry in entries if not entry.is_healthy_extra
        )
        extras = {"A": 0, "B": 0, "C": 0}
        for entry in entries:
            extra_type = entry.food.healthy_extra_type if entry.food else None
            if entry.is_healthy_extra and extra_type in extras:
                extras[extra_type] += 1
        return DailySummary(
            date=day,
            total_syns=total,
            remaining_syns=allowance - total,
            healthy_extra_a_count=extras["A"],
            healthy_extra_b_count=extras["B"],
            healthy_extra_c_count=extras["C"],
            speed_foods_count=sum(
                1 for entry in entries if entry.food and entry.food.is_speed_food
            ),
            entries=entries,
        )


def syns_consumed(food: Food, quantity: float, is_healthy_extra: bool) -> float:
    """Syns charged for eating ``quantity`` portions of a food."""
    if is_healthy_extra or food.is_free_food:
        return 0.0
    return round_to_half(food.syn_value * quantity)
