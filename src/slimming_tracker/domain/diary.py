"""Domain models for the food diary."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from slimming_tracker.domain.foods import Food

MEAL_TYPES = ("breakfast", "lunch", "dinner", "snacks")


@dataclass(frozen=True)
class DiaryEntry:
    """A single food logged against a day and meal."""

    id: UUID
    user_id: UUID
    date: date
    meal_type: str
    food_id: UUID
    quantity: float
    syn_value_consumed: float
    is_healthy_extra: bool
    created_at: datetime | None
    food: Food | None = None


@dataclass(frozen=True)
class DailySummary:
    """Totals for one diary day."""

    date: date
    total_syns: float
    remaining_syns: float
    healthy_extra_a_count: int
    healthy_extra_b_count: int
    healthy_extra_c_count: int
    speed_foods_count: int
    entries: list[DiaryEntry]

    @property
    def healthy_extra_a_used(self) -> bool:
        return self.healthy_extra_a_count > 0

    @property
    def healthy_extra_b_used(self) -> bool:
        return self.healthy_extra_b_count > 0

    @property
    def healthy_extra_c_used(self) -> bool:
        return self.healthy_extra_c_count > 0
