"""Data fixes for syn values stored with the wrong basis."""

import logging
from dataclasses import dataclass

from slimming_tracker.domain.foods import PER_100G, Food
from slimming_tracker.services.foods import FoodService
from slimming_tracker.services.products import COMMERCIAL_CATEGORY
from slimming_tracker.services.syns import scale_syns

_logger = logging.getLogger(__name__)

_TOLERANCE = 0.01
_PAGE_SIZE = 500


@dataclass(frozen=True)
class SynCorrection:
    """A food whose syn value was rescaled to its portion."""

    name: str
    before: float
    after: float
    portion_size: float
    portion_unit: str


@dataclass(frozen=True)
class MigrationReport:
    """Outcome of a syn value migration run."""

    fixed: int
    skipped: int
    corrections: list[SynCorrection]


@dataclass
class SynMigrationService:
    """Rescales commercial foods whose syns were saved per 100g."""

    food_service: FoodService

    def check(self) -> list[tuple[Food, bool]]:
        """Return every catalog food with a flag for whether it needs fixing."""
        return [(food, needs_fix(food)) for food in self._all_foods()]

    def fix(self) -> MigrationReport:
        """Rescale every commercial food with a non-100g portion."""
        corrections: list[SynCorrection] = []
        skipped = 0
        for food in self._all_foods():
            if not needs_fix(food):
                continue
            scaled = food.syn_value * food.portion_size / 100
            if abs(food.syn_value - scaled) <= _TOLERANCE:
                # Only the basis is stale.
                self.food_service.set_serving_syns(food.id, food.syn_value)
                skipped += 1
                continue
            after = scale_syns(food.syn_value, food.portion_size)
            self.food_service.set_serving_syns(food.id, after)
            _logger.info(
                "Rescaled syns: food=%s before=%s after=%s portion=%s%s",
                food.name,
                food.syn_value,
                after,
                food.portion_size,
                food.portion_unit,
            )
            corrections.append(
                SynCorrection(
                    name=food.name,
                    before=food.syn_value,
                    after=after,
                    portion_size=food.portion_size,
                    portion_unit=food.portion_unit,
                )
            )
        return MigrationReport(
            fixed=len(corrections), skipped=skipped, corrections=corrections
        )

    def _all_foods(self) -> list[Food]:
        foods: list[Food] = []
        offset = 0
        while True:
            page = self.food_service.list_foods(limit=_PAGE_SIZE, offset=offset)
            foods.extend(page)
            if len(page) < _PAGE_SIZE:
                return foods
            offset += _PAGE_SIZE


def needs_fix(food: Food) -> bool:
    """Commercial foods with a non-100g portion still priced per 100g."""
    return (
        food.category == COMMERCIAL_CATEGORY
        and food.basis == PER_100G
        and food.portion_size != 100
    )
