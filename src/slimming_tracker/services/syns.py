"""Syn value estimation from per-100g nutrition facts.

Every function here is pure: no I/O beyond a diagnostic log line, no shared
state, identical output for identical input.
"""

import logging
import math
import re
from collections.abc import Iterable
from dataclasses import dataclass

from slimming_tracker.domain.food_rules import (
    FREE_FOOD_EXCLUSIONS,
    FREE_FOOD_INCLUSIONS,
    LOW_CALORIE_YOGURT,
    SPEED_FOOD_CATEGORIES,
    SPEED_FOOD_EXCLUSIONS,
    SPEED_FOOD_INCLUSIONS,
    first_match,
)
from slimming_tracker.domain.nutrition import FoodClassification, NutritionFacts

DEFAULT_SERVING_GRAMS = 100.0

_PARENTHESISED_GRAMS = re.compile(
    r"\(\s*(\d+(?:[.,]\d+)?)\s*g(?:rams?)?\b[^)]*\)", re.IGNORECASE
)
_BARE_GRAMS = re.compile(r"(\d+(?:[.,]\d+)?)\s*g(?:rams?)?\b", re.IGNORECASE)

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SynThresholds:
    """Tunable limits used by the classifiers and the serving parser."""

    low_calorie_threshold: float = 20.0
    free_food_max_calories: float = 250.0
    free_food_max_saturated_fat: float = 5.0
    low_calorie_yogurt_max_calories: float = 60.0
    max_serving_grams: float = 200.0


DEFAULT_THRESHOLDS = SynThresholds()


def calculate_syns_per_100g(nutrition: NutritionFacts) -> float:
    """Return the unrounded syn cost of 100g of food.

    The higher of ``calories / 20`` and
    ``(calories + saturated_fat * 12 + sugars) / 50`` is used so the
    estimate never under-counts fatty or sugary foods.
    """
    calories = _amount(nutrition.calories)
    saturated_fat = _amount(nutrition.saturated_fat)
    sugars = _amount(nutrition.sugars)
    by_calories = calories / 20
    by_composition = (calories + saturated_fat * 12 + sugars) / 50
    return max(by_calories, by_composition)


def round_to_half(value: float) -> float:
    """Round to the nearest 0.5, halves going up; invalid input gives 0."""
    if not isinstance(value, int | float) or not math.isfinite(value):
        return 0.0
    rounded = math.floor(value * 2 + 0.5) / 2
    return max(rounded, 0.0)


def is_free_food(
    nutrition: NutritionFacts,
    name: str,
    thresholds: SynThresholds = DEFAULT_THRESHOLDS,
) -> bool:
    """Return True when a food does not count against the syn allowance."""
    calories = _amount(nutrition.calories)
    if calories < thresholds.low_calorie_threshold:
        return True

    lower_name = (name or "").lower()
    if first_match(FREE_FOOD_EXCLUSIONS, lower_name) is not None:
        return False

    matched = first_match(FREE_FOOD_INCLUSIONS, lower_name)
    if matched is None:
        if not LOW_CALORIE_YOGURT.matches(lower_name):
            return False
        if calories > thresholds.low_calorie_yogurt_max_calories:
            return False

    saturated_fat = _amount(nutrition.saturated_fat)
    return (
        calories <= thresholds.free_food_max_calories
        and saturated_fat <= thresholds.free_food_max_saturated_fat
    )


def is_speed_food(name: str, categories: Iterable[str] | None = None) -> bool:
    """Return True for fresh fruit and vegetables."""
    if categories and any(
        _category_name(category) in SPEED_FOOD_CATEGORIES for category in categories
    ):
        return True

    lower_name = (name or "").lower()
    if SPEED_FOOD_EXCLUSIONS.matches(lower_name):
        return False
    return first_match(SPEED_FOOD_INCLUSIONS, lower_name) is not None


def parse_serving_grams(
    serving_size: str | None = None,
    max_grams: float = DEFAULT_THRESHOLDS.max_serving_grams,
) -> float:
    """Extract grams from a serving description such as "1 bar (45 g)".

    Falls back to 100g when nothing parses, and when the value is above
    ``max_grams`` (usually a whole-pack weight reported as a serving).
    """
    if not serving_size:
        return DEFAULT_SERVING_GRAMS
    match = _PARENTHESISED_GRAMS.search(serving_size) or _BARE_GRAMS.search(
        serving_size
    )
    if match is None:
        return DEFAULT_SERVING_GRAMS
    grams = float(match.group(1).replace(",", "."))
    if grams <= 0:
        return DEFAULT_SERVING_GRAMS
    if grams > max_grams:
        _logger.warning(
            "Ignoring implausible serving size: serving=%r grams=%s max=%s",
            serving_size,
            grams,
            max_grams,
        )
        return DEFAULT_SERVING_GRAMS
    return grams


def scale_syns(syns_per_100g: float, portion_grams: float) -> float:
    """Scale a per-100g syn value to a portion and round it."""
    return round_to_half(syns_per_100g * portion_grams / 100)


def classify_food(
    nutrition: NutritionFacts,
    name: str,
    categories: Iterable[str] | None = None,
    serving_size: str | None = None,
    thresholds: SynThresholds = DEFAULT_THRESHOLDS,
) -> FoodClassification:
    """Classify a food and price one serving of it in syns."""
    portion = parse_serving_grams(serving_size, max_grams=thresholds.max_serving_grams)
    free = is_free_food(nutrition, name, thresholds)
    speed = is_speed_food(name, categories)
    syn_value = 0.0 if free else scale_syns(calculate_syns_per_100g(nutrition), portion)
    return FoodClassification(
        syn_value=syn_value,
        is_free_food=free,
        is_speed_food=speed,
        portion_size_grams=portion,
    )


def _amount(value: float | None) -> float:
    """Coerce a nutrient amount to a finite, non-negative float."""
    if value is None:
        return 0.0
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(amount) or amount < 0:
        return 0.0
    return amount


def _category_name(category: str) -> str:
    """Strip an Open Food Facts language prefix such as ``en:``."""
    return category.rsplit(":", maxsplit=1)[-1].strip().lower()
