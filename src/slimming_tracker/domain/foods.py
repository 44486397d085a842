"""Domain models for the food catalog."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

PER_SERVING = "per_serving"
PER_100G = "per_100g"


@dataclass(frozen=True)
class Food:
    """Catalog food.

    ``syn_value`` is per portion. Rows imported before per-serving scaling
    existed carry ``basis == "per_100g"`` until the syn migration fixes them.
    """

    id: UUID
    name: str
    syn_value: float
    is_free_food: bool
    is_speed_food: bool
    healthy_extra_type: str | None
    portion_size: float
    portion_unit: str
    category: str
    barcode: str | None
    basis: str
    created_by: UUID | None
    created_at: datetime | None


@dataclass(frozen=True)
class FoodFilters:
    """Optional filters for catalog search."""

    category: str | None = None
    is_free_food: bool | None = None
    is_speed_food: bool | None = None
