"""Pydantic request bodies for the JSON API."""

import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts camelCase keys from clients and snake_case from tests."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FoodCreate(CamelModel):
    """Body for adding a catalog food."""

    name: str = Field(min_length=1)
    syn_value: float = Field(default=0.0, ge=0)
    is_free_food: bool = False
    is_speed_food: bool = False
    healthy_extra_type: str | None = Field(default=None, pattern="^[ABC]$")
    portion_size: float = Field(default=100.0, gt=0)
    portion_unit: str = "g"
    category: str = "general"


class ProductSave(CamelModel):
    """Body for saving a looked-up product into the catalog."""

    barcode: str = Field(min_length=1)
    name: str = Field(min_length=1)
    syn_value: float = Field(default=0.0, ge=0)
    is_free: bool = False
    is_speed: bool = False
    serving_size: str | None = None
    portion_size: float | None = None


class DiaryEntryCreate(CamelModel):
    """Body for logging a food."""

    date: datetime.date
    meal_type: str
    food_id: UUID
    quantity: float = Field(default=1.0, gt=0)
    is_healthy_extra: bool = False
    syn_value_consumed: float | None = Field(default=None, ge=0)


class DiaryEntryUpdate(CamelModel):
    """Partial update for a diary entry."""

    date: datetime.date | None = None
    meal_type: str | None = None
    food_id: UUID | None = None
    quantity: float | None = Field(default=None, gt=0)
    is_healthy_extra: bool | None = None
    syn_value_consumed: float | None = Field(default=None, ge=0)


class WeightLogCreate(CamelModel):
    """Body for recording a weigh-in."""

    date: datetime.date
    weight: float = Field(gt=0)
    notes: str | None = None


class WeightLogUpdate(CamelModel):
    """Partial update for a weigh-in."""

    date: datetime.date | None = None
    weight: float | None = Field(default=None, gt=0)
    notes: str | None = None
