"""Nutrition domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NutritionFacts:
    """Per-100g nutrition facts; missing values are stored as 0."""

    calories: float = 0.0
    saturated_fat: float = 0.0
    sugars: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    salt: float = 0.0


@dataclass(frozen=True)
class FoodClassification:
    """Syn estimate for a single serving of a food."""

    syn_value: float
    is_free_food: bool
    is_speed_food: bool
    portion_size_grams: float


@dataclass(frozen=True)
class ProductResult:
    """External product with its computed classification."""

    barcode: str
    name: str
    brand: str | None
    nutrition: NutritionFacts
    classification: FoodClassification
    serving_size: str
    categories: list[str]
    image_url: str | None

    @property
    def display_name(self) -> str:
        """Product name with the brand appended when known."""
        if self.brand:
            return f"{self.name} ({self.brand})"
        return self.name


@dataclass(frozen=True)
class ProductSearchPage:
    """One page of external product search results."""

    products: list[ProductResult]
    count: int
    page: int
    page_size: int
