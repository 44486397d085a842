"""Application configuration."""

import os
from uuid import UUID

from pydantic_settings import BaseSettings, SettingsConfigDict

from slimming_tracker.services.syns import SynThresholds

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    admin_token: str
    default_user_id: UUID = UUID("00000000-0000-0000-0000-000000000001")
    openfoodfacts_base_url: str = "https://world.openfoodfacts.org/api/v2"
    openfoodfacts_search_url: str = "https://world.openfoodfacts.org/cgi/search.pl"
    openfoodfacts_country: str = "united-kingdom"
    openfoodfacts_user_agent: str = "SlimmingTracker/1.0"
    free_food_max_calories: float = 250.0
    free_food_max_saturated_fat: float = 5.0
    low_calorie_threshold: float = 20.0
    low_calorie_yogurt_max_calories: float = 60.0
    max_serving_grams: float = 200.0
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def thresholds(self) -> SynThresholds:
        """Build estimator thresholds from configured limits."""
        return SynThresholds(
            low_calorie_threshold=self.low_calorie_threshold,
            free_food_max_calories=self.free_food_max_calories,
            free_food_max_saturated_fat=self.free_food_max_saturated_fat,
            low_calorie_yogurt_max_calories=self.low_calorie_yogurt_max_calories,
            max_serving_grams=self.max_serving_grams,
        )
