"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from slimming_tracker.adapters.openfoodfacts_client import HttpxOpenFoodFactsClient
from slimming_tracker.adapters.supabase_diary_repository import (
    SupabaseDiaryRepository,
)
from slimming_tracker.adapters.supabase_food_repository import SupabaseFoodRepository
from slimming_tracker.adapters.supabase_user_repository import SupabaseUserRepository
from slimming_tracker.adapters.supabase_weight_repository import (
    SupabaseWeightRepository,
)
from slimming_tracker.config import Settings
from slimming_tracker.services.cache import InMemoryCache
from slimming_tracker.services.diary import DiaryService
from slimming_tracker.services.foods import FoodService
from slimming_tracker.services.migrations import SynMigrationService
from slimming_tracker.services.products import ProductService
from slimming_tracker.services.users import UserService
from slimming_tracker.services.weight import WeightService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    food_service: FoodService
    product_service: ProductService
    diary_service: DiaryService
    weight_service: WeightService
    migration_service: SynMigrationService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_service = UserService(SupabaseUserRepository(supabase_client))
    food_service = FoodService(SupabaseFoodRepository(supabase_client))
    off_client = HttpxOpenFoodFactsClient.create(
        base_url=resolved_settings.openfoodfacts_base_url,
        search_url=resolved_settings.openfoodfacts_search_url,
        country=resolved_settings.openfoodfacts_country,
        user_agent=resolved_settings.openfoodfacts_user_agent,
    )
    product_service = ProductService(
        client=off_client,
        cache=InMemoryCache(),
        food_service=food_service,
        thresholds=resolved_settings.thresholds(),
    )
    diary_service = DiaryService(
        repository=SupabaseDiaryRepository(supabase_client),
        food_service=food_service,
        user_service=user_service,
    )
    weight_service = WeightService(SupabaseWeightRepository(supabase_client))
    migration_service = SynMigrationService(food_service)

    async def close_resources() -> None:
        await off_client.close()

    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        food_service=food_service,
        product_service=product_service,
        diary_service=diary_service,
        weight_service=weight_service,
        migration_service=migration_service,
        close_resources=close_resources,
    )
