"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from nutritrack.adapters.nutritionix_client import HttpxNutritionixClient
from nutritrack.adapters.supabase_meal_repository import SupabaseMealRepository
from nutritrack.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from nutritrack.adapters.supabase_weight_repository import SupabaseWeightRepository
from nutritrack.config import Settings
from nutritrack.services.cache import InMemoryCache
from nutritrack.services.foods import FoodSearchService
from nutritrack.services.meals import MealService
from nutritrack.services.profiles import ProfileService
from nutritrack.services.stats import StatsService
from nutritrack.services.weights import WeightService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    profile_service: ProfileService
    meal_service: MealService
    stats_service: StatsService
    weight_service: WeightService
    food_search_service: FoodSearchService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    meal_repository = SupabaseMealRepository(supabase_client)
    profile_service = ProfileService(SupabaseProfileRepository(supabase_client))
    meal_service = MealService(
        repository=meal_repository, profile_service=profile_service
    )
    stats_service = StatsService(
        repository=meal_repository, profile_service=profile_service
    )
    weight_service = WeightService(SupabaseWeightRepository(supabase_client))
    nutritionix_client = HttpxNutritionixClient.create(
        app_id=resolved_settings.nutritionix_app_id,
        app_key=resolved_settings.nutritionix_app_key,
        base_url=resolved_settings.nutritionix_base_url,
    )
    food_search_service = FoodSearchService(
        client=nutritionix_client,
        cache=InMemoryCache(),
        search_ttl_seconds=resolved_settings.food_search_ttl_seconds,
    )

    async def close_resources() -> None:
        await nutritionix_client.close()

    return AppContainer(
        settings=resolved_settings,
        profile_service=profile_service,
        meal_service=meal_service,
        stats_service=stats_service,
        weight_service=weight_service,
        food_search_service=food_search_service,
        close_resources=close_resources,
    )
