"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from recipe_planner.adapters.spoonacular_client import HttpxSpoonacularClient
from recipe_planner.adapters.supabase_analytics_repository import (
    SupabaseAnalyticsRepository,
)
from recipe_planner.adapters.supabase_meal_plan_repository import (
    SupabaseGroceryRepository,
    SupabaseMealPlanRepository,
)
from recipe_planner.adapters.supabase_pantry_repository import (
    SupabaseFavoritesRepository,
    SupabasePantryRepository,
)
from recipe_planner.adapters.supabase_rating_repository import SupabaseRatingRepository
from recipe_planner.config import Settings
from recipe_planner.services.analytics import AnalyticsService
from recipe_planner.services.cache import InMemoryCache
from recipe_planner.services.discovery import DiscoveryService
from recipe_planner.services.favorites import FavoritesService
from recipe_planner.services.grocery import GroceryListService
from recipe_planner.services.meal_plans import MealPlanService
from recipe_planner.services.nutrition import NutritionService
from recipe_planner.services.pantry import PantryService
from recipe_planner.services.ratings import RatingService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    pantry_service: PantryService
    favorites_service: FavoritesService
    rating_service: RatingService
    discovery_service: DiscoveryService
    grocery_service: GroceryListService
    meal_plan_service: MealPlanService
    nutrition_service: NutritionService
    analytics_service: AnalyticsService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    pantry_service = PantryService(SupabasePantryRepository(supabase_client))
    favorites_service = FavoritesService(SupabaseFavoritesRepository(supabase_client))
    rating_service = RatingService(SupabaseRatingRepository(supabase_client))
    grocery_service = GroceryListService(SupabaseGroceryRepository(supabase_client))
    meal_plan_service = MealPlanService(
        repository=SupabaseMealPlanRepository(supabase_client),
        pantry_service=pantry_service,
        grocery_service=grocery_service,
    )
    discovery_service = DiscoveryService(
        rating_service=rating_service,
        pantry_service=pantry_service,
        favorites_service=favorites_service,
    )
    spoonacular_client = HttpxSpoonacularClient.create(
        api_key=resolved_settings.spoonacular_api_key,
        base_url=resolved_settings.spoonacular_base_url,
    )
    nutrition_service = NutritionService(
        client=spoonacular_client,
        cache=InMemoryCache(),
        ttl_seconds=resolved_settings.nutrition_cache_ttl_seconds,
        debug=resolved_settings.environment == "local",
    )
    analytics_service = AnalyticsService(SupabaseAnalyticsRepository(supabase_client))

    async def close_resources() -> None:
        await spoonacular_client.close()

    return AppContainer(
        settings=resolved_settings,
        pantry_service=pantry_service,
        favorites_service=favorites_service,
        rating_service=rating_service,
        discovery_service=discovery_service,
        grocery_service=grocery_service,
        meal_plan_service=meal_plan_service,
        nutrition_service=nutrition_service,
        analytics_service=analytics_service,
        close_resources=close_resources,
    )
