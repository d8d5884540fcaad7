"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from uuid import UUID, uuid4

import pytest

from recipe_planner.adapters.spoonacular_client import SpoonacularClient
from recipe_planner.config import Settings
from recipe_planner.containers import AppContainer
from recipe_planner.domain.analytics import AnalyticsEvent
from recipe_planner.domain.meal_plans import (
    GeneratedGroceryList,
    GroceryListItem,
    MealPlan,
    WeeklyMeals,
)
from recipe_planner.domain.pantry import FavoriteRecipe, PantryItem
from recipe_planner.domain.ratings import RecipeRating, RecipeReview
from recipe_planner.services.analytics import AnalyticsRepository, AnalyticsService
from recipe_planner.services.cache import InMemoryCache
from recipe_planner.services.discovery import DiscoveryService
from recipe_planner.services.favorites import FavoritesRepository, FavoritesService
from recipe_planner.services.grocery import GroceryListService, GroceryRepository
from recipe_planner.services.meal_plans import MealPlanRepository, MealPlanService
from recipe_planner.services.nutrition import NutritionService
from recipe_planner.services.pantry import PantryRepository, PantryService
from recipe_planner.services.ratings import RatingRepository, RatingService

USER_ID = UUID("11111111-1111-1111-1111-111111111111")


@dataclass
class InMemoryPantryRepository(PantryRepository):
    """In-memory pantry repository for tests."""

    items: list[PantryItem] = field(default_factory=list)

    def list_items(self, user_id: UUID) -> list[PantryItem]:
        return [item for item in self.items if item.user_id == user_id]

    def create_item(self, user_id: UUID, ingredient: str) -> PantryItem:
        item = PantryItem(
            id=uuid4(),
            user_id=user_id,
            ingredient=ingredient,
            added_at=datetime.now(tz=UTC),
        )
        self.items.insert(0, item)
        return item

    def delete_item(self, item_id: UUID) -> None:
        self.items = [item for item in self.items if item.id != item_id]


@dataclass
class InMemoryFavoritesRepository(FavoritesRepository):
    """In-memory favorites repository for tests."""

    favorites: list[FavoriteRecipe] = field(default_factory=list)

    def list_favorites(self, user_id: UUID) -> list[FavoriteRecipe]:
        return [fav for fav in self.favorites if fav.user_id == user_id]

    def create_favorite(self, user_id: UUID, recipe_id: str) -> FavoriteRecipe:
        favorite = FavoriteRecipe(
            id=uuid4(),
            user_id=user_id,
            recipe_id=recipe_id,
            saved_at=datetime.now(tz=UTC),
        )
        self.favorites.insert(0, favorite)
        return favorite

    def delete_favorite(self, favorite_id: UUID) -> None:
        self.favorites = [fav for fav in self.favorites if fav.id != favorite_id]


@dataclass
class InMemoryRatingRepository(RatingRepository):
    """In-memory ratings repository for tests."""

    ratings: list[RecipeRating] = field(default_factory=list)
    reviews: list[RecipeReview] = field(default_factory=list)
    fail_reads: bool = False

    def list_ratings(self, recipe_id: str) -> list[RecipeRating]:
        if self.fail_reads:
            raise RuntimeError("ratings unavailable")
        return [rating for rating in self.ratings if rating.recipe_id == recipe_id]

    def get_user_rating(self, user_id: UUID, recipe_id: str) -> RecipeRating | None:
        if self.fail_reads:
            raise RuntimeError("ratings unavailable")
        for rating in self.ratings:
            if rating.user_id == user_id and rating.recipe_id == recipe_id:
                return rating
        return None

    def create_rating(self, user_id: UUID, recipe_id: str, rating: int) -> RecipeRating:
        now = datetime.now(tz=UTC)
        record = RecipeRating(
            id=uuid4(),
            user_id=user_id,
            recipe_id=recipe_id,
            rating=rating,
            created_at=now,
            updated_at=now,
        )
        self.ratings.append(record)
        return record

    def update_rating(self, rating_id: UUID, rating: int) -> None:
        self.ratings = [
            RecipeRating(
                id=r.id,
                user_id=r.user_id,
                recipe_id=r.recipe_id,
                rating=rating,
                created_at=r.created_at,
                updated_at=datetime.now(tz=UTC),
            )
            if r.id == rating_id
            else r
            for r in self.ratings
        ]

    def list_reviews(self, recipe_id: str, limit: int) -> list[RecipeReview]:
        if self.fail_reads:
            raise RuntimeError("reviews unavailable")
        return [r for r in self.reviews if r.recipe_id == recipe_id][:limit]

    def create_review(
        self, user_id: UUID, recipe_id: str, review_text: str
    ) -> RecipeReview:
        now = datetime.now(tz=UTC)
        review = RecipeReview(
            id=uuid4(),
            user_id=user_id,
            recipe_id=recipe_id,
            review_text=review_text,
            created_at=now,
            updated_at=now,
        )
        self.reviews.insert(0, review)
        return review


@dataclass
class InMemoryGroceryRepository(GroceryRepository):
    """In-memory grocery repository for tests."""

    items: list[GroceryListItem] = field(default_factory=list)
    markers: list[GeneratedGroceryList] = field(default_factory=list)
    fail_writes: bool = False
    fail_after: int | None = None

    def list_items(self, user_id: UUID) -> list[GroceryListItem]:
        return [item for item in self.items if item.user_id == user_id]

    def create_item(self, item: GroceryListItem) -> None:
        if self.fail_writes or self.fail_after == 0:
            raise RuntimeError("write failed")
        if self.fail_after is not None:
            self.fail_after -= 1
        self.items.insert(0, item)

    def delete_item(self, user_id: UUID, item_id: UUID) -> None:
        self.items = [
            item
            for item in self.items
            if not (item.id == item_id and item.user_id == user_id)
        ]

    def set_checked(
        self, user_id: UUID, item_id: UUID, is_checked: bool
    ) -> GroceryListItem | None:
        for index, item in enumerate(self.items):
            if item.id == item_id and item.user_id == user_id:
                updated = GroceryListItem(
                    id=item.id,
                    user_id=item.user_id,
                    ingredient=item.ingredient,
                    amount=item.amount,
                    unit=item.unit,
                    recipe_id=item.recipe_id,
                    recipe_name=item.recipe_name,
                    is_checked=is_checked,
                    added_at=item.added_at,
                )
                self.items[index] = updated
                return updated
        return None

    def create_generated_list(self, marker: GeneratedGroceryList) -> None:
        self.markers.append(marker)


@dataclass
class InMemoryMealPlanRepository(MealPlanRepository):
    """In-memory meal plan repository for tests."""

    plans: dict[tuple[UUID, date], MealPlan] = field(default_factory=dict)

    def get_plan(self, user_id: UUID, week_start: date) -> MealPlan | None:
        return self.plans.get((user_id, week_start))

    def create_plan(self, user_id: UUID, week_start: date) -> MealPlan:
        now = datetime.now(tz=UTC)
        plan = MealPlan(
            id=uuid4(),
            user_id=user_id,
            week_start=week_start,
            meals=WeeklyMeals(),
            created_at=now,
            updated_at=now,
        )
        self.plans[(user_id, week_start)] = plan
        return plan

    def update_meals(
        self, plan_id: UUID, meals: WeeklyMeals, updated_at: datetime
    ) -> None:
        for key, plan in self.plans.items():
            if plan.id == plan_id:
                self.plans[key] = MealPlan(
                    id=plan.id,
                    user_id=plan.user_id,
                    week_start=plan.week_start,
                    meals=meals,
                    created_at=plan.created_at,
                    updated_at=updated_at,
                )
                return


@dataclass
class InMemoryAnalyticsRepository(AnalyticsRepository):
    """In-memory analytics repository for tests."""

    events: list[AnalyticsEvent] = field(default_factory=list)
    fail_writes: bool = False

    def create_event(self, event: AnalyticsEvent) -> None:
        if self.fail_writes:
            raise RuntimeError("analytics unavailable")
        self.events.append(event)

    def list_events(
        self, user_id: UUID, event_type: str | None, limit: int
    ) -> list[AnalyticsEvent]:
        matching = [
            event
            for event in reversed(self.events)
            if event.user_id == user_id
            and (event_type is None or event.event_type == event_type)
        ]
        return matching[:limit]


def nutrient_payload(
    calories: float, protein: float, carbs: float, fat: float
) -> list[dict[str, object]]:
    """Build a parseIngredients-style response for one ingredient."""
    return [
        {
            "name": "ingredient",
            "nutrition": {
                "nutrients": [
                    {"name": "Calories", "amount": calories, "unit": "kcal"},
                    {"name": "Protein", "amount": protein, "unit": "g"},
                    {"name": "Carbohydrates", "amount": carbs, "unit": "g"},
                    {"name": "Fat", "amount": fat, "unit": "g"},
                ]
            },
        }
    ]


@dataclass
class FakeSpoonacularClient(SpoonacularClient):
    """Fake Spoonacular client with a canned response."""

    payload: list[dict[str, object]] = field(
        default_factory=lambda: nutrient_payload(800, 40, 100, 20)
    )
    fail: bool = False
    calls: list[tuple[str, int]] = field(default_factory=list)

    async def parse_ingredients(
        self, ingredient_list: str, servings: int
    ) -> list[dict[str, object]]:
        self.calls.append((ingredient_list, servings))
        if self.fail:
            raise RuntimeError("spoonacular unavailable")
        return self.payload


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
        admin_token="admin-token",
        spoonacular_api_key="spoonacular-key",
    )


@pytest.fixture
def user_id() -> UUID:
    return USER_ID


@pytest.fixture
def pantry_repository() -> InMemoryPantryRepository:
    return InMemoryPantryRepository()


@pytest.fixture
def pantry_service(pantry_repository: InMemoryPantryRepository) -> PantryService:
    return PantryService(pantry_repository)


@pytest.fixture
def favorites_service() -> FavoritesService:
    return FavoritesService(InMemoryFavoritesRepository())


@pytest.fixture
def rating_repository() -> InMemoryRatingRepository:
    return InMemoryRatingRepository()


@pytest.fixture
def rating_service(rating_repository: InMemoryRatingRepository) -> RatingService:
    return RatingService(rating_repository)


@pytest.fixture
def grocery_repository() -> InMemoryGroceryRepository:
    return InMemoryGroceryRepository()


@pytest.fixture
def grocery_service(grocery_repository: InMemoryGroceryRepository) -> GroceryListService:
    return GroceryListService(grocery_repository)


@pytest.fixture
def meal_plan_service(
    pantry_service: PantryService, grocery_service: GroceryListService
) -> MealPlanService:
    return MealPlanService(
        repository=InMemoryMealPlanRepository(),
        pantry_service=pantry_service,
        grocery_service=grocery_service,
    )


@pytest.fixture
def discovery_service(
    rating_service: RatingService,
    pantry_service: PantryService,
    favorites_service: FavoritesService,
) -> DiscoveryService:
    return DiscoveryService(
        rating_service=rating_service,
        pantry_service=pantry_service,
        favorites_service=favorites_service,
    )


@pytest.fixture
def spoonacular_client() -> FakeSpoonacularClient:
    return FakeSpoonacularClient()


@pytest.fixture
def nutrition_service(spoonacular_client: FakeSpoonacularClient) -> NutritionService:
    return NutritionService(
        client=spoonacular_client,
        cache=InMemoryCache(),
        retry_attempts=0,
        retry_delay_seconds=0,
    )


@pytest.fixture
def analytics_repository() -> InMemoryAnalyticsRepository:
    return InMemoryAnalyticsRepository()


@pytest.fixture
def analytics_service(
    analytics_repository: InMemoryAnalyticsRepository,
) -> AnalyticsService:
    return AnalyticsService(analytics_repository)


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    pantry_service: PantryService,
    favorites_service: FavoritesService,
    rating_service: RatingService,
    discovery_service: DiscoveryService,
    grocery_service: GroceryListService,
    meal_plan_service: MealPlanService,
    nutrition_service: NutritionService,
    analytics_service: AnalyticsService,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
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
