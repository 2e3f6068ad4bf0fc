"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import date
from uuid import UUID, uuid4

import pytest

from nutritrack.adapters.nutritionix_client import FoodLookupClient
from nutritrack.config import Settings
from nutritrack.containers import AppContainer
from nutritrack.domain.meals import Meal
from nutritrack.domain.profile import UserProfile
from nutritrack.domain.stats import WeightEntry
from nutritrack.services.cache import InMemoryCache
from nutritrack.services.foods import FoodSearchService
from nutritrack.services.meals import MealRepository, MealService
from nutritrack.services.profiles import ProfileRepository, ProfileService
from nutritrack.services.stats import StatsService
from nutritrack.services.weights import WeightRepository, WeightService


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profiles: dict[UUID, UserProfile] = field(default_factory=dict)
    saves: int = 0
    reads: int = 0

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        self.reads += 1
        return self.profiles.get(user_id)

    def save_profile(self, profile: UserProfile) -> None:
        self.profiles[profile.user_id] = profile
        self.saves += 1


@dataclass
class InMemoryMealRepository(MealRepository):
    """In-memory meal repository for tests."""

    meals: dict[UUID, tuple[UUID, Meal]] = field(default_factory=dict)

    def create_meal(self, user_id: UUID, meal: Meal) -> Meal:
        stored = replace(meal, id=uuid4())
        self.meals[stored.id] = (user_id, stored)
        return stored

    def get_meal(self, user_id: UUID, meal_id: UUID) -> Meal | None:
        owner, meal = self.meals.get(meal_id, (None, None))
        return meal if owner == user_id else None

    def list_meals(self, user_id: UUID, start: date, end: date) -> list[Meal]:
        return [
            meal
            for owner, meal in self.meals.values()
            if owner == user_id and start <= meal.date <= end
        ]

    def set_completed(self, user_id: UUID, meal_id: UUID, completed: bool) -> None:
        owner, meal = self.meals[meal_id]
        self.meals[meal_id] = (owner, replace(meal, completed=completed))

    def delete_meal(self, user_id: UUID, meal_id: UUID) -> None:
        self.meals.pop(meal_id, None)


@dataclass
class InMemoryWeightRepository(WeightRepository):
    """In-memory weight repository for tests."""

    entries: list[tuple[UUID, WeightEntry]] = field(default_factory=list)

    def add_entry(self, user_id: UUID, entry: WeightEntry) -> WeightEntry:
        stored = replace(entry, id=uuid4())
        self.entries.append((user_id, stored))
        return stored

    def list_entries(self, user_id: UUID) -> list[WeightEntry]:
        return sorted(
            (entry for owner, entry in self.entries if owner == user_id),
            key=lambda entry: entry.timestamp,
        )


@dataclass
class FakeFoodLookupClient(FoodLookupClient):
    """Fake remote food lookup with canned payloads."""

    search_payload: dict[str, object] = field(
        default_factory=lambda: {
            "common": [
                {
                    "food_name": "cheeseburger",
                    "serving_qty": 1,
                    "serving_unit": "sandwich",
                    "serving_weight_grams": 113,
                    "nf_calories": 303,
                    "nf_total_fat": 13,
                    "nf_total_carbohydrate": 32,
                    "nf_protein": 15,
                    "photo": {"thumb": None},
                }
            ],
            "branded": [
                {
                    "food_name": "Double Cheeseburger",
                    "serving_qty": 1,
                    "serving_unit": "burger",
                    "nf_calories": 450,
                    "nf_total_fat": None,
                }
            ],
        }
    )
    nutrients_payload: dict[str, object] = field(
        default_factory=lambda: {
            "foods": [
                {
                    "food_name": "cheeseburger",
                    "serving_qty": 1,
                    "serving_unit": "sandwich",
                    "serving_weight_grams": 113,
                    "nf_calories": 303,
                    "nf_total_fat": 13,
                    "nf_total_carbohydrate": 32,
                    "nf_protein": 15,
                }
            ]
        }
    )
    error: Exception | None = None
    search_calls: list[str] = field(default_factory=list)
    nutrients_calls: list[str] = field(default_factory=list)

    async def search_instant(self, query: str) -> dict[str, object]:
        self.search_calls.append(query)
        if self.error:
            raise self.error
        return self.search_payload

    async def natural_nutrients(self, query: str) -> dict[str, object]:
        self.nutrients_calls.append(query)
        if self.error:
            raise self.error
        return self.nutrients_payload


def make_meal(  # noqa: PLR0913
    day: date,
    calories: int,
    *,
    name: str = "Meal",
    meal_type: str = "lunch",
    proteins: float = 0.0,
    carbs: float = 0.0,
    fats: float = 0.0,
    completed: bool = False,
) -> Meal:
    return Meal(
        id=uuid4(),
        name=name,
        meal_type=meal_type,
        date=day,
        calories=calories,
        proteins=proteins,
        carbs=carbs,
        fats=fats,
        completed=completed,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        nutritionix_app_id="app-id",
        nutritionix_app_key="app-key",
    )


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def meal_repository() -> InMemoryMealRepository:
    return InMemoryMealRepository()


@pytest.fixture
def weight_repository() -> InMemoryWeightRepository:
    return InMemoryWeightRepository()


@pytest.fixture
def food_client() -> FakeFoodLookupClient:
    return FakeFoodLookupClient()


@pytest.fixture
def profile_service(profile_repository: InMemoryProfileRepository) -> ProfileService:
    return ProfileService(profile_repository)


@pytest.fixture
def meal_service(
    meal_repository: InMemoryMealRepository, profile_service: ProfileService
) -> MealService:
    return MealService(repository=meal_repository, profile_service=profile_service)


@pytest.fixture
def container(
    settings: Settings,
    meal_repository: InMemoryMealRepository,
    weight_repository: InMemoryWeightRepository,
    food_client: FakeFoodLookupClient,
    profile_service: ProfileService,
    meal_service: MealService,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        profile_service=profile_service,
        meal_service=meal_service,
        stats_service=StatsService(
            repository=meal_repository, profile_service=profile_service
        ),
        weight_service=WeightService(weight_repository),
        food_search_service=FoodSearchService(
            client=food_client, cache=InMemoryCache(), retry_delay_seconds=0
        ),
        close_resources=close_resources,
    )
