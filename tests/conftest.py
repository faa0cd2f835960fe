"""Shared test fixtures."""

import random
from dataclasses import dataclass, field

import pytest

from meal_planner.adapters.sheet_client import MealSheetClient
from meal_planner.config import Settings
from meal_planner.containers import AppContainer
from meal_planner.domain.meals import Meal
from meal_planner.services.catalog import MealCatalogService
from meal_planner.services.planner import PlannerService
from meal_planner.services.recent import InMemoryKeyValueStore, RecentSelectionMemory
from meal_planner.services.selection import MealSelector


def sheet_payload() -> dict[str, list[object]]:
    """Return a small sheet payload with two meals and continuation rows."""
    return {
        "dataEntry": [
            {
                "id": 2,
                "mealName": "Chilli con Carne",
                "category": "Mexican",
                "specialist": "",
                "mainIngredient": "Beef",
                "book": "Family Favourites",
                "page": 12,
                "serves": 4,
                "ingredients": "minced beef",
                "quantity": 500,
                "measurement": "g",
            },
            {
                "id": 3,
                "ingredients": "kidney beans",
                "quantity": 1,
                "measurement": "can",
            },
            {
                "id": 4,
                "ingredients": "chopped tomatoes",
                "quantity": 400,
                "measurement": "g",
            },
            {
                "id": 5,
                "mealName": "Tomato Soup",
                "book": "Soups",
                "page": "7",
                "serves": "2",
                "ingredients": "chopped tomatoes",
                "quantity": 400,
                "measurement": "g",
            },
            {"id": 6, "mealName": "", "ingredients": "salt", "measurement": "pinch of"},
        ]
    }


@dataclass
class FakeMealSheetClient(MealSheetClient):
    """Fake sheet client returning a payload or raising an error."""

    payload: object = field(default_factory=sheet_payload)
    error: Exception | None = None
    calls: int = 0
    closed: bool = False

    async def fetch_rows(self) -> object:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.payload

    async def close(self) -> None:
        self.closed = True


def make_meal(meal_id: str, ingredients: str = "") -> Meal:
    return Meal(id=meal_id, meal_name=f"Meal {meal_id}", ingredients_list=ingredients)


@pytest.fixture
def settings() -> Settings:
    return Settings(meal_source_url="https://sheet.test/dataEntry")


@pytest.fixture
def sheet_client() -> FakeMealSheetClient:
    return FakeMealSheetClient()


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def memory(store: InMemoryKeyValueStore) -> RecentSelectionMemory:
    return RecentSelectionMemory(store=store)


@pytest.fixture
def planner_service(
    sheet_client: FakeMealSheetClient, memory: RecentSelectionMemory
) -> PlannerService:
    return PlannerService(
        catalog=MealCatalogService(sheet_client),
        selector=MealSelector(random.Random(7)),
        memory=memory,
        plan_size=5,
    )


@pytest.fixture
def container(
    settings: Settings,
    sheet_client: FakeMealSheetClient,
    memory: RecentSelectionMemory,
    planner_service: PlannerService,
) -> AppContainer:
    async def close_resources() -> None:
        await sheet_client.close()

    return AppContainer(
        settings=settings,
        catalog_service=planner_service.catalog,
        recent_selection=memory,
        planner_service=planner_service,
        close_resources=close_resources,
    )
