"""Dependency container wiring for the application."""

import random
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from meal_planner.adapters.sheet_client import HttpxMealSheetClient
from meal_planner.adapters.supabase_preference_repository import (
    SupabasePreferenceRepository,
)
from meal_planner.config import Settings
from meal_planner.services.catalog import MealCatalogService
from meal_planner.services.planner import PlannerService
from meal_planner.services.recent import (
    InMemoryKeyValueStore,
    KeyValueStore,
    RecentSelectionMemory,
)
from meal_planner.services.selection import MealSelector


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog_service: MealCatalogService
    recent_selection: RecentSelectionMemory
    planner_service: PlannerService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    store: KeyValueStore
    if resolved_settings.supabase_enabled:
        supabase_client = create_client(
            resolved_settings.supabase_url, resolved_settings.supabase_service_key
        )
        store = SupabasePreferenceRepository(supabase_client)
    else:
        store = InMemoryKeyValueStore()
    sheet_client = HttpxMealSheetClient.create(
        url=resolved_settings.meal_source_url,
        timeout_seconds=resolved_settings.fetch_timeout_seconds,
    )
    catalog_service = MealCatalogService(sheet_client)
    recent_selection = RecentSelectionMemory(
        store=store, key=resolved_settings.recent_selection_key
    )
    planner_service = PlannerService(
        catalog=catalog_service,
        selector=MealSelector(random.Random()),
        memory=recent_selection,
        plan_size=resolved_settings.plan_size,
    )

    async def close_resources() -> None:
        await sheet_client.close()

    return AppContainer(
        settings=resolved_settings,
        catalog_service=catalog_service,
        recent_selection=recent_selection,
        planner_service=planner_service,
        close_resources=close_resources,
    )
