"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

DEFAULT_MEAL_SOURCE_URL = (
    "https://api.sheety.co/292535b77f38b183d2f3d0036f450436/mealPlanV2/dataEntry"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    meal_source_url: str = DEFAULT_MEAL_SOURCE_URL
    fetch_timeout_seconds: float = 15
    plan_size: int = 5
    recent_selection_key: str = "lastAcceptedMeals"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def supabase_enabled(self) -> bool:
        """Return True when both Supabase credentials are configured."""
        return bool(self.supabase_url and self.supabase_service_key)
