"""Supabase repository for persisted preferences."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from meal_planner.services.recent import KeyValueStore


@dataclass
class SupabasePreferenceRepository(KeyValueStore):
    """Supabase-backed key-value store on the ``preferences`` table."""

    client: Client
    table_name: str = "preferences"

    def get(self, key: str) -> str | None:
        """Return the stored value for a key."""
        response = (
            self.client.table(self.table_name)
            .select("value")
            .eq("key", key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0].get("value")

    def set(self, key: str, value: str) -> None:
        """Insert or replace the value stored under a key."""
        self.client.table(self.table_name).upsert(
            {
                "key": key,
                "value": value,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="key",
        ).execute()
