"""Supabase key/value storage for the calculation history blob."""

from dataclasses import dataclass

from supabase import Client

from protein_calculator.services.history import HistoryBackend


@dataclass
class SupabaseHistoryBackend(HistoryBackend):
    """Supabase implementation storing text values in a key/value table."""

    client: Client
    table: str = "app_state"

    def read(self, key: str) -> str | None:
        """Return the stored value for a key."""
        response = (
            self.client.table(self.table)
            .select("value")
            .eq("key", key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        value = response.data[0].get("value")
        return value if isinstance(value, str) else None

    def write(self, key: str, value: str) -> None:
        """Insert or replace the value for a key."""
        self.client.table(self.table).upsert(
            {"key": key, "value": value}, on_conflict="key"
        ).execute()

    def remove(self, key: str) -> None:
        """Delete the row for a key."""
        self.client.table(self.table).delete().eq("key", key).execute()
