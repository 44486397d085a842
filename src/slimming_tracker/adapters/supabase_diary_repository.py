"""Supabase repository for food diary entries."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from slimming_tracker.adapters.supabase_food_repository import parse_food
from slimming_tracker.domain.diary import DiaryEntry
from slimming_tracker.services.diary import DiaryRepository

_ENTRY_WITH_FOOD = "*, foods(*)"


@dataclass
class SupabaseDiaryRepository(DiaryRepository):
    """Supabase implementation for diary entries."""

    client: Client

    def create_entry(self, user_id: UUID, payload: dict[str, object]) -> DiaryEntry:
        """Create an entry row and return it."""
        response = (
            self.client.table("food_diary")
            .insert({"user_id": str(user_id), **payload})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create diary entry")
        return _parse_entry(response.data[0])

    def list_entries(self, user_id: UUID, day: date) -> list[DiaryEntry]:
        """Return entries for a day with their food rows embedded."""
        response = (
            self.client.table("food_diary")
            .select(_ENTRY_WITH_FOOD)
            .eq("user_id", str(user_id))
            .eq("date", day.isoformat())
            .order("meal_type")
            .order("created_at")
            .execute()
        )
        return [_parse_entry(row) for row in response.data or []]

    def update_entry(
        self, entry_id: UUID, user_id: UUID, columns: dict[str, object]
    ) -> DiaryEntry | None:
        """Update an entry owned by the user."""
        if not columns:
            return self._get_entry(entry_id, user_id)
        response = (
            self.client.table("food_diary")
            .update(_serialize(columns))
            .eq("id", str(entry_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_entry(response.data[0])

    def delete_entry(self, entry_id: UUID, user_id: UUID) -> bool:
        """Delete an entry owned by the user."""
        response = (
            self.client.table("food_diary")
            .delete()
            .eq("id", str(entry_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)

    def _get_entry(self, entry_id: UUID, user_id: UUID) -> DiaryEntry | None:
        response = (
            self.client.table("food_diary")
            .select(_ENTRY_WITH_FOOD)
            .eq("id", str(entry_id))
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_entry(response.data[0])


def _serialize(columns: dict[str, object]) -> dict[str, object]:
    payload: dict[str, object] = {}
    for key, value in columns.items():
        if isinstance(value, date):
            payload[key] = value.isoformat()
        elif isinstance(value, UUID):
            payload[key] = str(value)
        else:
            payload[key] = value
    return payload


def _parse_entry(row: dict[str, object]) -> DiaryEntry:
    created_raw = row.get("created_at")
    food_row = row.get("foods")
    return DiaryEntry(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        date=date.fromisoformat(str(row["date"])),
        meal_type=str(row.get("meal_type", "")),
        food_id=UUID(str(row["food_id"])),
        quantity=float(row.get("quantity") or 1.0),
        syn_value_consumed=float(row.get("syn_value_consumed") or 0.0),
        is_healthy_extra=bool(row.get("is_healthy_extra")),
        created_at=(
            datetime.fromisoformat(created_raw)
            if isinstance(created_raw, str) and created_raw
            else None
        ),
        food=parse_food(food_row) if isinstance(food_row, dict) else None,
    )
