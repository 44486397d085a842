"""Supabase repository for weight logs."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from slimming_tracker.domain.weight import WeightLog
from slimming_tracker.services.weight import WeightRepository


@dataclass
class SupabaseWeightRepository(WeightRepository):
    """Supabase implementation for weight logs."""

    client: Client

    def create_log(
        self, user_id: UUID, logged_on: date, weight: float, notes: str | None
    ) -> WeightLog:
        """Create a weight log row and return it."""
        response = (
            self.client.table("weight_logs")
            .insert(
                {
                    "user_id": str(user_id),
                    "date": logged_on.isoformat(),
                    "weight": weight,
                    "notes": notes,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create weight log")
        return _parse_log(response.data[0])

    def list_logs(self, user_id: UUID) -> list[WeightLog]:
        """Return logs for a user, newest date first."""
        response = (
            self.client.table("weight_logs")
            .select("*")
            .eq("user_id", str(user_id))
            .order("date", desc=True)
            .execute()
        )
        return [_parse_log(row) for row in response.data or []]

    def update_log(
        self, log_id: UUID, user_id: UUID, columns: dict[str, object]
    ) -> WeightLog | None:
        """Update a log owned by the user."""
        payload = {
            key: value.isoformat() if isinstance(value, date) else value
            for key, value in columns.items()
        }
        request = self.client.table("weight_logs")
        if payload:
            query = request.update(payload)
        else:
            query = request.select("*")
        response = query.eq("id", str(log_id)).eq("user_id", str(user_id)).execute()
        if not response.data:
            return None
        return _parse_log(response.data[0])

    def delete_log(self, log_id: UUID, user_id: UUID) -> bool:
        """Delete a log owned by the user."""
        response = (
            self.client.table("weight_logs")
            .delete()
            .eq("id", str(log_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)


def _parse_log(row: dict[str, object]) -> WeightLog:
    created_raw = row.get("created_at")
    return WeightLog(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        date=date.fromisoformat(str(row["date"])),
        weight=float(row.get("weight") or 0.0),
        notes=row.get("notes"),
        created_at=(
            datetime.fromisoformat(created_raw)
            if isinstance(created_raw, str) and created_raw
            else None
        ),
    )
