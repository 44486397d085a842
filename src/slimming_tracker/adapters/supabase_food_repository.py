"""Supabase implementation for the food catalog."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from uuid import UUID

from supabase import Client

from slimming_tracker.domain.foods import PER_100G, PER_SERVING, Food, FoodFilters
from slimming_tracker.services.foods import FoodRepository


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase-backed repository for catalog foods."""

    client: Client

    def create_food(self, payload: dict[str, object], created_by: UUID | None) -> Food:
        """Create a food and return it."""
        row = {"basis": PER_SERVING, **payload}
        row["created_by"] = str(created_by) if created_by else None
        response = self.client.table("foods").insert(row).execute()
        if not response.data:
            raise RuntimeError("Failed to create food")
        return parse_food(response.data[0])

    def get_food(self, food_id: UUID) -> Food | None:
        """Return a food by id, if present."""
        response = (
            self.client.table("foods")
            .select("*")
            .eq("id", str(food_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_food(response.data[0])

    def list_foods(self, limit: int, offset: int) -> list[Food]:
        """Return foods ordered by name."""
        response = (
            self.client.table("foods")
            .select("*")
            .order("name")
            .range(offset, offset + limit - 1)
            .execute()
        )
        return [parse_food(row) for row in response.data or []]

    def search_foods(self, query: str, filters: FoodFilters, limit: int) -> list[Food]:
        """Search foods by name with optional filters."""
        request = self.client.table("foods").select("*").ilike("name", f"%{query}%")
        if filters.category:
            request = request.eq("category", filters.category)
        if filters.is_free_food is not None:
            request = request.eq("is_free_food", filters.is_free_food)
        if filters.is_speed_food is not None:
            request = request.eq("is_speed_food", filters.is_speed_food)
        response = request.order("name").limit(limit).execute()
        return [parse_food(row) for row in response.data or []]

    def find_by_barcode(self, barcode: str) -> Food | None:
        """Return the food saved for a barcode, if any."""
        response = (
            self.client.table("foods")
            .select("*")
            .eq("barcode", barcode)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_food(response.data[0])

    def list_recent_foods(self, days: int, limit: int) -> list[Food]:
        """Return foods created since ``days`` days ago."""
        since = datetime.now(tz=UTC) - timedelta(days=days)
        response = (
            self.client.table("foods")
            .select("*")
            .gte("created_at", since.isoformat())
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [parse_food(row) for row in response.data or []]

    def update_syn_value(self, food_id: UUID, syn_value: float) -> None:
        """Store a per-serving syn value."""
        self.client.table("foods").update(
            {"syn_value": syn_value, "basis": PER_SERVING}
        ).eq("id", str(food_id)).execute()

    def delete_food(self, food_id: UUID, created_by: UUID | None) -> bool:
        """Delete a food; with ``created_by`` only the creator's rows match."""
        request = self.client.table("foods").delete().eq("id", str(food_id))
        if created_by is not None:
            request = request.eq("created_by", str(created_by))
        response = request.execute()
        return bool(response.data)

    def count_foods(self) -> int:
        """Return the number of catalog rows."""
        response = self.client.table("foods").select("id", count="exact").execute()
        if response.count is not None:
            return int(response.count)
        return len(response.data or [])


def parse_food(row: dict[str, object]) -> Food:
    """Parse a foods row into a domain model."""
    created_raw = row.get("created_at")
    created_by = row.get("created_by")
    return Food(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        syn_value=float(row.get("syn_value") or 0.0),
        is_free_food=bool(row.get("is_free_food")),
        is_speed_food=bool(row.get("is_speed_food")),
        healthy_extra_type=row.get("healthy_extra_type"),
        portion_size=float(row.get("portion_size") or 100.0),
        portion_unit=str(row.get("portion_unit") or "g"),
        category=str(row.get("category") or "general"),
        barcode=row.get("barcode"),
        basis=str(row.get("basis") or PER_100G),
        created_by=UUID(str(created_by)) if created_by else None,
        created_at=(
            datetime.fromisoformat(created_raw)
            if isinstance(created_raw, str) and created_raw
            else None
        ),
    )
