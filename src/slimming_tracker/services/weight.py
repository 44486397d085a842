"""Weight log service."""

from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from slimming_tracker.domain.weight import WeightLog


class WeightRepository(Protocol):
    """Persistence interface for weight logs."""

    def create_log(
        self, user_id: UUID, logged_on: date, weight: float, notes: str | None
    ) -> WeightLog:
        """Create a weight log and return it."""

    def list_logs(self, user_id: UUID) -> list[WeightLog]:
        """Return a user's logs, newest date first."""

    def update_log(
        self, log_id: UUID, user_id: UUID, columns: dict[str, object]
    ) -> WeightLog | None:
        """Update a user's log and return it, if it exists."""

    def delete_log(self, log_id: UUID, user_id: UUID) -> bool:
        """Delete a user's log."""


@dataclass
class WeightService:
    """Service for recording weigh-ins."""

    repository: WeightRepository

    def list_logs(self, user_id: UUID) -> list[WeightLog]:
        """Return the user's weight history."""
        return self.repository.list_logs(user_id)

    def record(
        self, user_id: UUID, logged_on: date, weight: float, notes: str | None = None
    ) -> WeightLog:
        """Record a weigh-in."""
        return self.repository.create_log(user_id, logged_on, weight, notes)

    def update(
        self, user_id: UUID, log_id: UUID, changes: dict[str, object]
    ) -> WeightLog | None:
        """Update date, weight or notes of a weigh-in; null notes clear them."""
        columns = {
            key: value
            for key, value in changes.items()
            if key == "notes" or (key in {"date", "weight"} and value is not None)
        }
        return self.repository.update_log(log_id, user_id, columns)

    def delete(self, user_id: UUID, log_id: UUID) -> bool:
        """Delete a weigh-in."""
        return self.repository.delete_log(log_id, user_id)
