"""Domain models for weight tracking."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID


@dataclass(frozen=True)
class WeightLog:
    """A weigh-in on a given day."""

    id: UUID
    user_id: UUID
    date: date
    weight: float
    notes: str | None
    created_at: datetime | None
