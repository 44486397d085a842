"""Domain models for users and their allowances."""

from dataclasses import dataclass
from uuid import UUID

DEFAULT_DAILY_SYN_ALLOWANCE = 15


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: UUID
    name: str
    email: str | None


@dataclass(frozen=True)
class UserProfile:
    """Weight goals and daily allowances for a user."""

    id: UUID
    user_id: UUID
    starting_weight: float
    current_weight: float
    target_weight: float
    height: float | None
    daily_syn_allowance: int
    healthy_extra_a_allowance: int
    healthy_extra_b_allowance: int
    healthy_extra_c_allowance: int
