"""Supabase-backed user and profile repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from slimming_tracker.domain.models import (
    DEFAULT_DAILY_SYN_ALLOWANCE,
    UserProfile,
    UserRecord,
)
from slimming_tracker.services.users import UserRepository


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for users and profiles."""

    client: Client

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user row, if present."""
        response = (
            self.client.table("users")
            .select("id, name, email")
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def create_user(self, user_id: UUID, name: str, email: str | None) -> UserRecord:
        """Create a user row and return it."""
        response = (
            self.client.table("users")
            .insert({"id": str(user_id), "name": name, "email": email})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return _parse_user(response.data[0])

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the profile row for a user, if present."""
        response = (
            self.client.table("user_profiles")
            .select("*")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_profile(response.data[0])
        return None

    def create_profile(self, user_id: UUID) -> UserProfile:
        """Create the default profile row for a user."""
        response = (
            self.client.table("user_profiles")
            .insert(
                {
                    "user_id": str(user_id),
                    "starting_weight": 0,
                    "current_weight": 0,
                    "target_weight": 0,
                    "daily_syn_allowance": DEFAULT_DAILY_SYN_ALLOWANCE,
                    "healthy_extra_a_allowance": 1,
                    "healthy_extra_b_allowance": 1,
                    "healthy_extra_c_allowance": 1,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create user profile")
        return _parse_profile(response.data[0])

    def update_profile(self, user_id: UUID, columns: dict[str, object]) -> UserProfile:
        """Update profile columns and return the profile."""
        response = (
            self.client.table("user_profiles")
            .update(columns)
            .eq("user_id", str(user_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update user profile")
        return _parse_profile(response.data[0])


def _parse_user(row: dict[str, object]) -> UserRecord:
    return UserRecord(
        id=UUID(str(row["id"])),
        name=str(row.get("name") or ""),
        email=row.get("email"),
    )


def _parse_profile(row: dict[str, object]) -> UserProfile:
    height = row.get("height")
    return UserProfile(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        starting_weight=float(row.get("starting_weight") or 0.0),
        current_weight=float(row.get("current_weight") or 0.0),
        target_weight=float(row.get("target_weight") or 0.0),
        height=float(height) if height is not None else None,
        daily_syn_allowance=int(
            row.get("daily_syn_allowance") or DEFAULT_DAILY_SYN_ALLOWANCE
        ),
        healthy_extra_a_allowance=int(row.get("healthy_extra_a_allowance") or 1),
        healthy_extra_b_allowance=int(row.get("healthy_extra_b_allowance") or 1),
        healthy_extra_c_allowance=int(row.get("healthy_extra_c_allowance") or 1),
    )
