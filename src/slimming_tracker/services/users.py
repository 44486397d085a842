"""User and profile business logic."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from slimming_tracker.domain.models import UserProfile, UserRecord

DEFAULT_USER_NAME = "Default User"

# API field name -> user_profiles column. Unknown keys are ignored.
PROFILE_FIELDS = {
    "startingWeight": "starting_weight",
    "currentWeight": "current_weight",
    "targetWeight": "target_weight",
    "height": "height",
    "dailySynAllowance": "daily_syn_allowance",
    "healthyExtraAAllowance": "healthy_extra_a_allowance",
    "healthyExtraBAllowance": "healthy_extra_b_allowance",
    "healthyExtraCAllowance": "healthy_extra_c_allowance",
}


class UserRepository(Protocol):
    """Persistence interface for users and their profiles."""

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return a user by id, if present."""

    def create_user(self, user_id: UUID, name: str, email: str | None) -> UserRecord:
        """Create and return a new user record."""

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the profile for a user, if present."""

    def create_profile(self, user_id: UUID) -> UserProfile:
        """Create a profile with default allowances."""

    def update_profile(self, user_id: UUID, columns: dict[str, object]) -> UserProfile:
        """Update profile columns and return the profile."""


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository

    def ensure_user(self, user_id: UUID) -> tuple[UserRecord, UserProfile]:
        """Ensure the user and profile rows exist and return them."""
        user = self.repository.get_user(user_id)
        if user is None:
            user = self.repository.create_user(user_id, DEFAULT_USER_NAME, None)
        profile = self.repository.get_profile(user_id)
        if profile is None:
            profile = self.repository.create_profile(user_id)
        return user, profile

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the user's profile without creating it."""
        return self.repository.get_profile(user_id)

    def update_profile(self, user_id: UUID, changes: dict[str, object]) -> UserProfile:
        """Apply camelCase profile changes through the fixed field map."""
        self.ensure_user(user_id)
        columns = {
            PROFILE_FIELDS[key]: value
            for key, value in changes.items()
            if key in PROFILE_FIELDS
        }
        if not columns:
            _, profile = self.ensure_user(user_id)
            return profile
        return self.repository.update_profile(user_id, columns)
