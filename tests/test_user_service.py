"""Tests for the user and profile service."""

from uuid import uuid4

from slimming_tracker.services.users import DEFAULT_USER_NAME, UserService
from tests.conftest import InMemoryUserRepository


def test_ensure_user_creates_user_and_profile_once(
    user_repository: InMemoryUserRepository,
) -> None:
    service = UserService(user_repository)
    user_id = uuid4()

    user, profile = service.ensure_user(user_id)
    again, same_profile = service.ensure_user(user_id)

    assert user.name == DEFAULT_USER_NAME
    assert again == user
    assert same_profile == profile
    assert profile.daily_syn_allowance == 15
    assert profile.healthy_extra_c_allowance == 1
    assert len(user_repository.users) == 1


def test_update_profile_maps_camel_case_fields(
    user_repository: InMemoryUserRepository,
) -> None:
    service = UserService(user_repository)
    user_id = uuid4()

    profile = service.update_profile(
        user_id,
        {
            "targetWeight": 70.5,
            "dailySynAllowance": 20,
            "healthyExtraCAllowance": 2,
            "passwordHash": "ignored",
            "user_id": "ignored",
        },
    )

    assert profile.target_weight == 70.5
    assert profile.daily_syn_allowance == 20
    assert profile.healthy_extra_c_allowance == 2
    assert profile.user_id == user_id


def test_update_profile_without_known_fields_returns_profile(
    user_repository: InMemoryUserRepository,
) -> None:
    service = UserService(user_repository)
    user_id = uuid4()

    profile = service.update_profile(user_id, {"nickname": "Sam"})

    assert profile.daily_syn_allowance == 15
    assert service.get_profile(user_id) == profile
