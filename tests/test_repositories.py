import pytest

from marsrover.common import Direction, Position
from marsrover.domain import MissionControl, Platform, Rover, User
from marsrover.repositories import (
    InMemoryMissionControlRepository,
    InMemoryPlatformRepository,
    InMemoryRoverRepository,
    InMemoryUserRepository,
    NotFoundError,
)


def test_mission_control_saved_under_user():
    repo = InMemoryMissionControlRepository()
    user = User("alice")
    mc = MissionControl(Platform(5, 5))
    repo.save(user, mc)
    assert repo.get_by_user(user) is mc
    assert repo.get_by_uuid(user.uuid) is mc
    assert repo.list() == [mc]


def test_mission_control_missing():
    repo = InMemoryMissionControlRepository()
    with pytest.raises(NotFoundError, match="mission control not found"):
        repo.get_by_user(User("bob"))


def test_mission_control_key_is_user_not_mission_uuid():
    repo = InMemoryMissionControlRepository()
    mc = MissionControl(Platform(5, 5), uuid="mc-1")
    repo.save(User("carol", uuid="user-1"), mc)
    with pytest.raises(NotFoundError):
        repo.get_by_uuid("mc-1")


def test_mission_control_replaced_for_same_user():
    repo = InMemoryMissionControlRepository()
    user = User("dave")
    first = MissionControl(Platform(5, 5))
    second = MissionControl(Platform(6, 6))
    repo.save(user, first)
    repo.save(user, second)
    assert repo.get_by_user(user) is second
    assert len(repo.list()) == 1


def test_platform_round_trip_and_list():
    repo = InMemoryPlatformRepository()
    a, b = Platform(3, 4), Platform(7, 8)
    repo.save(a)
    repo.save(b)
    assert repo.get_by_uuid(a.uuid) is a
    assert repo.get_by_uuid(b.uuid) is b
    assert {p.uuid for p in repo.list()} == {a.uuid, b.uuid}


def test_platform_missing():
    with pytest.raises(NotFoundError, match="platform not found"):
        InMemoryPlatformRepository().get_by_uuid("nope")


def test_empty_lists():
    assert InMemoryPlatformRepository().list() == []
    assert InMemoryRoverRepository().list() == []
    assert InMemoryUserRepository().list() == []
    assert InMemoryMissionControlRepository().list() == []


def test_rover_round_trip():
    repo = InMemoryRoverRepository()
    rover = Rover(Position(1, 2), Direction.NORTH, Platform(5, 5))
    repo.save(rover)
    assert repo.get_by_uuid(rover.uuid) is rover
    assert repo.list() == [rover]


def test_rover_missing():
    with pytest.raises(NotFoundError, match="rover not found"):
        InMemoryRoverRepository().get_by_uuid("rover-uuid-1")


def test_rover_saved_again_after_uuid_change():
    repo = InMemoryRoverRepository()
    rover = Rover(Position(0, 0), Direction.EAST, uuid="old")
    repo.save(rover)
    rover.uuid = "new"
    repo.save(rover)
    assert repo.get_by_uuid("new") is rover
    assert repo.get_by_uuid("old") is rover


def test_user_by_uuid_and_username():
    repo = InMemoryUserRepository()
    user = User("test_user", uuid="user-uuid")
    repo.save(user)
    assert repo.get_by_uuid("user-uuid") is user
    assert repo.get_by_username("test_user") is user
    assert repo.list() == [user]


def test_user_missing():
    repo = InMemoryUserRepository()
    repo.save(User("someone"))
    with pytest.raises(NotFoundError, match="user not found"):
        repo.get_by_username("nonexistent_user")
    with pytest.raises(NotFoundError, match="user not found"):
        repo.get_by_uuid("missing")


def test_not_found_is_lookup_error():
    with pytest.raises(LookupError):
        InMemoryUserRepository().get_by_username("x")