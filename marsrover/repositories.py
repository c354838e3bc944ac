"""Repositories that keep everything in process memory."""

from __future__ import annotations

from marsrover.domain import MissionControl, Platform, Rover, User
from marsrover.ports import (
    MissionControlRepository,
    PlatformRepository,
    RoverRepository,
    UserRepository,
)


class NotFoundError(LookupError):
    """Raised when a repository holds nothing under the requested key."""


class InMemoryMissionControlRepository(MissionControlRepository):
    """Mission controls stored under their owner's identifier."""

    def __init__(self) -> None:
        self._data: dict[str, MissionControl] = {}

    def save(self, user: User, mission_control: MissionControl) -> None:
        self._data[user.uuid] = mission_control

    def get_by_user(self, user: User) -> MissionControl:
        return self.get_by_uuid(user.uuid)

    def get_by_uuid(self, uuid: str) -> MissionControl:
        try:
            return self._data[uuid]
        except KeyError:
            raise NotFoundError("mission control not found") from None

    def list(self) -> list[MissionControl]:
        return [*self._data.values()]


class InMemoryPlatformRepository(PlatformRepository):
    """Platforms stored under their own identifier."""

    def __init__(self) -> None:
        self._platforms: dict[str, Platform] = {}

    def save(self, platform: Platform) -> None:
        self._platforms[platform.uuid] = platform

    def get_by_uuid(self, uuid: str) -> Platform:
        try:
            return self._platforms[uuid]
        except KeyError:
            raise NotFoundError("platform not found") from None

    def list(self) -> list[Platform]:
        return [*self._platforms.values()]


class InMemoryRoverRepository(RoverRepository):
    """Rovers stored under their own identifier."""

    def __init__(self) -> None:
        self._rovers: dict[str, Rover] = {}

    def save(self, rover: Rover) -> None:
        self._rovers[rover.uuid] = rover

    def get_by_uuid(self, uuid: str) -> Rover:
        try:
            return self._rovers[uuid]
        except KeyError:
            raise NotFoundError("rover not found") from None

    def list(self) -> list[Rover]:
        return [*self._rovers.values()]


class InMemoryUserRepository(UserRepository):
    """Users stored under their own identifier."""

    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    def save(self, user: User) -> None:
        self._users[user.uuid] = user

    def get_by_uuid(self, uuid: str) -> User:
        try:
            return self._users[uuid]
        except KeyError:
            raise NotFoundError("user not found") from None

    def get_by_username(self, username: str) -> User:
        found = next((u for u in self._users.values() if u.username == username), None)
        if found is None:
            raise NotFoundError("user not found")
        return found

    def list(self) -> list[User]:
        return [*self._users.values()]