"""Interfaces between the application core and the outside world."""

from __future__ import annotations

from abc import ABC, abstractmethod

from marsrover.domain import MissionControl, Platform, Rover, User
from marsrover.dto import (
    CreateMissionControlRequest,
    GetMissionControlRequest,
    GetMissionControlResponse,
    MoveRoversRequest,
)


class CreateMissionControlPort(ABC):
    """Handles requests to set up a new mission control."""

    @abstractmethod
    def execute(self, request: CreateMissionControlRequest) -> GetMissionControlResponse:
        """Create a mission control and describe it."""


class GetMissionControlPort(ABC):
    """Handles requests for a user's mission control."""

    @abstractmethod
    def execute(self, request: GetMissionControlRequest) -> GetMissionControlResponse:
        """Describe the mission control of the requested user."""


class MoveRoversPort(ABC):
    """Handles requests to drive rovers."""

    @abstractmethod
    def execute(self, request: MoveRoversRequest) -> GetMissionControlResponse:
        """Run the commands and describe the resulting mission control."""


class MissionControlRepository(ABC):
    """Storage for mission controls, keyed by their owner."""

    @abstractmethod
    def save(self, user: User, mission_control: MissionControl) -> None:
        """Store the mission control for ``user``."""

    @abstractmethod
    def get_by_user(self, user: User) -> MissionControl:
        """Return the mission control owned by ``user``."""

    @abstractmethod
    def get_by_uuid(self, uuid: str) -> MissionControl:
        """Return the mission control stored under ``uuid``."""

    @abstractmethod
    def list(self) -> list[MissionControl]:
        """Return every stored mission control."""


class PlatformRepository(ABC):
    """Storage for platforms."""

    @abstractmethod
    def save(self, platform: Platform) -> None:
        """Store a platform."""

    @abstractmethod
    def get_by_uuid(self, uuid: str) -> Platform:
        """Return the platform with this identifier."""

    @abstractmethod
    def list(self) -> list[Platform]:
        """Return every stored platform."""


class RoverRepository(ABC):
    """Storage for rovers."""

    @abstractmethod
    def save(self, rover: Rover) -> None:
        """Store a rover."""

    @abstractmethod
    def get_by_uuid(self, uuid: str) -> Rover:
        """Return the rover with this identifier."""

    @abstractmethod
    def list(self) -> list[Rover]:
        """Return every stored rover."""


class UserRepository(ABC):
    """Storage for users."""

    @abstractmethod
    def save(self, user: User) -> None:
        """Store a user."""

    @abstractmethod
    def get_by_uuid(self, uuid: str) -> User:
        """Return the user with this identifier."""

    @abstractmethod
    def get_by_username(self, username: str) -> User:
        """Return the user with this name."""

    @abstractmethod
    def list(self) -> list[User]:
        """Return every stored user."""