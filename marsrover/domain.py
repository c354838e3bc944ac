"""Core domain: platforms, rovers, mission control and users."""

from __future__ import annotations

import uuid as _uuid
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field

from marsrover.common import Command, Direction, Position


def _new_uuid() -> str:
    return str(_uuid.uuid4())


class DomainError(Exception):
    """Raised when a domain rule is broken."""


class RoverControl(ABC):
    """What mission control needs from a rover."""

    uuid: str
    position: Position
    direction: Direction

    @abstractmethod
    def move(self) -> None:
        """Advance one cell in the current heading, if allowed."""

    @abstractmethod
    def turn_left(self) -> None:
        """Turn a quarter to the left."""

    @abstractmethod
    def turn_right(self) -> None:
        """Turn a quarter to the right."""

    @abstractmethod
    def set_obstacles(self, obstacles: list[Position]) -> None:
        """Replace the obstacles on the rover's platform."""

    @abstractmethod
    def execute_command(self, command: Command | str) -> None:
        """Carry out a single command."""


@dataclass(eq=False)
class Platform:
    """The surface the rovers move on.

    With ``allow_wrap_around`` a rover leaving one edge reappears on the
    opposite one; without it the rover stays where it is.
    """

    width: int
    height: int
    obstacles: list[Position] = field(default_factory=list)
    allow_wrap_around: bool = False
    uuid: str = field(default_factory=_new_uuid)

    def is_valid_position(self, x: int, y: int) -> bool:
        """Whether (x, y) lies inside the platform and is free of obstacles."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return False
        return Position(x, y) not in self.obstacles

    def is_position_occupied(self, position: Position, rovers: Iterable[RoverControl]) -> bool:
        """Whether any of the given rovers stands on ``position``."""
        return any(rover.position == position for rover in rovers)


_STEP = {
    Direction.NORTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, -1),
    Direction.WEST: (-1, 0),
}


@dataclass(eq=False)
class Rover(RoverControl):
    """A rover with a position and heading on a platform."""

    position: Position
    direction: Direction
    platform: Platform | None = None
    uuid: str = field(default_factory=_new_uuid)

    def __post_init__(self) -> None:
        try:
            self.direction = Direction(self.direction)
        except ValueError:
            raise DomainError("invalid direction") from None

    def move(self) -> None:
        platform = self.platform
        if platform is None:
            return
        dx, dy = _STEP[self.direction]
        next_x, next_y = self.position.x + dx, self.position.y + dy

        if platform.allow_wrap_around:
            if next_x >= platform.width:
                next_x = 0
            elif next_x < 0:
                next_x = platform.width - 1
            if next_y >= platform.height:
                next_y = 0
            elif next_y < 0:
                next_y = platform.height - 1
        elif not (0 <= next_x < platform.width and 0 <= next_y < platform.height):
            return

        if not platform.is_valid_position(next_x, next_y):
            return
        self.position = Position(next_x, next_y)

    def turn_left(self) -> None:
        self.direction = self.direction.left()

    def turn_right(self) -> None:
        self.direction = self.direction.right()

    def set_obstacles(self, obstacles: list[Position]) -> None:
        if self.platform is None:
            raise DomainError("rover has no platform")
        self.platform.obstacles = obstacles

    def execute_command(self, command: Command | str) -> None:
        try:
            command = Command(command)
        except ValueError:
            raise DomainError("invalid command") from None
        if command is Command.MOVE:
            self.move()
        elif command is Command.LEFT:
            self.turn_left()
        else:
            self.turn_right()


class RoverFactory:
    """Creates rovers, placing them on the first free cell from the requested one."""

    def new_rover_control(
        self,
        x: int,
        y: int,
        direction: Direction | str,
        platform: Platform,
        rovers: Iterable[RoverControl],
    ) -> RoverControl:
        rovers = list(rovers or ())
        position = Position(x, y)
        while platform.is_position_occupied(position, rovers):
            if position.x < platform.width - 1:
                position = Position(position.x + 1, position.y)
            elif position.y < platform.height - 1:
                position = Position(0, position.y + 1)
            else:
                raise DomainError("no available positions for the rover")
        return Rover(position, direction, platform)


@dataclass(eq=False)
class MissionControl:
    """A platform together with the rovers deployed on it."""

    platform: Platform
    rovers: list[RoverControl] = field(default_factory=list)
    uuid: str = field(default_factory=_new_uuid)

    def add_rover(self, rover: RoverControl) -> None:
        """Deploy a rover, refusing a cell that another rover already holds."""
        if any(existing.position == rover.position for existing in self.rovers):
            raise DomainError("position already occupied")
        self.rovers.append(rover)

    def _rover_at(self, index: int) -> RoverControl:
        if not 0 <= index < len(self.rovers):
            raise DomainError("rover index out of bounds")
        return self.rovers[index]

    def move_rover(self, index: int) -> None:
        """Move the rover at ``index`` one cell forward."""
        self._rover_at(index).move()

    def command_rover(self, index: int, command: Command | str) -> None:
        """Send a command to the rover at ``index``."""
        self._rover_at(index).execute_command(command)


@dataclass
class User:
    """An operator owning a mission control."""

    username: str
    uuid: str = field(default_factory=_new_uuid)