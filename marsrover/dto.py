"""Request and response shapes exchanged over the HTTP API."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from marsrover.common import Position


def _lookup(data: dict[str, Any], name: str) -> Any:
    """Find a key exactly, falling back to a case-insensitive match."""
    if name in data:
        return data[name]
    folded = name.casefold()
    for key, value in data.items():
        if isinstance(key, str) and key.casefold() == folded:
            return value
    return None


def _as_object(value: Any, name: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{name}: expected an object")
    return value


def _as_list(value: Any, name: str) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{name}: expected an array")
    return value


def _as_int(value: Any, name: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name}: expected an integer")
    return value


def _as_str(value: Any, name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{name}: expected a string")
    return value


def _as_bool(value: Any, name: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"{name}: expected a boolean")
    return value


@dataclass
class PlatformDimensions:
    width: int = 0
    height: int = 0


@dataclass
class RoverInitialization:
    initial_position: Position = field(default_factory=lambda: Position(0, 0))
    direction: str = ""


@dataclass
class CreateMissionControlRequest:
    username: str = ""
    platform: PlatformDimensions = field(default_factory=PlatformDimensions)
    rovers: list[RoverInitialization] = field(default_factory=list)
    allow_wrap_around: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> CreateMissionControlRequest:
        """Build a request from decoded JSON; raises ValueError on bad types."""
        data = _as_object(data, "request")
        platform = _as_object(_lookup(data, "platform"), "platform")
        rovers = []
        for item in _as_list(_lookup(data, "rovers"), "rovers"):
            item = _as_object(item, "rovers")
            pos = _as_object(_lookup(item, "initial_position"), "initial_position")
            rovers.append(
                RoverInitialization(
                    initial_position=Position(
                        _as_int(_lookup(pos, "x"), "x"),
                        _as_int(_lookup(pos, "y"), "y"),
                    ),
                    direction=_as_str(_lookup(item, "direction"), "direction"),
                )
            )
        return cls(
            username=_as_str(_lookup(data, "username"), "username"),
            platform=PlatformDimensions(
                width=_as_int(_lookup(platform, "width"), "width"),
                height=_as_int(_lookup(platform, "height"), "height"),
            ),
            rovers=rovers,
            allow_wrap_around=_as_bool(_lookup(data, "allow_wrap_around"), "allow_wrap_around"),
        )


@dataclass
class GetMissionControlRequest:
    username: str = ""


@dataclass
class HealthCheckResponse:
    status: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class MissionControlResponse:
    uuid: str


@dataclass
class PositionResponse:
    x: int
    y: int


@dataclass
class PlatformResponse:
    width: int
    height: int


@dataclass
class RoverResponse:
    uuid: str
    position: PositionResponse
    direction: str


@dataclass
class GetMissionControlResponse:
    message: str
    mission_control: MissionControlResponse
    platform: PlatformResponse
    rovers: list[RoverResponse] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form; ``rovers`` stays null when unset."""
        return asdict(self)


@dataclass
class RoverCommand:
    uuid: str = ""
    commands: str = ""


@dataclass
class MoveRoversRequest:
    username: str = ""
    rovers: list[RoverCommand] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> MoveRoversRequest:
        """Build a request from decoded JSON; raises ValueError on bad types."""
        data = _as_object(data, "request")
        rovers = []
        for item in _as_list(_lookup(data, "rovers"), "rovers"):
            item = _as_object(item, "rovers")
            rovers.append(
                RoverCommand(
                    uuid=_as_str(_lookup(item, "uuid"), "uuid"),
                    commands=_as_str(_lookup(item, "commands"), "commands"),
                )
            )
        return cls(username=_as_str(_lookup(data, "username"), "username"), rovers=rovers)