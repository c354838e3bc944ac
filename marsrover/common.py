"""Shared value types: commands, compass directions, positions and UUID sources."""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class Command(str, Enum):
    """A single instruction understood by a rover."""

    MOVE = "M"
    LEFT = "L"
    RIGHT = "R"


class Direction(str, Enum):
    """A compass heading."""

    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"

    def left(self) -> Direction:
        """Return the heading after a quarter turn to the left."""
        return _LEFT_OF[self]

    def right(self) -> Direction:
        """Return the heading after a quarter turn to the right."""
        return _RIGHT_OF[self]


_LEFT_OF = {
    Direction.NORTH: Direction.WEST,
    Direction.WEST: Direction.SOUTH,
    Direction.SOUTH: Direction.EAST,
    Direction.EAST: Direction.NORTH,
}

_RIGHT_OF = {
    Direction.NORTH: Direction.EAST,
    Direction.EAST: Direction.SOUTH,
    Direction.SOUTH: Direction.WEST,
    Direction.WEST: Direction.NORTH,
}


@dataclass(frozen=True)
class Position:
    """A point on the platform grid."""

    x: int
    y: int


class UUIDGenerator(ABC):
    """Source of identifiers for new entities."""

    @abstractmethod
    def generate(self) -> str:
        """Return a new identifier."""


class FixedUUIDGenerator(UUIDGenerator):
    """Generator that always hands out the same identifier."""

    def __init__(self, fixed_uuid: str) -> None:
        self.fixed_uuid = fixed_uuid

    def generate(self) -> str:
        return self.fixed_uuid


class RandomUUIDGenerator(UUIDGenerator):
    """Generator of random version 4 UUIDs."""

    def generate(self) -> str:
        return str(uuid.uuid4())