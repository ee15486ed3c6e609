"""Hex lattice geometry for pattern drawing.

Coordinates are axial ``(q, r)`` with ``r`` growing downwards on screen.
Directions are listed clockwise starting from EAST, so turning by an angle
is a rotation of the direction index.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Direction(Enum):
    """The six lattice directions, clockwise from EAST."""
    EAST = (0, (1, 0))
    SOUTH_EAST = (1, (0, 1))
    SOUTH_WEST = (2, (-1, 1))
    WEST = (3, (-1, 0))
    NORTH_WEST = (4, (0, -1))
    NORTH_EAST = (5, (1, -1))

    def __init__(self, index: int, offset: Tuple[int, int]):
        self.index = index
        self.offset = offset

    def turned(self, angle: 'Angle') -> 'Direction':
        """Direction after turning clockwise by ``angle``."""
        return _DIRECTIONS_BY_INDEX[(self.index + angle.steps) % 6]


_DIRECTIONS_BY_INDEX = {direction.index: direction for direction in Direction}


class Angle(Enum):
    """Turn between two consecutive segments of a pattern.

    Iteration order is fixed: ``w e d s a q``.
    """
    FORWARD = ('w', 0)
    RIGHT = ('e', 1)
    BACK_RIGHT = ('d', 2)
    BACK = ('s', 3)
    BACK_LEFT = ('a', 4)
    LEFT = ('q', 5)

    def __init__(self, char: str, steps: int):
        self.char = char
        self.steps = steps

    @classmethod
    def from_char(cls, char: str) -> 'Angle':
        """Parse a single angle character."""
        for angle in cls:
            if angle.char == char:
                return angle
        raise ValueError(f"Unknown angle character: {char!r}")

    def __str__(self) -> str:
        return self.char


@dataclass(frozen=True)
class Coord:
    """Axial lattice coordinate."""
    q: int
    r: int

    @property
    def s(self) -> int:
        return -self.q - self.r

    def __add__(self, direction: Direction) -> 'Coord':
        dq, dr = direction.offset
        return Coord(self.q + dq, self.r + dr)

    def pixel(self) -> Tuple[int, int]:
        """Doubled-width screen position ``(2q + r, r)``."""
        return (2 * self.q + self.r, self.r)


ORIGIN = Coord(0, 0)
