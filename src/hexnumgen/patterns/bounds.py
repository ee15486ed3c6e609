"""Axis-aligned screen bounds of a drawn pattern."""

from typing import Iterable

import numpy as np

from hexnumgen.patterns.hex_math import Coord


class Bounds:
    """Bounding box of pattern points in doubled-width screen space.

    Instances are immutable; ``extended`` returns a new box.
    """

    __slots__ = ('_mins', '_maxs')

    def __init__(self, mins: np.ndarray, maxs: np.ndarray):
        self._mins = mins
        self._maxs = maxs
        self._mins.setflags(write=False)
        self._maxs.setflags(write=False)

    @classmethod
    def of(cls, points: Iterable[Coord]) -> 'Bounds':
        pixels = np.array([point.pixel() for point in points], dtype=np.int64)
        if pixels.size == 0:
            raise ValueError("Bounds require at least one point")
        return cls(pixels.min(axis=0), pixels.max(axis=0))

    def extended(self, point: Coord) -> 'Bounds':
        pixel = np.array(point.pixel(), dtype=np.int64)
        if np.all(pixel >= self._mins) and np.all(pixel <= self._maxs):
            return self
        return Bounds(np.minimum(self._mins, pixel), np.maximum(self._maxs, pixel))

    @property
    def width(self) -> int:
        return int(self._maxs[0] - self._mins[0])

    @property
    def height(self) -> int:
        return int(self._maxs[1] - self._mins[1])

    def quasi_area(self) -> int:
        """Compactness score; smaller is more compact."""
        return int(np.prod(self._maxs - self._mins + 1))

    def is_better_than(self, other: 'Bounds') -> bool:
        """True when this box is at least as compact as ``other``."""
        return self.quasi_area() <= other.quasi_area()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bounds):
            return NotImplemented
        return bool(np.array_equal(self._mins, other._mins) and np.array_equal(self._maxs, other._maxs))

    def __hash__(self) -> int:
        return hash((self._mins.tobytes(), self._maxs.tobytes()))

    def __repr__(self) -> str:
        return f"Bounds(mins={self._mins.tolist()}, maxs={self._maxs.tolist()})"
