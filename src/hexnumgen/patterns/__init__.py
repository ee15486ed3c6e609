"""Numerical reflection patterns on the hex lattice."""

from .hex_math import Angle, Coord, Direction
from .bounds import Bounds
from .path import Path

__all__ = [
    'Angle',
    'Coord',
    'Direction',
    'Bounds',
    'Path'
]
