"""hexnumgen: shortest hex patterns for exact numbers."""

from hexnumgen.api import generate_number_pattern
from hexnumgen.errors import IllegalMoveError
from hexnumgen.numgen import AStarPathGenerator
from hexnumgen.patterns import Angle, Bounds, Direction, Path

__version__ = "0.1.0"

__all__ = [
    'generate_number_pattern',
    'IllegalMoveError',
    'AStarPathGenerator',
    'Angle',
    'Bounds',
    'Direction',
    'Path'
]
