"""Structural contracts for the collaborators consumed by the search engine.

Any class matching these protocols can be searched; the hex pattern
implementation lives in ``hexnumgen.patterns``.
"""

from fractions import Fraction
from typing import Optional, Protocol


class BoundingShape(Protocol):
    """Geometric extent of a path."""

    def quasi_area(self) -> int:
        ...

    def is_better_than(self, other: 'BoundingShape') -> bool:
        """True when this shape is at least as good as ``other``."""
        ...


class SearchPath(Protocol):
    """Immutable move sequence with a rational value."""

    @property
    def value(self) -> Fraction:
        ...

    @property
    def moves(self) -> int:
        ...

    @property
    def bounds(self) -> BoundingShape:
        ...

    def with_angle(self, angle) -> 'SearchPath':
        """Extend by one move; raise ``IllegalMoveError`` if not allowed."""
        ...

    def should_replace(self, best: Optional['SearchPath']) -> bool:
        ...
