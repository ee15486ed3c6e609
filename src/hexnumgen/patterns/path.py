"""Numerical reflection patterns.

A pattern starts with a sign prefix (``aqaa`` for positive numbers, ``dedd``
for negative ones) drawn from the origin facing EAST. Every following angle
is one move and changes the unsigned magnitude:

    w: +1    q: +5    e: +10    a: *2    d: /2

A move may never redraw a segment the pattern already contains, and ``s``
(doubling straight back) is never allowed.
"""

from fractions import Fraction
from typing import Callable, Dict, FrozenSet, Optional, Tuple

from hexnumgen.errors import IllegalMoveError
from hexnumgen.patterns.bounds import Bounds
from hexnumgen.patterns.hex_math import Angle, Coord, Direction, ORIGIN

Segment = FrozenSet[Coord]

POSITIVE_PREFIX = 'aqaa'
NEGATIVE_PREFIX = 'dedd'
START_DIRECTION = Direction.EAST

_MAGNITUDE_EFFECTS: Dict[Angle, Callable[[Fraction], Fraction]] = {
    Angle.FORWARD: lambda m: m + 1,
    Angle.LEFT: lambda m: m + 5,
    Angle.RIGHT: lambda m: m + 10,
    Angle.BACK_LEFT: lambda m: m * 2,
    Angle.BACK_RIGHT: lambda m: m / 2,
}


class Path:
    """Immutable numerical reflection pattern.

    Use ``Path.zero`` to build the empty pattern for a sign and
    ``with_angle`` to extend it.
    """

    __slots__ = ('sign', 'magnitude', 'angles', 'direction', 'position', 'segments', 'bounds')

    def __init__(self, sign: int, magnitude: Fraction, angles: Tuple[Angle, ...],
                 direction: Direction, position: Coord,
                 segments: FrozenSet[Segment], bounds: Bounds):
        self.sign = sign
        self.magnitude = magnitude
        self.angles = angles
        self.direction = direction
        self.position = position
        self.segments = segments
        self.bounds = bounds

    @classmethod
    def zero(cls, sign: int) -> 'Path':
        """Empty pattern with the prefix for ``sign`` already drawn."""
        prefix = NEGATIVE_PREFIX if sign < 0 else POSITIVE_PREFIX
        direction = START_DIRECTION
        position = ORIGIN + direction
        segments = {frozenset((ORIGIN, position))}
        points = [ORIGIN, position]

        for char in prefix:
            direction = direction.turned(Angle.from_char(char))
            next_position = position + direction
            segments.add(frozenset((position, next_position)))
            points.append(next_position)
            position = next_position

        return cls(
            sign=-1 if sign < 0 else 1,
            magnitude=Fraction(0),
            angles=(),
            direction=direction,
            position=position,
            segments=frozenset(segments),
            bounds=Bounds.of(points),
        )

    @classmethod
    def from_signature(cls, signature: str) -> 'Path':
        """Rebuild a path from its full angle signature (prefix included)."""
        if signature.startswith(POSITIVE_PREFIX):
            path = cls.zero(1)
        elif signature.startswith(NEGATIVE_PREFIX):
            path = cls.zero(-1)
        else:
            raise ValueError(f"Not a numerical reflection signature: {signature!r}")

        for char in signature[len(POSITIVE_PREFIX):]:
            path = path.with_angle(Angle.from_char(char))
        return path

    @property
    def value(self) -> Fraction:
        return self.sign * self.magnitude

    @property
    def moves(self) -> int:
        return len(self.angles)

    def __len__(self) -> int:
        return len(self.angles)

    @property
    def start_direction(self) -> Direction:
        return START_DIRECTION

    @property
    def prefix(self) -> str:
        return NEGATIVE_PREFIX if self.sign < 0 else POSITIVE_PREFIX

    @property
    def signature(self) -> str:
        return self.prefix + ''.join(angle.char for angle in self.angles)

    def with_angle(self, angle: Angle) -> 'Path':
        """Return this path extended by ``angle``.

        Raises:
            IllegalMoveError: if the move doubles back or redraws a segment
        """
        effect = _MAGNITUDE_EFFECTS.get(angle)
        if effect is None:
            raise IllegalMoveError(f"{angle.name} is never a legal move")

        direction = self.direction.turned(angle)
        position = self.position + direction
        segment = frozenset((self.position, position))
        if segment in self.segments:
            raise IllegalMoveError(f"{angle.char} redraws segment at {self.position} -> {position}")

        return Path(
            sign=self.sign,
            magnitude=effect(self.magnitude),
            angles=self.angles + (angle,),
            direction=direction,
            position=position,
            segments=self.segments | {segment},
            bounds=self.bounds.extended(position),
        )

    def should_replace(self, best: Optional['Path']) -> bool:
        """Whether this path beats ``best`` (fewer moves, then more compact)."""
        if best is None:
            return True
        if self.moves != best.moves:
            return self.moves < best.moves
        return self.bounds.quasi_area() < best.bounds.quasi_area()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self.sign == other.sign and self.angles == other.angles

    def __hash__(self) -> int:
        return hash((self.sign, self.angles))

    def __repr__(self) -> str:
        return f"Path({self.signature!r}, value={self.value})"
