"""Stub path collaborators with a small, fully known value mapping.

Moves act on the unsigned magnitude:

    INCREMENT: +1    DOUBLE: *2    DECREMENT: -1    HALVE: /2

The first move from the empty path adds one on top of its own effect, so
INCREMENT starts at 2 and DOUBLE at 1. DECREMENT needs a magnitude of at
least 1, HALVE a non-zero magnitude, and no path grows beyond
``MAX_MOVES`` moves. The bounding shape is the peak magnitude visited.
"""

from enum import Enum
from fractions import Fraction
from typing import Iterator, List, Optional, Tuple

from hexnumgen.errors import IllegalMoveError


class StubMove(Enum):
    INCREMENT = 'I'
    DOUBLE = 'D'
    DECREMENT = 'M'
    HALVE = 'H'


STUB_MOVES = tuple(StubMove)


class PeakShape:
    """Shape whose only dimension is the largest magnitude reached."""

    def __init__(self, peak: Fraction):
        self.peak = peak

    def quasi_area(self) -> Fraction:
        return self.peak

    def is_better_than(self, other: 'PeakShape') -> bool:
        return self.peak <= other.peak


class StubPath:
    MAX_MOVES = 5

    def __init__(self, sign: int, magnitude: Fraction, history: Tuple[StubMove, ...], peak: Fraction):
        self.sign = sign
        self.magnitude = magnitude
        self.history = history
        self.bounds = PeakShape(peak)

    @classmethod
    def zero(cls, sign: int) -> 'StubPath':
        return cls(sign, Fraction(0), (), Fraction(0))

    @property
    def value(self) -> Fraction:
        return self.sign * self.magnitude

    @property
    def moves(self) -> int:
        return len(self.history)

    def with_angle(self, move: StubMove) -> 'StubPath':
        if self.moves >= self.MAX_MOVES:
            raise IllegalMoveError("path is full")

        m = self.magnitude
        if move is StubMove.INCREMENT:
            m = m + 1
        elif move is StubMove.DOUBLE:
            m = m * 2
        elif move is StubMove.DECREMENT:
            if m < 1:
                raise IllegalMoveError("cannot decrement below zero")
            m = m - 1
        elif move is StubMove.HALVE:
            if m == 0:
                raise IllegalMoveError("cannot halve zero")
            m = m / 2

        if not self.history:
            m += 1

        return type(self)(self.sign, m, self.history + (move,), max(self.bounds.peak, m))

    def should_replace(self, best: Optional['StubPath']) -> bool:
        if best is None:
            return True
        if self.moves != best.moves:
            return self.moves < best.moves
        return self.bounds.peak < best.bounds.peak

    def __repr__(self) -> str:
        return f"StubPath({''.join(move.value for move in self.history)!r}, value={self.value})"


def make_recording_path_type():
    """A fresh StubPath subclass that records every path it extends."""

    class RecordingStubPath(StubPath):
        extended: List[StubPath] = []

        def with_angle(self, move: StubMove) -> StubPath:
            if not self.extended or self.extended[-1] is not self:
                self.extended.append(self)
            return super().with_angle(move)

    return RecordingStubPath


def iter_paths(allow_fractions: bool = True, trim_above: Optional[Fraction] = None) -> Iterator[StubPath]:
    """Every path reachable from the positive root under the given constraints."""
    pending = [StubPath.zero(1)]
    while pending:
        path = pending.pop()
        yield path
        for move in STUB_MOVES:
            try:
                child = path.with_angle(move)
            except IllegalMoveError:
                continue
            if trim_above is not None and child.magnitude > trim_above:
                continue
            if not allow_fractions and child.magnitude.denominator != 1:
                continue
            pending.append(child)


def fewest_moves_to(target: Fraction, trim_larger: bool, allow_fractions: bool) -> Optional[int]:
    """Brute-force minimum move count to reach ``|target|``, or None."""
    magnitude = abs(Fraction(target))
    trim_above = magnitude if trim_larger else None
    lengths = [
        path.moves
        for path in iter_paths(allow_fractions, trim_above)
        if path.magnitude == magnitude
    ]
    return min(lengths, default=None)
