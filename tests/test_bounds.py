"""Tests for pattern bounds."""

import pytest

from hexnumgen.patterns.bounds import Bounds
from hexnumgen.patterns.hex_math import Coord


class TestBounds:
    """Test bounds construction and compactness."""

    def test_single_point(self):
        bounds = Bounds.of([Coord(0, 0)])

        assert bounds.width == 0
        assert bounds.height == 0
        assert bounds.quasi_area() == 1
        assert isinstance(bounds.quasi_area(), int)

    def test_empty_points(self):
        with pytest.raises(ValueError):
            Bounds.of([])

    def test_extended_grows(self):
        bounds = Bounds.of([Coord(0, 0)])
        grown = bounds.extended(Coord(1, 0))

        assert grown.width == 2
        assert grown.height == 0
        assert grown.quasi_area() == 3
        # original untouched
        assert bounds.quasi_area() == 1

    def test_extended_inside_returns_same(self):
        bounds = Bounds.of([Coord(0, 0), Coord(1, 1)])

        assert bounds.extended(Coord(1, 0)) is bounds

    def test_multiple_points(self):
        bounds = Bounds.of([Coord(0, 0), Coord(1, 0), Coord(1, -1), Coord(0, -1)])

        # pixels (0, 0), (2, 0), (1, -1), (-1, -1)
        assert bounds.width == 3
        assert bounds.height == 1
        assert bounds.quasi_area() == 8

    def test_is_better_than(self):
        small = Bounds.of([Coord(0, 0)])
        large = Bounds.of([Coord(0, 0), Coord(2, 2)])

        assert small.is_better_than(large)
        assert not large.is_better_than(small)
        assert small.is_better_than(Bounds.of([Coord(3, 3)]))

    def test_equality(self):
        assert Bounds.of([Coord(0, 0), Coord(1, 0)]) == Bounds.of([Coord(1, 0), Coord(0, 0)])
        assert Bounds.of([Coord(0, 0)]) != Bounds.of([Coord(1, 0)])
        assert hash(Bounds.of([Coord(0, 0)])) == hash(Bounds.of([Coord(0, 0)]))

    def test_immutable_arrays(self):
        bounds = Bounds.of([Coord(0, 0), Coord(1, 0)])

        with pytest.raises(ValueError):
            bounds._mins[0] = 5
