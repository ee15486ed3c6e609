"""A* search for the shortest pattern with an exact numeric value.

The frontier is ordered by an estimate of the total moves a path needs.
Every time an expansion produces an exact match, the best match in the
frontier is compared against the best solution so far; a better one
replaces it and the frontier is pruned of paths whose bounds can no longer
compete, so the search space only ever shrinks (branch and bound).
"""

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Any, Dict, Iterable, List, Optional, Sequence, Type, Union

from hexnumgen.errors import IllegalMoveError
from hexnumgen.numgen.heuristics import estimate_total_moves
from hexnumgen.numgen.protocols import SearchPath
from hexnumgen.patterns.hex_math import Angle
from hexnumgen.patterns.path import Path

logger = logging.getLogger(__name__)

Target = Union[int, Fraction, str]


@dataclass(order=True)
class QueuedPath:
    """Frontier entry; smallest ``(priority, sequence)`` pops first."""
    priority: int
    sequence: int  # insertion order, breaks priority ties FIFO
    path: SearchPath = field(compare=False)


@dataclass
class SearchStatistics:
    """Counters collected during a single search."""
    paths_expanded: int = 0
    paths_generated: int = 0
    illegal_moves: int = 0
    paths_filtered: int = 0
    paths_pruned: int = 0
    solutions_improved: int = 0
    max_frontier_size: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert statistics to dictionary."""
        return {
            'paths_expanded': self.paths_expanded,
            'paths_generated': self.paths_generated,
            'illegal_moves': self.illegal_moves,
            'paths_filtered': self.paths_filtered,
            'paths_pruned': self.paths_pruned,
            'solutions_improved': self.solutions_improved,
            'max_frontier_size': self.max_frontier_size,
        }


class AStarPathGenerator:
    """Finds the shortest, then most compact, path whose value is ``target``.

    A generator runs once: ``run`` consumes it.
    """

    def __init__(self, target: Target, trim_larger: bool, allow_fractions: bool,
                 path_type: Type = Path, angles: Optional[Sequence] = None):
        """Initialize the generator.

        Args:
            target: Exact value to reach
            trim_larger: Discard paths whose magnitude exceeds the target's
            allow_fractions: Keep paths with non-integer values
            path_type: Path class; must provide ``zero(sign)``
            angles: Moves to try from every path, in order. Defaults to every
                hex ``Angle``
        """
        target = Fraction(target)
        self.target = abs(target)
        self.sign = -1 if target < 0 else 1
        self.trim_larger = trim_larger
        self.allow_fractions = allow_fractions
        self.angles = tuple(angles) if angles is not None else tuple(Angle)

        self.smallest: Optional[SearchPath] = None
        self.frontier: List[QueuedPath] = []
        self.statistics = SearchStatistics()
        self._counter = itertools.count()
        self._consumed = False

        self._push_path(path_type.zero(self.sign))

        logger.info(f"A* generator initialized for target={target}, "
                    f"trim_larger={trim_larger}, allow_fractions={allow_fractions}")

    def run(self) -> Optional[SearchPath]:
        """Search until the frontier is exhausted.

        Returns:
            The best exact match, or None if the target is unreachable
        """
        if self._consumed:
            raise RuntimeError("A* generator has already been run")
        self._consumed = True

        if self.target == 0:
            return heapq.heappop(self.frontier).path

        if not self.allow_fractions and self.target.denominator != 1:
            logger.info(f"Target {self.sign * self.target} is not an integer and fractions are disabled")
            return None

        while self.frontier:
            if self._update_frontier():
                self._promote_best_match()

        if self.smallest is None:
            logger.info(f"No pattern found for {self.sign * self.target} "
                        f"after expanding {self.statistics.paths_expanded} paths")
        else:
            logger.info(f"Found {self.smallest!r} with {self.smallest.moves} moves "
                        f"after expanding {self.statistics.paths_expanded} paths")
        return self.smallest

    def _update_frontier(self) -> bool:
        """Expand the best frontier entry.

        Returns:
            True if any new path matches the target exactly
        """
        path = heapq.heappop(self.frontier).path
        self.statistics.paths_expanded += 1
        has_match = False

        for new_path in self._next_paths(path):
            if abs(new_path.value) == self.target:
                has_match = True
            self._push_path(new_path)

        return has_match

    def _promote_best_match(self) -> None:
        """Adopt the best exact match in the frontier and prune against it.

        Matches are ranked by move count first and ``quasi_area`` second,
        rather than by ``quasi_area`` alone, so a longer but more compact
        match never displaces a shorter one. Ties go to the earliest pushed.
        """
        matches = (qp for qp in self.frontier if abs(qp.path.value) == self.target)
        best_entry = min(
            matches,
            key=lambda qp: (qp.path.moves, qp.path.bounds.quasi_area(), qp.sequence),
            default=None,
        )
        if best_entry is None or not best_entry.path.should_replace(self.smallest):
            return

        smallest = best_entry.path
        before = len(self.frontier)
        self.frontier = [qp for qp in self.frontier if qp.path.bounds.is_better_than(smallest.bounds)]
        heapq.heapify(self.frontier)
        self.smallest = smallest

        pruned = before - len(self.frontier)
        self.statistics.paths_pruned += pruned
        self.statistics.solutions_improved += 1
        logger.debug(f"New best {smallest!r} ({smallest.moves} moves, "
                     f"quasi-area {smallest.bounds.quasi_area()}), pruned {pruned} paths")

    def _next_paths(self, path: SearchPath) -> Iterable[SearchPath]:
        """Legal extensions of ``path`` that pass every filter."""
        next_paths = []

        for angle in self.angles:
            try:
                new_path = path.with_angle(angle)
            except IllegalMoveError as e:
                self.statistics.illegal_moves += 1
                logger.debug(f"Skipping move: {e}")
                continue

            self.statistics.paths_generated += 1
            if self._is_viable(new_path):
                next_paths.append(new_path)
            else:
                self.statistics.paths_filtered += 1

        return next_paths

    def _is_viable(self, path: SearchPath) -> bool:
        value = path.value
        if self.trim_larger and abs(value) > self.target:
            return False
        if not self.allow_fractions and value.denominator != 1:
            return False
        return path.should_replace(self.smallest)

    def heuristic(self, path: SearchPath) -> int:
        """Estimated total moves for ``path`` to reach the target."""
        return estimate_total_moves(abs(path.value), path.moves, self.target)

    def _push_path(self, path: SearchPath) -> None:
        heapq.heappush(self.frontier, QueuedPath(self.heuristic(path), next(self._counter), path))
        self.statistics.max_frontier_size = max(self.statistics.max_frontier_size, len(self.frontier))

    def get_search_stats(self) -> Dict[str, Any]:
        """Get search statistics and settings."""
        return {
            **self.statistics.to_dict(),
            'frontier_size': len(self.frontier),
            'target': str(self.sign * self.target),
            'trim_larger': self.trim_larger,
            'allow_fractions': self.allow_fractions,
        }


def create_generator(target: Target, trim_larger: bool = True,
                     allow_fractions: bool = False) -> AStarPathGenerator:
    """Factory function for a hex pattern generator.

    Args:
        target: Exact value to reach
        trim_larger: Discard paths whose magnitude exceeds the target's
        allow_fractions: Keep paths with non-integer values

    Returns:
        Configured AStarPathGenerator instance
    """
    return AStarPathGenerator(target, trim_larger, allow_fractions)
