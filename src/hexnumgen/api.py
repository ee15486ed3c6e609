"""Configuration-aware entry point for pattern generation."""

import logging
from typing import Optional

from hexnumgen.config import get_parameter
from hexnumgen.numgen.astar import AStarPathGenerator, Target
from hexnumgen.patterns.path import Path

logger = logging.getLogger(__name__)

DEFAULT_TRIM_LARGER = True
DEFAULT_ALLOW_FRACTIONS = False


def generate_number_pattern(target: Target,
                            trim_larger: Optional[bool] = None,
                            allow_fractions: Optional[bool] = None) -> Optional[Path]:
    """Find the shortest numerical reflection pattern for ``target``.

    Flags left as None come from the loaded configuration
    (``numgen.trim_larger`` and ``numgen.allow_fractions``), falling back to
    trimming larger values and disallowing fractions.

    Args:
        target: Exact value to encode, e.g. ``12``, ``Fraction(3, 4)`` or ``"-7/2"``
        trim_larger: Discard patterns whose value ever exceeds the target's magnitude
        allow_fractions: Allow non-integer intermediate values

    Returns:
        The pattern, or None if it cannot be drawn under these constraints
    """
    if trim_larger is None:
        trim_larger = bool(get_parameter('numgen.trim_larger', DEFAULT_TRIM_LARGER))
    if allow_fractions is None:
        allow_fractions = bool(get_parameter('numgen.allow_fractions', DEFAULT_ALLOW_FRACTIONS))

    generator = AStarPathGenerator(target, trim_larger, allow_fractions)
    path = generator.run()

    logger.debug(f"Search stats: {generator.get_search_stats()}")
    return path
