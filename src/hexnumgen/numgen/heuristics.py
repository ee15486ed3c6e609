"""Move-count heuristic for the A* frontier.

The estimate assumes one move can at best double or halve the distance to
the target. It only orders the frontier; exact matches are checked
separately, so a loose estimate costs time, never correctness.
"""

from fractions import Fraction

# Lift applied to a zero value before comparing against the target,
# keyed by the smallest target it applies to.
ZERO_VALUE_OFFSETS = ((10, 10), (5, 5))
DEFAULT_ZERO_VALUE_OFFSET = 1


def zero_value_offset(target: Fraction) -> int:
    """Offset added to a zero working value for ``target``."""
    for threshold, offset in ZERO_VALUE_OFFSETS:
        if target > threshold:
            return offset
    return DEFAULT_ZERO_VALUE_OFFSET


def estimate_total_moves(value: Fraction, moves: int, target: Fraction) -> int:
    """Estimate the total moves a path needs to reach ``target``.

    Args:
        value: Unsigned magnitude of the path's current value
        moves: Moves already taken
        target: Unsigned target magnitude

    Returns:
        Moves taken plus an estimate of the moves remaining
    """
    value = Fraction(value)
    target = Fraction(target)
    estimate = moves

    # Halving never reaches zero.
    if target == 0:
        return estimate

    if value == 0:
        estimate += 1
        value += zero_value_offset(target)

    while value > target:
        value /= 2
        estimate += 1

    while target / 2 > value:
        target /= 2
        estimate += 1

    return estimate
