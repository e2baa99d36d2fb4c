"""
Handicap stroke allocation.

A handicap is spread across the holes of a round by stroke index: every hole
receives ``floor(handicap / holes)`` strokes and the hardest
``handicap mod holes`` holes receive one more. Because the modulo is floored,
a plus handicap hands strokes back on the easiest holes.
"""

import logging
import math
from numbers import Real
from typing import Optional

from golfscore.scoring_core.scoring import ScoringRules, STANDARD_RULES

logger = logging.getLogger(__name__)


def _valid_handicap(handicap) -> bool:
    return (
        isinstance(handicap, Real)
        and not isinstance(handicap, bool)
        and math.isfinite(handicap)
    )


def strokes_received_for_hole(
    handicap: Optional[float], stroke_index: Optional[int], hole_count: int = 18
) -> int:
    """
    Strokes a player receives on one hole.

    Args:
        handicap: Playing handicap, may be fractional or negative
        stroke_index: Hole difficulty rank, 1 is the hardest
        hole_count: Number of holes the stroke index ranks

    Returns:
        The allocated strokes. Malformed input allocates nothing.
    """
    if handicap is None:
        return 0
    if not _valid_handicap(handicap):
        logger.debug("Ignoring malformed handicap %r", handicap)
        return 0
    if (
        not isinstance(stroke_index, int)
        or isinstance(stroke_index, bool)
        or not 1 <= stroke_index <= hole_count
    ):
        logger.debug("Ignoring out-of-range stroke index %r", stroke_index)
        return 0

    base = math.floor(handicap / hole_count)
    extra = handicap % hole_count
    return base + (1 if stroke_index <= extra else 0)


def net_score(gross: int, strokes_received: int) -> int:
    """Subtract received strokes from gross, never going below zero."""
    return max(0, gross - strokes_received)


def net_for_hole(
    gross: Optional[int],
    handicap: Optional[float],
    stroke_index: Optional[int],
    hole_count: int = 18,
) -> Optional[int]:
    """Net score for a hole, or None when the hole has no gross yet."""
    if gross is None or isinstance(gross, bool) or gross <= 0:
        return None
    return net_score(gross, strokes_received_for_hole(handicap, stroke_index, hole_count))


def stableford_points_for_hole(
    net: Optional[int], par: Optional[int], rules: ScoringRules = STANDARD_RULES
) -> Optional[int]:
    """Stableford points for a net score, or None if either side is missing."""
    if net is None or par is None:
        return None
    return rules.stableford_points(net, par)
