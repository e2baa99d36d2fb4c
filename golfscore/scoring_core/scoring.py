"""
Configurable scoring rules for golf formats.

This module defines the constants that turn hole results into points:
the Stableford table, the American position values and the Wolf payouts.
"""

from typing import Dict, Tuple
from dataclasses import dataclass, field


@dataclass(frozen=True)
class WolfPayout:
    """Points paid for one kind of Wolf decision."""

    win: int  # wolf side strictly better
    loss: int  # paid to each member of the other side
    tie: int


@dataclass(frozen=True)
class ScoringRules:
    """Defines how holes are converted to points."""

    # Handicap strokes are spread over a full 18-hole stroke index
    allocation_holes: int = 18

    # Stableford: net score relative to par -> points. Anything better than
    # the lowest key scores the best value, anything worse scores zero.
    stableford_table: Tuple[Tuple[int, int], ...] = (
        (-2, 5),
        (-1, 4),
        (0, 3),
        (1, 2),
        (2, 1),
    )

    # American: value of each finishing position, keyed by field size
    american_positions: Dict[int, Tuple[int, ...]] = field(
        default_factory=lambda: {3: (4, 2, 0), 4: (8, 6, 4, 2)}
    )

    # Wolf
    blind_wolf: WolfPayout = WolfPayout(win=6, loss=2, tie=1)
    lone_wolf: WolfPayout = WolfPayout(win=3, loss=1, tie=1)
    # For a partnered hole: win is paid to wolf and partner, loss and tie to the solo player
    partner_wolf: WolfPayout = WolfPayout(win=1, loss=3, tie=1)

    def stableford_points(self, net: int, par: int) -> int:
        """Get Stableford points for a net score on a hole of the given par."""
        diff = net - par
        best_diff, best_points = self.stableford_table[0]
        if diff <= best_diff:
            return best_points
        for table_diff, points in self.stableford_table:
            if diff == table_diff:
                return points
        return 0

    def american_total(self, field_size: int) -> int:
        """Points distributed on every hole for a field of this size."""
        return sum(self.american_positions[field_size])


# Pre-defined rules
STANDARD_RULES = ScoringRules()
