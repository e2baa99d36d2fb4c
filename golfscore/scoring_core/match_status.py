"""
Running match status for head-to-head formats.

The tracker folds hole results into a differential from the left side's
perspective and notices when the match is decided, i.e. when the trailing
side can no longer catch up in the holes that remain. From then on the
result is frozen.
"""

from typing import Iterable, Optional, Tuple
from dataclasses import dataclass
from enum import Enum


WAITING_FOR_OPPONENT = "Waiting for opponent"
ALL_SQUARE = "All Square"
LEVEL = "Level"


class StatusStyle(Enum):
    """How the differential is accumulated and labelled."""

    HOLES = "holes"  # +1/-1 per hole won, "2 Up", locks when decided
    STROKES = "strokes"  # stroke difference, "+3", never locks


@dataclass
class MatchStatusTracker:
    """Cumulative state of one match between a left and a right side."""

    total_holes: int
    left_name: str = "Left"
    right_name: str = "Right"
    style: StatusStyle = StatusStyle.HOLES
    lock_in: bool = True  # stroke play counts holes won but never decides early
    differential: int = 0
    holes_played: int = 0
    locked_result: Optional[str] = None

    @property
    def holes_remaining(self) -> int:
        return self.total_holes - self.holes_played

    @property
    def is_decided(self) -> bool:
        return self.locked_result is not None

    def record_hole(self, left: Optional[int], right: Optional[int]) -> str:
        """
        Count one hole and return the label after it.

        A hole where either side has no value is skipped entirely; that is how
        a side still waiting on its opponent is represented.
        """
        if left is None or right is None:
            return self.label

        self.holes_played += 1
        if self.style == StatusStyle.STROKES:
            self.differential += right - left
        elif left < right:
            self.differential += 1
        elif right < left:
            self.differential -= 1

        if self.lock_in and self.style == StatusStyle.HOLES and self.locked_result is None:
            lead = abs(self.differential)
            if lead > self.holes_remaining:
                leader = self.left_name if self.differential > 0 else self.right_name
                self.locked_result = f"{leader} won {lead}-{self.holes_remaining}"
        return self.label

    @property
    def label(self) -> str:
        """Status from the left side's perspective."""
        if self.holes_played == 0:
            return WAITING_FOR_OPPONENT
        if self.locked_result is not None:
            return self.locked_result
        if self.style == StatusStyle.STROKES:
            if self.differential == 0:
                return LEVEL
            return f"{self.differential:+d}"
        if self.differential == 0:
            return ALL_SQUARE
        if self.differential > 0:
            return f"{self.differential} Up"
        return f"{-self.differential} Down"

    def mirrored_label(self) -> str:
        """Status from the right side's perspective."""
        if self.holes_played == 0 or self.locked_result is not None:
            return self.label
        if self.style == StatusStyle.STROKES:
            if self.differential == 0:
                return LEVEL
            return f"{-self.differential:+d}"
        if self.differential == 0:
            return ALL_SQUARE
        if self.differential < 0:
            return f"{-self.differential} Up"
        return f"{self.differential} Down"


def track_match(
    holes: Iterable[Tuple[Optional[int], Optional[int]]],
    total_holes: int,
    left_name: str = "Left",
    right_name: str = "Right",
    style: StatusStyle = StatusStyle.HOLES,
    lock_in: bool = True,
) -> MatchStatusTracker:
    """Fold a sequence of (left, right) hole values into a finished tracker."""
    tracker = MatchStatusTracker(total_holes, left_name, right_name, style, lock_in)
    for left, right in holes:
        tracker.record_hole(left, right)
    return tracker
