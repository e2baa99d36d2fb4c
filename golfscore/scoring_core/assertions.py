"""
Fluent assertion interface for testing leaderboards.

This module provides a clean, fluent way to assert leaderboard rows for
testing purposes. It works with the pure Python scoring_core structures.
"""

from typing import List, Optional
from dataclasses import dataclass

from golfscore.scoring_core.engine import compute_leaderboard
from golfscore.scoring_core.scoring import ScoringRules, STANDARD_RULES
from golfscore.scoring_core.structure import Game, LeaderboardRow


# Use the built-in AssertionError for proper test framework integration


@dataclass
class LeaderboardAssertion:
    """Fluent interface for asserting a game's leaderboard."""

    game: Game
    format_override: Optional[str] = None
    rules: ScoringRules = STANDARD_RULES
    _rows: Optional[List[LeaderboardRow]] = None

    def __post_init__(self):
        """Calculate the leaderboard once on initialization."""
        if self._rows is None:
            self._rows = compute_leaderboard(self.game, self.format_override, self.rules)

    @property
    def rows(self) -> List[LeaderboardRow]:
        return self._rows

    def order(self, *competitor_ids: str) -> "LeaderboardAssertion":
        """Assert the ranking order of the whole leaderboard."""
        actual = tuple(row.competitor_id for row in self._rows)
        if actual != competitor_ids:
            raise AssertionError(f"Expected order {competitor_ids}, got {actual}")
        return self

    def competitor(self, competitor_id: str) -> "RowAssertion":
        for position, row in enumerate(self._rows, start=1):
            if row.competitor_id == competitor_id:
                return RowAssertion(self, row, position)
        raise AssertionError(f"Competitor '{competitor_id}' not found on leaderboard")

    def player(self, player_id: str) -> "RowAssertion":
        """Select a player by id (alias for competitor)."""
        return self.competitor(player_id)

    def team(self, team_id: str) -> "RowAssertion":
        """Select a team by id (alias for competitor)."""
        return self.competitor(team_id)


@dataclass
class RowAssertion:
    """Assertions for one leaderboard row."""

    board: LeaderboardAssertion
    row: LeaderboardRow
    actual_position: int

    def _check(self, what: str, expected, actual) -> "RowAssertion":
        if actual != expected:
            raise AssertionError(
                f"{self.row.display_name} expected {what} {expected!r}, got {actual!r}"
            )
        return self

    def points(self, expected: Optional[int]) -> "RowAssertion":
        return self._check("points", expected, self.row.total_points)

    def strokes(self, expected: int) -> "RowAssertion":
        return self._check("strokes", expected, self.row.total_strokes)

    def thru(self, expected: int) -> "RowAssertion":
        return self._check("thru", expected, self.row.thru)

    def status(self, expected: Optional[str]) -> "RowAssertion":
        return self._check("match status", expected, self.row.match_status)

    def differential(self, expected: int) -> "RowAssertion":
        return self._check("differential", expected, self.row.differential)

    def complete(self, expected: bool = True) -> "RowAssertion":
        return self._check("round complete", expected, self.row.is_round_complete)

    def message(self, expected: Optional[str]) -> "RowAssertion":
        return self._check("status message", expected, self.row.status_message)

    def position(self, expected: int) -> "RowAssertion":
        return self._check("position", expected, self.actual_position)

    def player(self, player_id: str) -> "RowAssertion":
        """Continue the chain with another competitor."""
        return self.board.competitor(player_id)

    def team(self, team_id: str) -> "RowAssertion":
        return self.board.competitor(team_id)


def assert_leaderboard(
    game: Game, format_override: Optional[str] = None, rules: ScoringRules = STANDARD_RULES
) -> LeaderboardAssertion:
    """Entry point for leaderboard assertions."""
    return LeaderboardAssertion(game, format_override, rules)
