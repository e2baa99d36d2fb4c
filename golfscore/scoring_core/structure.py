"""
Golf game utilities for representing a round and its scoring outputs.

This module provides a simple, clean way to represent a game snapshot with:
- A course made of holes (par and stroke index)
- Players with per-hole scores and a handicap
- Two-player teams and Wolf assignments
- Leaderboard rows and per-hole detail rows produced by the engine

Everything here is immutable. Net scores are never stored; they are derived
from gross, handicap and stroke index every time the engine runs.
"""

from typing import List, Tuple, Optional
from dataclasses import dataclass, field
from enum import Enum

from golfscore.scoring_core.wolf import WolfDecision


FULL_ROUND = 18
NINE_HOLES = 9


class Nine(Enum):
    """Which nine is played when a game is nine holes long."""

    FRONT = "front"
    BACK = "back"


@dataclass(frozen=True)
class Hole:
    """A single hole on a course."""

    number: int
    par: int
    stroke_index: int


@dataclass(frozen=True)
class Course:
    """An ordered set of holes. Read-only to the engine."""

    holes: Tuple[Hole, ...] = ()
    name: str = ""

    def hole(self, index: int) -> Optional[Hole]:
        """Return the hole at an absolute index, or None if the course is short."""
        if 0 <= index < len(self.holes):
            return self.holes[index]
        return None


@dataclass(frozen=True)
class Score:
    """One player's entry for one hole. Every field may still be absent."""

    gross: Optional[int] = None
    fir: Optional[bool] = None
    gir: Optional[bool] = None
    putts: Optional[int] = None

    @property
    def played(self) -> bool:
        """A hole counts as played once a positive gross is recorded."""
        return isinstance(self.gross, int) and self.gross > 0


EMPTY_SCORE = Score()


@dataclass(frozen=True)
class Player:
    """A player with their handicap and scores indexed by absolute hole."""

    id: str
    display_name: str = ""
    handicap: Optional[float] = None
    scores: Tuple[Score, ...] = ()

    def score(self, index: int) -> Score:
        if 0 <= index < len(self.scores):
            return self.scores[index]
        return EMPTY_SCORE

    def gross(self, index: int) -> Optional[int]:
        """Gross for a hole, or None when the hole has not been played."""
        score = self.score(index)
        return score.gross if score.played else None

    @property
    def name(self) -> str:
        return self.display_name or self.id


@dataclass(frozen=True)
class Team:
    """Two players competing as one side."""

    id: str
    name: str
    players: Tuple[Player, ...]

    def __post_init__(self):
        if len(self.players) != 2:
            raise ValueError(
                f"Team {self.id} must have exactly two players, got {len(self.players)}"
            )

    @property
    def member_ids(self) -> Tuple[str, ...]:
        return tuple(p.id for p in self.players)


@dataclass(frozen=True)
class WolfAssignment:
    """Who is the Wolf on a hole and what they decided.

    The decision must be fixed before any score for the hole is recorded.
    That ordering is the caller's responsibility.
    """

    hole_index: int
    wolf_id: str
    decision: WolfDecision = field(default_factory=WolfDecision.none)


@dataclass(frozen=True)
class Game:
    """A fully materialized snapshot of one game."""

    format: str
    course: Course
    players: Tuple[Player, ...] = ()
    teams: Tuple[Team, ...] = ()
    hole_count: int = FULL_ROUND
    nine: Nine = Nine.FRONT
    wolf_order: Tuple[str, ...] = ()
    wolf_assignments: Tuple[WolfAssignment, ...] = ()

    def hole_indices(self) -> List[int]:
        """Absolute hole indices in play, honouring the nine selection."""
        if self.hole_count == NINE_HOLES:
            start = NINE_HOLES if self.nine == Nine.BACK else 0
            return list(range(start, start + NINE_HOLES))
        return list(range(FULL_ROUND))

    def player(self, player_id: str) -> Optional[Player]:
        for p in self.players:
            if p.id == player_id:
                return p
        return None

    def solo_players(self) -> List[Player]:
        """Players who are not a member of any team in the snapshot."""
        teamed = {pid for team in self.teams for pid in team.member_ids}
        return [p for p in self.players if p.id not in teamed]

    def wolf_assignment(self, hole_index: int) -> Optional[WolfAssignment]:
        for assignment in self.wolf_assignments:
            if assignment.hole_index == hole_index:
                return assignment
        return None


@dataclass(frozen=True)
class LeaderboardRow:
    """One ranked line of a leaderboard."""

    competitor_id: str
    display_name: str
    member_ids: Tuple[str, ...] = ()
    thru: int = 0
    total_strokes: int = 0
    total_points: Optional[int] = None
    match_status: Optional[str] = None
    is_round_complete: bool = False
    differential: int = 0
    status_message: Optional[str] = None

    @property
    def is_sentinel(self) -> bool:
        """True when the row carries a waiting/invalid message instead of results."""
        return self.status_message is not None


@dataclass(frozen=True)
class HoleDetail:
    """One annotated row of a detail scorecard."""

    hole_index: int
    hole_number: int
    par: Optional[int]
    stroke_index: Optional[int]
    gross: Optional[int]
    net: Optional[int]
    strokes_received: int = 0
    points: Optional[int] = None
    tie_group: Optional[int] = None
    is_winner: bool = False
