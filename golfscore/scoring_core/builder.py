"""
Builder for creating game snapshots with a fluent API.

The engine only consumes immutable snapshots. This builder makes them easy to
put together in tests and management commands without spelling out every
Score and Hole by hand.
"""

from typing import Dict, Iterable, List, Optional, Sequence, Union

from golfscore.scoring_core.structure import (
    FULL_ROUND,
    Course,
    Game,
    Hole,
    Nine,
    Player,
    Score,
    Team,
    WolfAssignment,
)
from golfscore.scoring_core.wolf import WolfDecision


DEFAULT_PAR = 4

GrossInput = Union[Sequence[Optional[int]], Dict[int, Optional[int]]]


class GameBuilder:
    """Builder for creating game snapshots easily."""

    def __init__(self, format: str = "scorecard"):
        self._format = format
        self._course_name = ""
        self._pars: List[int] = [DEFAULT_PAR] * FULL_ROUND
        self._stroke_indexes: List[int] = list(range(1, FULL_ROUND + 1))
        self._hole_count = FULL_ROUND
        self._nine = Nine.FRONT
        self._players: Dict[str, dict] = {}
        self._teams: List[tuple] = []
        self._wolf_order: List[str] = []
        self._wolf_assignments: Dict[int, WolfAssignment] = {}

    def format(self, format: str) -> "GameBuilder":
        self._format = format
        return self

    def course(
        self,
        pars: Optional[Sequence[int]] = None,
        stroke_indexes: Optional[Sequence[int]] = None,
        name: str = "",
    ) -> "GameBuilder":
        """Define the course. Missing values keep the par-4, SI 1..18 default."""
        if pars is not None:
            self._pars = list(pars)
        if stroke_indexes is not None:
            self._stroke_indexes = list(stroke_indexes)
        self._course_name = name
        return self

    def nine_holes(self, nine: str = "front") -> "GameBuilder":
        self._hole_count = 9
        self._nine = Nine(nine)
        return self

    def player(
        self,
        player_id: str,
        handicap: Optional[float] = None,
        gross: Optional[GrossInput] = None,
        name: Optional[str] = None,
    ) -> "GameBuilder":
        """Add a player. ``gross`` is a list from hole 1 or a {hole_number: gross} dict."""
        self._players[player_id] = {
            "name": name or player_id,
            "handicap": handicap,
            "scores": {},
        }
        if gross is not None:
            self.scores(player_id, gross)
        return self

    def scores(self, player_id: str, gross: GrossInput, start_hole: int = 1) -> "GameBuilder":
        """Record gross scores for a player, by hole number."""
        if player_id not in self._players:
            raise ValueError(f"Unknown player {player_id}")
        if isinstance(gross, dict):
            entries = gross.items()
        else:
            entries = enumerate(gross, start=start_hole)
        for hole_number, value in entries:
            existing = self._players[player_id]["scores"].get(hole_number, Score())
            self._players[player_id]["scores"][hole_number] = Score(
                value, existing.fir, existing.gir, existing.putts
            )
        return self

    def stats(
        self,
        player_id: str,
        hole_number: int,
        fir: Optional[bool] = None,
        gir: Optional[bool] = None,
        putts: Optional[int] = None,
    ) -> "GameBuilder":
        existing = self._players[player_id]["scores"].get(hole_number, Score())
        self._players[player_id]["scores"][hole_number] = Score(existing.gross, fir, gir, putts)
        return self

    def team(self, team_id: str, *player_ids: str, name: Optional[str] = None) -> "GameBuilder":
        self._teams.append((team_id, name or team_id, player_ids))
        return self

    def wolf_order(self, *player_ids: str) -> "GameBuilder":
        self._wolf_order = list(player_ids)
        return self

    def wolf(
        self,
        hole_number: int,
        wolf_id: str,
        partner: Optional[str] = None,
        lone: bool = False,
        blind: bool = False,
    ) -> "GameBuilder":
        """Record who is the Wolf on a hole and what they declared."""
        if blind:
            decision = WolfDecision.blind()
        elif lone:
            decision = WolfDecision.lone()
        elif partner is not None:
            decision = WolfDecision.partner(partner)
        else:
            decision = WolfDecision.none()
        index = hole_number - 1
        self._wolf_assignments[index] = WolfAssignment(index, wolf_id, decision)
        return self

    def _build_player(self, player_id: str, data: dict) -> Player:
        recorded = data["scores"]
        last = max(recorded) if recorded else 0
        scores = tuple(recorded.get(number, Score()) for number in range(1, last + 1))
        return Player(player_id, data["name"], data["handicap"], scores)

    def _build_course(self) -> Course:
        holes = tuple(
            Hole(number, par, stroke_index)
            for number, (par, stroke_index) in enumerate(
                zip(self._pars, self._stroke_indexes), start=1
            )
        )
        return Course(holes, self._course_name)

    def build(self) -> Game:
        """Build the snapshot."""
        players = {pid: self._build_player(pid, data) for pid, data in self._players.items()}
        teams = tuple(
            Team(team_id, name, tuple(players[pid] for pid in member_ids))
            for team_id, name, member_ids in self._teams
        )
        return Game(
            format=self._format,
            course=self._build_course(),
            players=tuple(players.values()),
            teams=teams,
            hole_count=self._hole_count,
            nine=self._nine,
            wolf_order=tuple(self._wolf_order),
            wolf_assignments=tuple(
                self._wolf_assignments[index] for index in sorted(self._wolf_assignments)
            ),
        )


def build_game(format: str, players: Iterable[tuple], **course) -> Game:
    """Create a game from (player_id, handicap, gross_list) tuples."""
    builder = GameBuilder(format)
    if course:
        builder.course(**course)
    for player_id, handicap, gross in players:
        builder.player(player_id, handicap, gross)
    return builder.build()
