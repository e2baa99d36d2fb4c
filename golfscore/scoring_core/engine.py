"""
Format scoring engine.

One engine scores every format. A format is a combination of three strategy
objects:
- a comparable selector (gross or handicap-adjusted net)
- a grouping (individual players, two-player teams, or both)
- a point strategy (how holes become points, match status or totals)

The engine is stateless: every call recomputes from the snapshot it is given.
"""

import logging
from collections import defaultdict
from typing import Dict, List, Optional, Tuple
from dataclasses import dataclass
from enum import Enum

from golfscore.scoring_core.american import american_hole_points
from golfscore.scoring_core.formats import FormatCode, lookup_format
from golfscore.scoring_core.handicap import (
    net_for_hole,
    stableford_points_for_hole,
    strokes_received_for_hole,
)
from golfscore.scoring_core.match_status import (
    WAITING_FOR_OPPONENT,
    track_match,
)
from golfscore.scoring_core.scoring import ScoringRules, STANDARD_RULES
from golfscore.scoring_core.structure import Game, LeaderboardRow, Player
from golfscore.scoring_core.ties import partition_tie_groups
from golfscore.scoring_core.wolf import (
    DecisionKind,
    WOLF_FIELD_SIZE,
    WolfDecision,
    resolve_wolf_hole,
    wolf_for_hole,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Side:
    """A competitor on the leaderboard: one player or a two-player team."""

    id: str
    name: str
    players: Tuple[Player, ...]

    @property
    def member_ids(self) -> Tuple[str, ...]:
        return tuple(p.id for p in self.players)


class Comparable(Enum):
    """Which score a format compares."""

    GROSS = "gross"
    NET = "net"


class Grouping(Enum):
    """How players are gathered into sides."""

    PLAYERS = "players"
    TEAMS = "teams"
    TEAMS_AND_SOLOS = "teams_and_solos"

    def sides(self, game: Game) -> List[Side]:
        if self is Grouping.PLAYERS:
            return [Side(p.id, p.name, (p,)) for p in game.players]
        team_sides = [Side(t.id, t.name, t.players) for t in game.teams]
        if self is Grouping.TEAMS:
            return team_sides
        return team_sides + [Side(p.id, p.name, (p,)) for p in game.solo_players()]


@dataclass(frozen=True)
class ScoringContext:
    """Everything a point strategy needs to look at one hole."""

    game: Game
    comparable: Comparable
    rules: ScoringRules

    @property
    def holes(self) -> List[int]:
        return self.game.hole_indices()

    def _stroke_index(self, index: int) -> Optional[int]:
        hole = self.game.course.hole(index)
        return hole.stroke_index if hole else None

    def strokes_received(self, player: Player, index: int) -> int:
        return strokes_received_for_hole(
            player.handicap, self._stroke_index(index), self.rules.allocation_holes
        )

    def net(self, player: Player, index: int) -> Optional[int]:
        return net_for_hole(
            player.gross(index),
            player.handicap,
            self._stroke_index(index),
            self.rules.allocation_holes,
        )

    def value(self, player: Player, index: int) -> Optional[int]:
        if self.comparable == Comparable.NET:
            return self.net(player, index)
        return player.gross(index)

    def side_value(self, side: Side, index: int) -> Optional[int]:
        """Best ball of the side's members, or None if nobody has a value."""
        values = [v for v in (self.value(p, index) for p in side.players) if v is not None]
        return min(values) if values else None

    def stableford(self, player: Player, index: int) -> Optional[int]:
        hole = self.game.course.hole(index)
        return stableford_points_for_hole(
            self.net(player, index), hole.par if hole else None, self.rules
        )

    def stroke_totals(self, side: Side) -> Tuple[int, int, bool]:
        """Return (thru, total_strokes, is_round_complete) for a side."""
        thru = 0
        strokes = 0
        complete = True
        for index in self.holes:
            grosses = [g for g in (p.gross(index) for p in side.players) if g is not None]
            if grosses:
                thru += 1
                strokes += sum(grosses)
            else:
                complete = False
        return thru, strokes, complete

    def row(self, side: Side, **fields) -> LeaderboardRow:
        thru, strokes, complete = self.stroke_totals(side)
        return LeaderboardRow(
            competitor_id=side.id,
            display_name=side.name,
            member_ids=side.member_ids,
            thru=thru,
            total_strokes=strokes,
            is_round_complete=complete,
            **fields,
        )


class PointStrategy:
    """Turns the holes of a game into leaderboard rows for one family of formats."""

    min_sides = 1
    max_sides: Optional[int] = None
    awards_points = True

    def field_message(self, side_count: int) -> Optional[str]:
        """Sentinel message when the field cannot be scored, else None."""
        if side_count < self.min_sides:
            missing = self.min_sides - side_count
            return f"Waiting for {missing} more player{'s' if missing > 1 else ''}"
        if self.max_sides is not None and side_count > self.max_sides:
            return f"Invalid format for {side_count} participants"
        return None

    def hole_points(
        self, ctx: ScoringContext, sides: List[Side], index: int
    ) -> Dict[str, int]:
        return {}

    def rows(self, ctx: ScoringContext, sides: List[Side]) -> List[LeaderboardRow]:
        totals: Dict[str, int] = defaultdict(int)
        for index in ctx.holes:
            for side_id, points in self.hole_points(ctx, sides, index).items():
                totals[side_id] += points
        return [ctx.row(side, total_points=totals[side.id]) for side in sides]

    def sort_key(self, row: LeaderboardRow):
        return (-(row.total_points or 0), row.total_strokes, row.display_name)


class StablefordPoints(PointStrategy):
    """Net Stableford points; a team takes its better player's points."""

    def hole_points(self, ctx, sides, index):
        points = {}
        for side in sides:
            member_points = [
                p for p in (ctx.stableford(player, index) for player in side.players)
                if p is not None
            ]
            if member_points:
                points[side.id] = max(member_points)
        return points


class AmericanPoints(PointStrategy):
    """Fixed points per hole shared out by finishing position."""

    min_sides = 3
    max_sides = 4

    def hole_points(self, ctx, sides, index):
        return american_hole_points(
            [(side.id, ctx.side_value(side, index)) for side in sides], ctx.rules
        )


class WolfPoints(PointStrategy):
    """Rotating Wolf; payouts depend on the Wolf's declared decision."""

    min_sides = WOLF_FIELD_SIZE
    max_sides = WOLF_FIELD_SIZE

    def hole_points(self, ctx, sides, index):
        ids = [side.id for side in sides]
        assignment = ctx.game.wolf_assignment(index)
        wolf_id = wolf_for_hole(
            index,
            ctx.game.wolf_order,
            ids,
            assignment.wolf_id if assignment else None,
        )
        if wolf_id not in ids:
            logger.warning("Wolf %s on hole %d is not in this game", wolf_id, index + 1)
            return {}

        decision = assignment.decision if assignment else WolfDecision.none()
        others = [sid for sid in ids if sid != wolf_id]
        if decision.kind == DecisionKind.PARTNER and decision.partner_id not in others:
            logger.warning(
                "Wolf partner %s on hole %d is not in this game",
                decision.partner_id,
                index + 1,
            )
            return {}

        values = {side.id: ctx.side_value(side, index) for side in sides}
        return resolve_wolf_hole(wolf_id, others, values, decision, ctx.rules)


def _head_to_head_rows(ctx, sides, lock_in=True):
    """Rows for two sides with the match status from each side's perspective."""
    left, right = sides
    tracker = track_match(
        ((ctx.side_value(left, i), ctx.side_value(right, i)) for i in ctx.holes),
        len(ctx.holes),
        left.name,
        right.name,
        lock_in=lock_in,
    )
    return [
        ctx.row(left, match_status=tracker.label, differential=tracker.differential),
        ctx.row(
            right,
            match_status=tracker.mirrored_label(),
            differential=-tracker.differential,
        ),
    ]


class MatchPlayStatus(PointStrategy):
    """Head-to-head holes won, reported as a running match status."""

    min_sides = 2
    max_sides = 2
    awards_points = False

    def field_message(self, side_count):
        if side_count < self.min_sides:
            return WAITING_FOR_OPPONENT
        return super().field_message(side_count)

    def hole_points(self, ctx, sides, index):
        """One point to the outright winner of the hole, used for highlights."""
        groups = partition_tie_groups(
            [(side.id, ctx.side_value(side, index)) for side in sides]
        )
        if len(groups) == 2:
            return {groups[0].ids[0]: 1}
        return {}

    def rows(self, ctx, sides):
        return _head_to_head_rows(ctx, sides)

    def sort_key(self, row):
        return (-row.differential, row.total_strokes, row.display_name)


class StrokePlayTotals(PointStrategy):
    """Lowest total strokes wins; two sides are also tracked by holes won."""

    awards_points = False

    def rows(self, ctx, sides):
        if len(sides) != 2:
            return [ctx.row(side) for side in sides]
        return _head_to_head_rows(ctx, sides, lock_in=False)

    def sort_key(self, row):
        return (row.total_strokes, -row.differential, row.display_name)


class ScorecardOnly(PointStrategy):
    """Strokes recorded, nothing else."""

    awards_points = False

    def rows(self, ctx, sides):
        return [ctx.row(side) for side in sides]

    def sort_key(self, row):
        return (row.total_strokes, row.display_name)


@dataclass(frozen=True)
class FormatStrategy:
    """The strategies that together define a format."""

    code: FormatCode
    comparable: Comparable
    grouping: Grouping
    points: PointStrategy


STRATEGIES: Dict[FormatCode, FormatStrategy] = {
    strategy.code: strategy
    for strategy in (
        FormatStrategy(
            FormatCode.STABLEFORD, Comparable.NET, Grouping.TEAMS_AND_SOLOS, StablefordPoints()
        ),
        FormatStrategy(
            FormatCode.MATCHPLAY_1V1_HANDICAP, Comparable.NET, Grouping.PLAYERS, MatchPlayStatus()
        ),
        FormatStrategy(
            FormatCode.MATCHPLAY_1V1_GROSS, Comparable.GROSS, Grouping.PLAYERS, MatchPlayStatus()
        ),
        FormatStrategy(
            FormatCode.MATCHPLAY_2V2_HANDICAP, Comparable.NET, Grouping.TEAMS, MatchPlayStatus()
        ),
        FormatStrategy(
            FormatCode.MATCHPLAY_2V2_GROSS, Comparable.GROSS, Grouping.TEAMS, MatchPlayStatus()
        ),
        FormatStrategy(
            FormatCode.AMERICAN_GROSS, Comparable.GROSS, Grouping.PLAYERS, AmericanPoints()
        ),
        FormatStrategy(
            FormatCode.AMERICAN_NET, Comparable.NET, Grouping.PLAYERS, AmericanPoints()
        ),
        FormatStrategy(FormatCode.WOLF_GROSS, Comparable.GROSS, Grouping.PLAYERS, WolfPoints()),
        FormatStrategy(
            FormatCode.WOLF_HANDICAP, Comparable.NET, Grouping.PLAYERS, WolfPoints()
        ),
        FormatStrategy(
            FormatCode.STROKEPLAY, Comparable.GROSS, Grouping.TEAMS_AND_SOLOS, StrokePlayTotals()
        ),
        FormatStrategy(
            FormatCode.SCORECARD, Comparable.GROSS, Grouping.TEAMS_AND_SOLOS, ScorecardOnly()
        ),
    )
}


class FormatScoringEngine:
    """Computes leaderboards for any supported format."""

    def __init__(self, rules: ScoringRules = STANDARD_RULES):
        self.rules = rules

    def resolve_format(self, game: Game, format_override=None) -> FormatCode:
        raw = format_override if format_override is not None else game.format
        code = lookup_format(raw)
        if code is None:
            logger.warning("Unknown format %r, scoring as a plain scorecard", raw)
            return FormatCode.SCORECARD
        return code

    def strategy(self, game: Game, format_override=None) -> FormatStrategy:
        return STRATEGIES[self.resolve_format(game, format_override)]

    def context(self, game: Game, strategy: FormatStrategy) -> ScoringContext:
        return ScoringContext(game, strategy.comparable, self.rules)

    def compute_leaderboard(self, game: Game, format_override=None) -> List[LeaderboardRow]:
        """
        Compute the ranked leaderboard for a game.

        Args:
            game: Snapshot to score
            format_override: Score as this format instead of the game's own

        Returns:
            Rows in ranking order. A field the format cannot score yields
            sentinel rows that carry a status message and no points.
        """
        strategy = self.strategy(game, format_override)
        ctx = self.context(game, strategy)
        sides = strategy.grouping.sides(game)
        if not sides and not game.players:
            return []

        message = strategy.points.field_message(len(sides))
        if message is not None:
            if strategy.grouping is Grouping.TEAMS:
                # Players still without a partner are listed as waiting too
                sides = Grouping.TEAMS_AND_SOLOS.sides(game)
            logger.debug("%s cannot score %d sides: %s", strategy.code.value, len(sides), message)
            return [ctx.row(side, status_message=message) for side in sides]

        rows = strategy.points.rows(ctx, sides)
        rows.sort(key=strategy.points.sort_key)
        return rows


def compute_leaderboard(
    game: Game, format_override=None, rules: ScoringRules = STANDARD_RULES
) -> List[LeaderboardRow]:
    """Compute a leaderboard with a one-off engine."""
    return FormatScoringEngine(rules).compute_leaderboard(game, format_override)
