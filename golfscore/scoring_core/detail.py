"""
Per-hole detail tables for one player.

Detail views show the same numbers the leaderboard is built from, hole by
hole: gross, net, received strokes, points and where the player's side
finished on the hole.
"""

from typing import List, Optional
from dataclasses import dataclass

from golfscore.scoring_core.engine import FormatScoringEngine, Side
from golfscore.scoring_core.scoring import ScoringRules, STANDARD_RULES
from golfscore.scoring_core.structure import Game, HoleDetail, Player
from golfscore.scoring_core.ties import group_index_of, partition_tie_groups


@dataclass(frozen=True)
class RoundStats:
    """Fairways, greens and putts over the holes a player has played."""

    holes_played: int = 0
    fairways_hit: int = 0
    fairways_recorded: int = 0
    greens_in_regulation: int = 0
    greens_recorded: int = 0
    putts: int = 0


def round_stats(player: Player, hole_indices: List[int]) -> RoundStats:
    holes_played = fairways_hit = fairways_recorded = 0
    greens = greens_recorded = putts = 0
    for index in hole_indices:
        score = player.score(index)
        if not score.played:
            continue
        holes_played += 1
        if score.fir is not None:
            fairways_recorded += 1
            fairways_hit += int(score.fir)
        if score.gir is not None:
            greens_recorded += 1
            greens += int(score.gir)
        if score.putts is not None:
            putts += score.putts
    return RoundStats(
        holes_played, fairways_hit, fairways_recorded, greens, greens_recorded, putts
    )


def _side_for(sides: List[Side], player_id: str) -> Optional[Side]:
    for side in sides:
        if player_id in side.member_ids:
            return side
    return None


def hole_details(
    game: Game,
    player_id: str,
    format_override=None,
    rules: ScoringRules = STANDARD_RULES,
) -> List[HoleDetail]:
    """
    Annotated scorecard for one player under the game's format.

    Points are only filled in for formats that award them and for fields the
    format can score. ``tie_group`` is the rank of the player's side on the
    hole (0 is best) and ``is_winner`` marks an outright best score.

    Returns:
        One row per hole in play, or an empty list if the player is unknown
    """
    player = game.player(player_id)
    if player is None:
        return []

    engine = FormatScoringEngine(rules)
    strategy = engine.strategy(game, format_override)
    ctx = engine.context(game, strategy)
    sides = strategy.grouping.sides(game)
    # The player may sit outside the format's grouping, e.g. a solo in 2v2
    side = _side_for(sides, player_id) or Side(player.id, player.name, (player,))
    if side not in sides:
        sides = sides + [side]
    scoreable = strategy.points.field_message(len(sides)) is None

    details = []
    for index in ctx.holes:
        hole = game.course.hole(index)
        groups = partition_tie_groups([(s.id, ctx.side_value(s, index)) for s in sides])
        rank = group_index_of(groups, side.id)
        is_winner = (
            rank == 0 and len(groups) > 1 and groups[0].size == 1
        )

        points = None
        if strategy.points.awards_points and scoreable and ctx.side_value(side, index) is not None:
            points = strategy.points.hole_points(ctx, sides, index).get(side.id, 0)

        details.append(
            HoleDetail(
                hole_index=index,
                hole_number=hole.number if hole else index + 1,
                par=hole.par if hole else None,
                stroke_index=hole.stroke_index if hole else None,
                gross=player.gross(index),
                net=ctx.net(player, index),
                strokes_received=ctx.strokes_received(player, index),
                points=points,
                tie_group=rank,
                is_winner=is_winner,
            )
        )
    return details
