"""
Django management command to score a stored game.

Reads a game document exported as JSON, builds a snapshot and prints the
leaderboard, optionally followed by one player's hole-by-hole detail.
"""

import json
import os
from django.core.management.base import BaseCommand, CommandError

from golfscore.scorecard.snapshot import SnapshotError, game_from_doc
from golfscore.scoring_core.american import american_points_caption
from golfscore.scoring_core.conf import get_scoring_rules
from golfscore.scoring_core.detail import hole_details, round_stats
from golfscore.scoring_core.engine import FormatScoringEngine
from golfscore.scoring_core.formats import FormatCode, format_label


class Command(BaseCommand):
    help = "Print the leaderboard for a game document stored as JSON"

    def add_arguments(self, parser):
        parser.add_argument("game_file", type=str, help="Path to the game JSON file")
        parser.add_argument(
            "--format",
            type=str,
            dest="format_override",
            help="Score as this format instead of the game's own",
        )
        parser.add_argument(
            "--detail",
            type=str,
            metavar="PLAYER_ID",
            help="Also print the hole-by-hole card for this player",
        )

    def handle(self, *args, **options):
        game_path = options["game_file"]

        if not os.path.exists(game_path):
            raise CommandError(f"Game file not found: {game_path}")

        try:
            with open(game_path, "r", encoding="utf-8") as f:
                doc = json.load(f)
        except (OSError, ValueError) as e:
            raise CommandError(f"Error reading game file: {e}")

        try:
            game = game_from_doc(doc)
        except SnapshotError as e:
            raise CommandError(f"Invalid game document: {e}")

        engine = FormatScoringEngine(get_scoring_rules())
        code = engine.resolve_format(game, options["format_override"])
        rows = engine.compute_leaderboard(game, options["format_override"])

        self.stdout.write(format_label(code))
        if code in (FormatCode.AMERICAN_GROSS, FormatCode.AMERICAN_NET):
            caption = american_points_caption(len(game.players), engine.rules)
            if caption:
                self.stdout.write(caption)

        if not rows:
            self.stdout.write(self.style.WARNING("No players found for this game."))
            return

        for position, row in enumerate(rows, start=1):
            self.stdout.write(self._format_row(position, row))

        if options["detail"]:
            self._print_detail(game, engine, options["detail"], options["format_override"])

    def _format_row(self, position, row):
        if row.status_message:
            result = row.status_message
        elif row.total_points is not None:
            result = f"{row.total_points} pts"
        elif row.match_status is not None:
            result = row.match_status
        else:
            result = f"{row.total_strokes} strokes"
        progress = "Completed" if row.is_round_complete else f"Thru {row.thru}"
        return (
            f"{position:>2}. {row.display_name:<24} {result:<28} "
            f"{progress:<10} Strokes: {row.total_strokes}"
        )

    def _print_detail(self, game, engine, player_id, format_override):
        player = game.player(player_id)
        if player is None:
            raise CommandError(f"Player {player_id} is not in this game")

        self.stdout.write("")
        self.stdout.write(f"Scorecard: {player.name}")
        self.stdout.write("Hole  Par  SI  Gross  Net  Pts")
        for detail in hole_details(game, player_id, format_override, engine.rules):
            marker = "*" if detail.is_winner else " "
            self.stdout.write(
                f"{detail.hole_number:>4}  {_cell(detail.par):>3}  {_cell(detail.stroke_index):>2}"
                f"  {_cell(detail.gross):>5}  {_cell(detail.net):>3}  {_cell(detail.points):>3}{marker}"
            )

        stats = round_stats(player, game.hole_indices())
        self.stdout.write(
            f"Fairways {stats.fairways_hit}/{stats.fairways_recorded}, "
            f"greens {stats.greens_in_regulation}/{stats.greens_recorded}, "
            f"putts {stats.putts}"
        )


def _cell(value):
    return "-" if value is None else str(value)
