"""
Tests for the compute_leaderboard management command.
"""

import json
import os
import tempfile
from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import SimpleTestCase, override_settings


AMERICAN_GAME = {
    "matchFormat": "american",
    "course": {
        "name": "Municipal",
        "holes": [{"number": n, "par": 4, "strokeIndex": n} for n in range(1, 19)],
    },
    "players": [
        {
            "userId": "ann",
            "displayName": "Ann",
            "handicap": 0,
            "scores": [
                {"gross": 4, "fir": True, "gir": True, "putts": 2},
                {"gross": 3, "fir": False, "gir": True, "putts": 1},
                {"gross": 5},
            ],
        },
        {"userId": "bob", "displayName": "Bob", "scores": [{"gross": 4}, {"gross": 4}, {"gross": 4}]},
        {"userId": "cat", "displayName": "Cat", "scores": [{"gross": 5}, {"gross": 5}, {"gross": 4}]},
    ],
}


class ComputeLeaderboardCommandTests(SimpleTestCase):
    def setUp(self):
        fd, self.game_path = tempfile.mkstemp(suffix=".json")
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(AMERICAN_GAME, f)

    def tearDown(self):
        os.remove(self.game_path)

    def run_command(self, *args, **options):
        out = StringIO()
        call_command("compute_leaderboard", self.game_path, *args, stdout=out, **options)
        return out.getvalue()

    def test_leaderboard(self):
        output = self.run_command()
        lines = output.splitlines()
        self.assertEqual(lines[0], "American Scoring")
        self.assertEqual(lines[1], "6 points per hole (3 players)")
        self.assertTrue(lines[2].startswith(" 1. Bob"))
        self.assertIn("8 pts", lines[2])
        self.assertIn("Thru 3", lines[2])
        self.assertIn("Strokes: 12", lines[2])
        self.assertTrue(lines[4].startswith(" 3. Cat"))

    def test_format_override(self):
        output = self.run_command(format_override="stroke play")
        self.assertTrue(output.startswith("Stroke Play"))
        self.assertIn("12 strokes", output)
        self.assertNotIn("points per hole", output)

    def test_detail(self):
        output = self.run_command(detail="ann")
        self.assertIn("Scorecard: Ann", output)
        self.assertIn("Hole  Par  SI  Gross  Net  Pts", output)
        self.assertIn("   2    4   2      3    3    4*", output)
        self.assertIn("Fairways 1/2, greens 2/2, putts 3", output)

    def test_unknown_detail_player(self):
        with self.assertRaises(CommandError):
            self.run_command(detail="zed")

    @override_settings(GOLFSCORE_RULES={"american_positions": {"3": [6, 3, 0]}})
    def test_rules_from_settings(self):
        output = self.run_command()
        self.assertIn("9 points per hole (3 players)", output)

    def test_missing_file(self):
        with self.assertRaises(CommandError):
            call_command("compute_leaderboard", self.game_path + ".missing", stdout=StringIO())

    def test_invalid_json(self):
        with open(self.game_path, "w", encoding="utf-8") as f:
            f.write("{not json")
        with self.assertRaises(CommandError):
            self.run_command()

    def test_player_without_id(self):
        with open(self.game_path, "w", encoding="utf-8") as f:
            json.dump({"matchFormat": "stableford", "players": [{"name": "Nobody"}]}, f)
        with self.assertRaises(CommandError):
            self.run_command()

    def test_no_players(self):
        with open(self.game_path, "w", encoding="utf-8") as f:
            json.dump({"matchFormat": "stableford"}, f)
        output = self.run_command()
        self.assertIn("No players found for this game.", output)
