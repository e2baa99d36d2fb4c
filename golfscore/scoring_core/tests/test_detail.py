"""
Tests for per-hole detail tables and round statistics.
"""

import unittest

from golfscore.scoring_core.builder import GameBuilder
from golfscore.scoring_core.detail import RoundStats, hole_details, round_stats
from golfscore.scoring_core.tests.test_utils import (
    create_american_game,
    create_match,
    create_wolf_game,
)


class HoleDetailTests(unittest.TestCase):
    def test_american_detail(self):
        details = hole_details(create_american_game(), "ann")
        self.assertEqual(len(details), 18)

        first, second, third, fourth = details[:4]
        # Tied for first with Bob
        self.assertEqual((first.points, first.tie_group, first.is_winner), (3, 0, False))
        # Outright best
        self.assertEqual((second.points, second.tie_group, second.is_winner), (4, 0, True))
        # Behind the two tied leaders
        self.assertEqual((third.points, third.tie_group, third.is_winner), (0, 1, False))
        # Not played yet
        self.assertIsNone(fourth.gross)
        self.assertIsNone(fourth.points)
        self.assertIsNone(fourth.tie_group)

    def test_detail_points_add_up_to_leaderboard(self):
        game = create_wolf_game()
        for player_id, expected in (("a", 3), ("b", 6), ("c", 0)):
            details = hole_details(game, player_id)
            self.assertEqual(sum(d.points or 0 for d in details), expected)

    def test_net_columns(self):
        game = GameBuilder("stableford").player("ann", handicap=20, gross=[5, 5, 5]).build()
        details = hole_details(game, "ann")
        # Twenty strokes: two on SI 1 and 2, one everywhere else
        self.assertEqual([d.strokes_received for d in details[:3]], [2, 2, 1])
        self.assertEqual([d.net for d in details[:3]], [3, 3, 4])
        self.assertEqual([d.points for d in details[:3]], [4, 4, 3])
        self.assertEqual(details[0].par, 4)
        self.assertEqual(details[0].stroke_index, 1)

    def test_match_play_highlights_winner_without_points(self):
        game = create_match("matchplay gross", [5, 4, 4], [4, 5, 4])
        details = hole_details(game, "ann")
        self.assertEqual([d.is_winner for d in details[:3]], [False, True, False])
        self.assertEqual([d.tie_group for d in details[:3]], [1, 0, 0])
        self.assertTrue(all(d.points is None for d in details))

    def test_unscoreable_field_has_no_points(self):
        game = GameBuilder("american").player("ann", gross=[4]).player("bob", gross=[5]).build()
        details = hole_details(game, "ann")
        self.assertIsNone(details[0].points)
        self.assertTrue(details[0].is_winner)

    def test_player_outside_the_grouping(self):
        game = (
            GameBuilder("2v2 gross")
            .player("ann", gross=[4])
            .player("bob", gross=[5])
            .player("cat", gross=[3])
            .team("t1", "ann", "bob")
            .build()
        )
        details = hole_details(game, "cat")
        self.assertEqual(details[0].gross, 3)
        self.assertEqual(details[0].tie_group, 0)

    def test_back_nine_numbers(self):
        game = GameBuilder("scorecard").nine_holes("back").player("ann", gross={10: 4}).build()
        details = hole_details(game, "ann")
        self.assertEqual([d.hole_number for d in details], list(range(10, 19)))
        self.assertEqual(details[0].gross, 4)

    def test_unknown_player(self):
        self.assertEqual(hole_details(create_american_game(), "zed"), [])


class RoundStatsTests(unittest.TestCase):
    def test_counts_only_played_holes(self):
        game = (
            GameBuilder()
            .player("ann", gross=[4, 5])
            .stats("ann", 1, fir=True, gir=False, putts=2)
            .stats("ann", 2, fir=False, gir=True, putts=1)
            .stats("ann", 3, fir=True, putts=3)
            .build()
        )
        stats = round_stats(game.player("ann"), game.hole_indices())
        self.assertEqual(
            stats,
            RoundStats(
                holes_played=2,
                fairways_hit=1,
                fairways_recorded=2,
                greens_in_regulation=1,
                greens_recorded=2,
                putts=3,
            ),
        )

    def test_no_scores(self):
        game = GameBuilder().player("ann").build()
        self.assertEqual(round_stats(game.player("ann"), game.hole_indices()), RoundStats())


if __name__ == "__main__":
    unittest.main()
