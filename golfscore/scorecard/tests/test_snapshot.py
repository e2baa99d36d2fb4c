"""
Tests for building scoring snapshots from stored game documents.
"""

import unittest

from golfscore.scorecard.snapshot import (
    SnapshotError,
    course_from_doc,
    decision_from_doc,
    game_from_doc,
    player_from_doc,
    score_from_doc,
)
from golfscore.scoring_core.engine import compute_leaderboard
from golfscore.scoring_core.structure import Nine
from golfscore.scoring_core.wolf import DecisionKind


def course_doc(holes=18):
    return {
        "name": "Municipal",
        "holes": [
            {"number": n, "par": 4, "strokeIndex": n} for n in range(1, holes + 1)
        ],
    }


class PlayerDocTests(unittest.TestCase):
    def test_id_and_name_aliases(self):
        self.assertEqual(player_from_doc({"userId": "u1", "displayName": "Ann"}).id, "u1")
        self.assertEqual(player_from_doc({"uid": "u2", "nickname": "Bo"}).name, "Bo")
        self.assertEqual(player_from_doc({"id": 7}).name, "7")

    def test_names_lookup_wins(self):
        player = player_from_doc({"id": "u1", "name": "Stored"}, names={"u1": "Profile"})
        self.assertEqual(player.name, "Profile")

    def test_missing_id(self):
        with self.assertRaises(SnapshotError):
            player_from_doc({"name": "Nobody"})

    def test_malformed_handicap_means_no_handicap(self):
        self.assertIsNone(player_from_doc({"id": "u1", "handicap": "n/a"}).handicap)
        self.assertEqual(player_from_doc({"id": "u1", "handicap": "12.4"}).handicap, 12.4)

    def test_scores(self):
        score = score_from_doc({"gross": "5", "fir": True, "gir": "yes", "putts": 2})
        self.assertEqual((score.gross, score.fir, score.gir, score.putts), (5, True, None, 2))
        self.assertIsNone(score_from_doc({"gross": 0}).gross)
        self.assertIsNone(score_from_doc(None).gross)


class CourseDocTests(unittest.TestCase):
    def test_holes(self):
        course = course_from_doc(course_doc())
        self.assertEqual(course.name, "Municipal")
        self.assertEqual(course.hole(4).stroke_index, 5)

    def test_missing_stroke_index_allocates_nothing(self):
        course = course_from_doc({"holes": [{"par": 3}]})
        self.assertEqual(course.hole(0).stroke_index, 0)
        self.assertEqual(course.hole(0).number, 1)


class WolfDecisionDocTests(unittest.TestCase):
    def test_decision_strings(self):
        self.assertEqual(decision_from_doc(None).kind, DecisionKind.NONE)
        self.assertEqual(decision_from_doc("Lone").kind, DecisionKind.LONE)
        self.assertEqual(decision_from_doc("blind").kind, DecisionKind.BLIND)
        partner = decision_from_doc("u2")
        self.assertEqual((partner.kind, partner.partner_id), (DecisionKind.PARTNER, "u2"))


class GameDocTests(unittest.TestCase):
    def test_nine_hole_game(self):
        game = game_from_doc(
            {
                "matchFormat": "stroke play",
                "holeCount": 9,
                "nineType": "back",
                "course": course_doc(),
                "players": [{"id": "u1", "scores": [{"gross": 4}] * 10}],
            }
        )
        self.assertEqual(game.nine, Nine.BACK)
        self.assertEqual(game.hole_indices()[0], 9)
        self.assertEqual(compute_leaderboard(game)[0].total_strokes, 4)

    def test_format_key_fallback(self):
        self.assertEqual(game_from_doc({"format": "wolf"}).format, "wolf")
        self.assertEqual(game_from_doc({}).format, "")

    def test_teams(self):
        game = game_from_doc(
            {
                "players": [{"id": "a"}, {"id": "b"}, {"id": "c"}, {"id": "d"}],
                "teams": [
                    {"id": "t1", "name": "Eagles", "player1": "a", "player2": {"userId": "b"}},
                    {"id": "t2", "players": ["c", "d"]},
                    {"id": "t3", "players": ["c", "zed"]},
                ],
            }
        )
        self.assertEqual([t.id for t in game.teams], ["t1", "t2"])
        self.assertEqual(game.teams[0].member_ids, ("a", "b"))
        self.assertEqual(game.teams[1].name, "t2")

    def test_wolf_holes(self):
        game = game_from_doc(
            {
                "matchFormat": "wolf",
                "course": course_doc(),
                "wolfOrder": ["a", "b", "c"],
                "wolfDecisions": ["b", None, "blind"],
                "wolfHoles": [None, {"wolfId": "b", "decision": "lone"}],
                "players": [
                    {"id": "a", "scores": [{"gross": 4}, {"gross": 4}, {"gross": 4}]},
                    {"id": "b", "scores": [{"gross": 5}, {"gross": 3}, {"gross": 6}]},
                    {"id": "c", "scores": [{"gross": 5}, {"gross": 5}, {"gross": 5}]},
                ],
            }
        )
        self.assertEqual([a.wolf_id for a in game.wolf_assignments], ["a", "b", "c"])
        self.assertEqual(game.wolf_assignment(0).decision.partner_id, "b")
        self.assertEqual(game.wolf_assignment(1).decision.kind, DecisionKind.LONE)
        self.assertEqual(game.wolf_assignment(2).decision.kind, DecisionKind.BLIND)
        points = {row.competitor_id: row.total_points for row in compute_leaderboard(game)}
        self.assertEqual(points, {"a": 3, "b": 6, "c": 0})

    def test_not_an_object(self):
        with self.assertRaises(SnapshotError):
            game_from_doc(["not", "a", "game"])


if __name__ == "__main__":
    unittest.main()
