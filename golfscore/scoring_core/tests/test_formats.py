"""
Tests for format code normalization and labels.
"""

import unittest

from golfscore.scoring_core.formats import (
    FormatCode,
    format_label,
    format_options,
    is_match_play,
    lookup_format,
    normalize_format,
)


class NormalizeFormatTests(unittest.TestCase):
    def test_canonical_codes_map_to_themselves(self):
        for code in FormatCode:
            self.assertEqual(normalize_format(code.value), code)
            self.assertEqual(normalize_format(code), code)

    def test_aliases(self):
        cases = {
            "Stableford Points": FormatCode.STABLEFORD,
            "  match play ": FormatCode.MATCHPLAY_1V1_HANDICAP,
            "MATCH GROSS": FormatCode.MATCHPLAY_1V1_GROSS,
            "2v2": FormatCode.MATCHPLAY_2V2_HANDICAP,
            "2v2 match play gross": FormatCode.MATCHPLAY_2V2_GROSS,
            "american scoring": FormatCode.AMERICAN_GROSS,
            "American Net Scoring": FormatCode.AMERICAN_NET,
            "the wolf": FormatCode.WOLF_GROSS,
            "wolf with handicaps": FormatCode.WOLF_HANDICAP,
            "medal": FormatCode.STROKEPLAY,
        }
        for raw, expected in cases.items():
            self.assertEqual(normalize_format(raw), expected, raw)

    def test_unknown_falls_back_to_scorecard(self):
        self.assertEqual(normalize_format("skins"), FormatCode.SCORECARD)
        self.assertEqual(normalize_format(None), FormatCode.SCORECARD)
        self.assertEqual(normalize_format(""), FormatCode.SCORECARD)
        self.assertIsNone(lookup_format("skins"))


class FormatLabelTests(unittest.TestCase):
    def test_labels(self):
        self.assertEqual(format_label("wolf net"), "Wolf (3 Players, With Handicaps)")
        self.assertEqual(format_label(FormatCode.STABLEFORD), "Stableford Points")
        self.assertEqual(format_label("skins"), "skins")
        self.assertEqual(format_label(""), "Unknown Format")

    def test_options_cover_every_code_once(self):
        options = format_options()
        self.assertEqual(len(options), len(FormatCode))
        self.assertEqual(options[0], ("stableford", "Stableford Points"))
        self.assertEqual(options[-1], ("scorecard", "Scorecard"))

    def test_is_match_play(self):
        self.assertTrue(is_match_play("match play"))
        self.assertTrue(is_match_play("2v2 gross"))
        self.assertFalse(is_match_play("stroke play"))
        self.assertFalse(is_match_play("skins"))


if __name__ == "__main__":
    unittest.main()
