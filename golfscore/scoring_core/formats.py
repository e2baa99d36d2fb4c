"""
Competition format codes.

Stored games name their format in free text. Every alias is normalized to one
canonical code by pure lookup; anything unknown is scored as a plain
scorecard.
"""

from typing import Dict, List, Optional, Tuple
from enum import Enum


class FormatCode(Enum):
    """Canonical format codes."""

    STABLEFORD = "stableford"
    MATCHPLAY_1V1_HANDICAP = "1v1matchplayhandicaps"
    MATCHPLAY_1V1_GROSS = "1v1matchplaynohandicap"
    MATCHPLAY_2V2_HANDICAP = "2v2matchplayhandicaps"
    MATCHPLAY_2V2_GROSS = "2v2matchplaynohandicap"
    AMERICAN_GROSS = "american"
    AMERICAN_NET = "american net"
    WOLF_GROSS = "wolf"
    WOLF_HANDICAP = "wolf-handicap"
    STROKEPLAY = "strokeplay"
    SCORECARD = "scorecard"


FORMAT_LABELS: Dict[FormatCode, str] = {
    FormatCode.STABLEFORD: "Stableford Points",
    FormatCode.MATCHPLAY_1V1_HANDICAP: "1v1 Match Play (With Handicaps)",
    FormatCode.MATCHPLAY_1V1_GROSS: "1v1 Match Play (No Handicaps)",
    FormatCode.MATCHPLAY_2V2_HANDICAP: "2v2 Match Play (With Handicaps)",
    FormatCode.MATCHPLAY_2V2_GROSS: "2v2 Match Play (No Handicaps)",
    FormatCode.AMERICAN_GROSS: "American Scoring",
    FormatCode.AMERICAN_NET: "American Scoring (With Handicaps)",
    FormatCode.WOLF_GROSS: "Wolf (3 Players)",
    FormatCode.WOLF_HANDICAP: "Wolf (3 Players, With Handicaps)",
    FormatCode.STROKEPLAY: "Stroke Play",
    FormatCode.SCORECARD: "Scorecard",
}

_ALIASES: Dict[str, FormatCode] = {
    # Stableford
    "stableford": FormatCode.STABLEFORD,
    "stableford points": FormatCode.STABLEFORD,
    "stableford scoring": FormatCode.STABLEFORD,
    # 1v1 match play with handicaps
    "matchplay": FormatCode.MATCHPLAY_1V1_HANDICAP,
    "match play": FormatCode.MATCHPLAY_1V1_HANDICAP,
    "match": FormatCode.MATCHPLAY_1V1_HANDICAP,
    # 1v1 match play gross
    "matchplay gross": FormatCode.MATCHPLAY_1V1_GROSS,
    "match play gross": FormatCode.MATCHPLAY_1V1_GROSS,
    "match gross": FormatCode.MATCHPLAY_1V1_GROSS,
    # 2v2 match play with handicaps
    "2v2 matchplay": FormatCode.MATCHPLAY_2V2_HANDICAP,
    "2v2 match play": FormatCode.MATCHPLAY_2V2_HANDICAP,
    "2v2": FormatCode.MATCHPLAY_2V2_HANDICAP,
    # 2v2 match play gross
    "2v2 matchplay gross": FormatCode.MATCHPLAY_2V2_GROSS,
    "2v2 match play gross": FormatCode.MATCHPLAY_2V2_GROSS,
    "2v2 gross": FormatCode.MATCHPLAY_2V2_GROSS,
    # American
    "american scoring": FormatCode.AMERICAN_GROSS,
    "american scoring net": FormatCode.AMERICAN_NET,
    "american net scoring": FormatCode.AMERICAN_NET,
    # Wolf
    "wolf format": FormatCode.WOLF_GROSS,
    "wolf game": FormatCode.WOLF_GROSS,
    "the wolf": FormatCode.WOLF_GROSS,
    "wolf gross": FormatCode.WOLF_GROSS,
    "wolf net": FormatCode.WOLF_HANDICAP,
    "wolf with handicaps": FormatCode.WOLF_HANDICAP,
    "wolf handicaps": FormatCode.WOLF_HANDICAP,
    # Stroke play
    "stroke play": FormatCode.STROKEPLAY,
    "stroke": FormatCode.STROKEPLAY,
    "medal": FormatCode.STROKEPLAY,
}
# Canonical codes are their own aliases
_ALIASES.update({code.value: code for code in FormatCode})

MATCHPLAY_FORMATS = frozenset(
    {
        FormatCode.MATCHPLAY_1V1_HANDICAP,
        FormatCode.MATCHPLAY_1V1_GROSS,
        FormatCode.MATCHPLAY_2V2_HANDICAP,
        FormatCode.MATCHPLAY_2V2_GROSS,
    }
)


def lookup_format(value) -> Optional[FormatCode]:
    """Return the canonical code for a value, or None if it is not recognised."""
    if isinstance(value, FormatCode):
        return value
    if value is None:
        return None
    return _ALIASES.get(str(value).strip().lower())


def normalize_format(value) -> FormatCode:
    """Canonical code for a value. Unknown formats fall back to the scorecard."""
    return lookup_format(value) or FormatCode.SCORECARD


def format_label(value) -> str:
    code = lookup_format(value)
    if code is None:
        return str(value) if value else "Unknown Format"
    return FORMAT_LABELS[code]


def format_options() -> List[Tuple[str, str]]:
    """(code, label) pairs in display order, for format pickers."""
    return [(code.value, FORMAT_LABELS[code]) for code in FormatCode]


def is_match_play(value) -> bool:
    return lookup_format(value) in MATCHPLAY_FORMATS
