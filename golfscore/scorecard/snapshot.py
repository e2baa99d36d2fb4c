"""
Transform stored game documents into scoring_core snapshots.

Game documents come from a document store and were written by several
versions of the app, so the same thing can appear under different keys
(``userId``/``uid``/``id``, ``displayName``/``name``/``nickname``) and Wolf
decisions are loose strings. This module is the one place that copes with
that; the engine only ever sees canonical records.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from golfscore.scoring_core.structure import (
    FULL_ROUND,
    NINE_HOLES,
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

logger = logging.getLogger(__name__)

ID_KEYS = ("userId", "uid", "id")
NAME_KEYS = ("displayName", "name", "nickname")


class SnapshotError(ValueError):
    """A game document is too broken to build a snapshot from."""


def _first(doc: Dict[str, Any], keys: Tuple[str, ...]) -> Optional[Any]:
    for key in keys:
        value = doc.get(key)
        if value not in (None, ""):
            return value
    return None


def _int_or_none(value) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _handicap(value) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.debug("Ignoring malformed handicap %r", value)
        return None


def score_from_doc(doc: Optional[Dict[str, Any]]) -> Score:
    if not doc:
        return Score()
    gross = _int_or_none(doc.get("gross"))
    putts = _int_or_none(doc.get("putts"))
    return Score(
        gross=gross if gross and gross > 0 else None,
        fir=doc.get("fir") if isinstance(doc.get("fir"), bool) else None,
        gir=doc.get("gir") if isinstance(doc.get("gir"), bool) else None,
        putts=putts if putts is not None and putts >= 0 else None,
    )


def player_from_doc(doc: Dict[str, Any], names: Optional[Dict[str, str]] = None) -> Player:
    player_id = _first(doc, ID_KEYS)
    if player_id is None:
        raise SnapshotError(f"Player entry has no id: {doc!r}")
    player_id = str(player_id)
    name = (names or {}).get(player_id) or _first(doc, NAME_KEYS) or player_id
    scores = tuple(score_from_doc(s) for s in (doc.get("scores") or []))
    return Player(player_id, str(name), _handicap(doc.get("handicap")), scores)


def course_from_doc(doc: Optional[Dict[str, Any]]) -> Course:
    if not doc:
        return Course()
    holes = []
    for position, hole in enumerate(doc.get("holes") or [], start=1):
        hole = hole or {}
        holes.append(
            Hole(
                number=_int_or_none(hole.get("number")) or position,
                par=_int_or_none(hole.get("par")) or 4,
                stroke_index=_int_or_none(hole.get("strokeIndex")) or 0,
            )
        )
    return Course(tuple(holes), str(doc.get("name") or ""))


def _member_id(member) -> Optional[str]:
    if isinstance(member, dict):
        member_id = _first(member, ID_KEYS)
    else:
        member_id = member
    return str(member_id) if member_id not in (None, "") else None


def teams_from_docs(docs: List[Dict[str, Any]], players: Dict[str, Player]) -> Tuple[Team, ...]:
    """Teams with both members in the game. Incomplete teams are skipped."""
    teams = []
    for doc in docs or []:
        member_ids = [_member_id(doc.get(key)) for key in ("player1", "player2")]
        if not any(member_ids):
            member_ids = [_member_id(m) for m in doc.get("players") or []]
        members = [players[mid] for mid in member_ids if mid in players]
        team_id = _first(doc, ("id",))
        if len(members) != 2 or team_id is None:
            logger.debug("Skipping team %r without two players in the game", team_id)
            continue
        teams.append(Team(str(team_id), str(doc.get("name") or team_id), tuple(members)))
    return tuple(teams)


def decision_from_doc(value) -> WolfDecision:
    """Wolf decisions are stored as "lone", "blind", a partner id, or null."""
    if value in (None, ""):
        return WolfDecision.none()
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered == "lone":
            return WolfDecision.lone()
        if lowered == "blind":
            return WolfDecision.blind()
        return WolfDecision.partner(value)
    return WolfDecision.partner(str(value))


def wolf_assignments_from_doc(doc: Dict[str, Any], wolf_order: Tuple[str, ...], player_ids: List[str]):
    """Per-hole Wolf assignments; explicit hole entries win over the decision list."""
    wolf_holes = doc.get("wolfHoles") or []
    decisions = doc.get("wolfDecisions") or []
    order = wolf_order if len(wolf_order) == 3 else tuple(player_ids)
    assignments = []
    for index in range(max(len(wolf_holes), len(decisions))):
        hole = wolf_holes[index] if index < len(wolf_holes) else None
        hole = hole if isinstance(hole, dict) else {}
        raw_decision = hole.get("decision")
        if raw_decision is None and index < len(decisions):
            raw_decision = decisions[index]
        wolf_id = hole.get("wolfId")
        if wolf_id is None:
            if len(order) != 3:
                continue
            wolf_id = order[index % 3]
        assignments.append(WolfAssignment(index, str(wolf_id), decision_from_doc(raw_decision)))
    return tuple(assignments)


def game_from_doc(
    doc: Dict[str, Any],
    teams: Optional[List[Dict[str, Any]]] = None,
    names: Optional[Dict[str, str]] = None,
) -> Game:
    """
    Build a snapshot from a stored game document.

    Args:
        doc: The game document
        teams: Team documents, if stored outside the game
        names: Display names by player id, for players stored without one

    Returns:
        A Game ready for the scoring engine
    """
    if not isinstance(doc, dict):
        raise SnapshotError("Game document must be an object")

    players = [player_from_doc(p, names) for p in doc.get("players") or []]
    by_id = {p.id: p for p in players}

    hole_count = NINE_HOLES if _int_or_none(doc.get("holeCount")) == NINE_HOLES else FULL_ROUND
    nine = Nine.BACK if str(doc.get("nineType") or "").lower() == "back" else Nine.FRONT
    wolf_order = tuple(str(pid) for pid in doc.get("wolfOrder") or [])

    return Game(
        format=str(doc.get("matchFormat") or doc.get("format") or ""),
        course=course_from_doc(doc.get("course")),
        players=tuple(players),
        teams=teams_from_docs(teams if teams is not None else doc.get("teams"), by_id),
        hole_count=hole_count,
        nine=nine,
        wolf_order=wolf_order,
        wolf_assignments=wolf_assignments_from_doc(doc, wolf_order, list(by_id)),
    )
