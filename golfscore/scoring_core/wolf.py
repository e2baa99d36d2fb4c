"""
Wolf hole resolution.

Wolf is a three-player format. On every hole one player is the Wolf and,
before anyone tees off, decides to take a partner, go alone ("Lone Wolf") or
go alone without seeing any tee shots ("Blind Lone Wolf"). Each decision has
its own payouts.
"""

from typing import Dict, Hashable, Mapping, Optional, Sequence
from dataclasses import dataclass
from enum import Enum

from golfscore.scoring_core.scoring import ScoringRules, WolfPayout, STANDARD_RULES


WOLF_FIELD_SIZE = 3


class DecisionKind(Enum):
    """What the Wolf declared for a hole."""

    NONE = "none"
    PARTNER = "partner"
    LONE = "lone"
    BLIND = "blind"


@dataclass(frozen=True)
class WolfDecision:
    """A Wolf's declaration. Only PARTNER carries a partner id."""

    kind: DecisionKind = DecisionKind.NONE
    partner_id: Optional[Hashable] = None

    def __post_init__(self):
        if (self.kind == DecisionKind.PARTNER) != (self.partner_id is not None):
            raise ValueError(f"Partner id is required exactly for PARTNER, got {self}")

    @classmethod
    def none(cls) -> "WolfDecision":
        return cls(DecisionKind.NONE)

    @classmethod
    def lone(cls) -> "WolfDecision":
        return cls(DecisionKind.LONE)

    @classmethod
    def blind(cls) -> "WolfDecision":
        return cls(DecisionKind.BLIND)

    @classmethod
    def partner(cls, partner_id: Hashable) -> "WolfDecision":
        return cls(DecisionKind.PARTNER, partner_id)

    @property
    def is_made(self) -> bool:
        return self.kind != DecisionKind.NONE


def wolf_for_hole(
    hole_index: int,
    wolf_order: Sequence[Hashable],
    player_ids: Sequence[Hashable],
    assigned_wolf_id: Optional[Hashable] = None,
) -> Hashable:
    """
    Who is the Wolf on a hole.

    An explicit per-hole assignment wins. Otherwise the Wolf rotates through
    the tee order by absolute hole index, falling back to player order when
    no complete tee order was recorded.
    """
    if assigned_wolf_id is not None:
        return assigned_wolf_id
    order = wolf_order if len(wolf_order) == WOLF_FIELD_SIZE else player_ids
    assert len(order) == WOLF_FIELD_SIZE, f"Wolf needs exactly {WOLF_FIELD_SIZE} players"
    return order[hole_index % WOLF_FIELD_SIZE]


def _alone(
    wolf_id: Hashable,
    other_ids: Sequence[Hashable],
    values: Mapping[Hashable, int],
    payout: WolfPayout,
) -> Dict[Hashable, int]:
    """Wolf against the better of the other two."""
    wolf_value = values[wolf_id]
    best_other = min(values[oid] for oid in other_ids)
    if wolf_value < best_other:
        return {wolf_id: payout.win}
    if wolf_value > best_other:
        return {oid: payout.loss for oid in other_ids}
    return {wolf_id: payout.tie}


def _partnered(
    wolf_id: Hashable,
    partner_id: Hashable,
    solo_id: Hashable,
    values: Mapping[Hashable, int],
    payout: WolfPayout,
) -> Dict[Hashable, int]:
    """Best ball of wolf and partner against the remaining player."""
    team_best = min(values[wolf_id], values[partner_id])
    solo_value = values[solo_id]
    if team_best < solo_value:
        return {wolf_id: payout.win, partner_id: payout.win}
    if team_best > solo_value:
        return {solo_id: payout.loss}
    return {solo_id: payout.tie}


def resolve_wolf_hole(
    wolf_id: Hashable,
    other_ids: Sequence[Hashable],
    values: Mapping[Hashable, Optional[int]],
    decision: WolfDecision,
    rules: ScoringRules = STANDARD_RULES,
) -> Dict[Hashable, int]:
    """
    Resolve one Wolf hole into points.

    Args:
        wolf_id: The Wolf for this hole
        other_ids: The two other players
        values: Comparable value (gross or net) per player, None if absent
        decision: What the Wolf declared
        rules: Provides the payouts

    Returns:
        Points per player; players who earn nothing are left out. A hole with
        any value missing, or with no decision, pays nothing.
    """
    assert len(other_ids) == WOLF_FIELD_SIZE - 1, (
        f"Wolf needs exactly {WOLF_FIELD_SIZE} players, got {len(other_ids) + 1}"
    )
    assert wolf_id not in other_ids, f"Wolf {wolf_id} cannot also be an opponent"

    ids = [wolf_id, *other_ids]
    if any(values.get(pid) is None for pid in ids):
        return {}

    if decision.kind == DecisionKind.BLIND:
        return _alone(wolf_id, other_ids, values, rules.blind_wolf)
    elif decision.kind == DecisionKind.LONE:
        return _alone(wolf_id, other_ids, values, rules.lone_wolf)
    elif decision.kind == DecisionKind.PARTNER:
        assert decision.partner_id in other_ids, (
            f"Partner {decision.partner_id} is not playing against wolf {wolf_id}"
        )
        solo_id = next(oid for oid in other_ids if oid != decision.partner_id)
        return _partnered(wolf_id, decision.partner_id, solo_id, values, rules.partner_wolf)
    else:  # NONE
        return {}
