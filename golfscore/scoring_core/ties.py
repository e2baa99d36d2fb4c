"""
Tie group partitioning for per-hole rankings.

Every "who won this hole" question reduces to the same step: sort the
comparable values and group equal ones. The result is used by match play,
American scoring and the detail views.
"""

from typing import Hashable, Iterable, List, Optional, Tuple
from dataclasses import dataclass


@dataclass(frozen=True)
class TieGroup:
    """Competitors sharing one comparable value on a hole."""

    value: float
    ids: Tuple[Hashable, ...]

    @property
    def size(self) -> int:
        return len(self.ids)


def partition_tie_groups(
    values: Iterable[Tuple[Hashable, Optional[float]]], lower_is_better: bool = True
) -> List[TieGroup]:
    """
    Partition (id, value) pairs into ordered groups of equal value.

    Args:
        values: Pairs of competitor id and comparable value (None if absent)
        lower_is_better: Sort direction, golf strokes are lower-is-better

    Returns:
        Groups ordered best to worst. Absent values are left out and ids keep
        their input order inside a group.
    """
    present = [(cid, value) for cid, value in values if value is not None]
    present.sort(key=lambda pair: pair[1], reverse=not lower_is_better)

    groups: List[TieGroup] = []
    for cid, value in present:
        if groups and groups[-1].value == value:
            last = groups[-1]
            groups[-1] = TieGroup(last.value, last.ids + (cid,))
        else:
            groups.append(TieGroup(value, (cid,)))
    return groups


def group_index_of(groups: List[TieGroup], competitor_id: Hashable) -> Optional[int]:
    """Return the rank index of the group holding this id, or None."""
    for index, group in enumerate(groups):
        if competitor_id in group.ids:
            return index
    return None


def group_sizes(groups: List[TieGroup]) -> List[int]:
    return [group.size for group in groups]
