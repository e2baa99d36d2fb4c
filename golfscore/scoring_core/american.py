"""
American scoring points.

American scoring pays a fixed number of points on every hole: 6 in a
three-player field and 20 in a four-player field. Each finishing position has
a value (4-2-0 or 8-6-4-2) and players who tie share the values of the
positions they occupy equally.
"""

from typing import Dict, Hashable, Iterable, List, Optional, Sequence, Tuple

from golfscore.scoring_core.scoring import ScoringRules, STANDARD_RULES
from golfscore.scoring_core.ties import TieGroup, partition_tie_groups


def american_points(
    group_sizes: Sequence[int],
    group_index: int,
    rules: ScoringRules = STANDARD_RULES,
) -> int:
    """
    Points for one member of a tie group.

    Args:
        group_sizes: Sizes of the tie groups in rank order, best first
        group_index: Index of the group the queried player belongs to
        rules: Provides the position values for the field size

    Returns:
        The player's points for the hole
    """
    field_size = sum(group_sizes)
    assert field_size in rules.american_positions, (
        f"American scoring needs a field of "
        f"{' or '.join(str(n) for n in sorted(rules.american_positions))}, got {field_size}"
    )
    assert 0 <= group_index < len(group_sizes), f"No tie group at index {group_index}"

    positions = rules.american_positions[field_size]
    start = sum(group_sizes[:group_index])
    size = group_sizes[group_index]
    shared = sum(positions[start : start + size])
    # Every admissible split of 4-2-0 and 8-6-4-2 divides evenly
    return shared // size


def american_points_for_partition(
    groups: List[TieGroup], rules: ScoringRules = STANDARD_RULES
) -> Dict[Hashable, int]:
    """Points for every competitor in a partitioned hole."""
    sizes = [group.size for group in groups]
    points = {}
    for index, group in enumerate(groups):
        value = american_points(sizes, index, rules)
        for competitor_id in group.ids:
            points[competitor_id] = value
    return points


def american_hole_points(
    values: Iterable[Tuple[Hashable, Optional[int]]],
    rules: ScoringRules = STANDARD_RULES,
) -> Dict[Hashable, int]:
    """
    Partition one hole and pay it out.

    Holes where fewer players than the smallest American field have a value
    pay nothing, so a partial hole never hands out a fraction of the total.
    """
    groups = partition_tie_groups(values)
    present = sum(group.size for group in groups)
    if present not in rules.american_positions:
        return {}
    return american_points_for_partition(groups, rules)


def american_points_caption(field_size: int, rules: ScoringRules = STANDARD_RULES) -> str:
    """Describe the per-hole points pot for a field, or '' for unsupported sizes."""
    if field_size not in rules.american_positions:
        return ""
    return f"{rules.american_total(field_size)} points per hole ({field_size} players)"
