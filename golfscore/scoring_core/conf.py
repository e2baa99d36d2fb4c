"""
Scoring rules from Django settings.

A project can override individual scoring constants with a ``GOLFSCORE_RULES``
dict in its settings, e.g. ``{"blind_wolf": {"win": 8, "loss": 2, "tie": 1}}``.
Without configured settings the standard rules apply.
"""

import dataclasses
import logging

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from golfscore.scoring_core.scoring import ScoringRules, WolfPayout, STANDARD_RULES

logger = logging.getLogger(__name__)

_PAYOUT_FIELDS = {"blind_wolf", "lone_wolf", "partner_wolf"}


def rules_from_dict(overrides: dict, base: ScoringRules = STANDARD_RULES) -> ScoringRules:
    """Return ``base`` with the given fields replaced."""
    known = {f.name for f in dataclasses.fields(ScoringRules)}
    unknown = set(overrides) - known
    if unknown:
        raise ImproperlyConfigured(
            f"Unknown GOLFSCORE_RULES keys: {', '.join(sorted(unknown))}"
        )

    values = {}
    for name, value in overrides.items():
        if name in _PAYOUT_FIELDS and isinstance(value, dict):
            value = WolfPayout(**value)
        elif name == "stableford_table":
            value = tuple(tuple(entry) for entry in value)
        elif name == "american_positions":
            value = {int(size): tuple(points) for size, points in value.items()}
        values[name] = value
    return dataclasses.replace(base, **values)


def get_scoring_rules() -> ScoringRules:
    """Scoring rules for this project."""
    if not settings.configured:
        return STANDARD_RULES
    overrides = getattr(settings, "GOLFSCORE_RULES", None)
    if not overrides:
        return STANDARD_RULES
    logger.debug("Applying scoring rule overrides: %s", sorted(overrides))
    return rules_from_dict(overrides)
