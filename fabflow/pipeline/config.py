"""Shared planning constants.

The duration table feeds the flow's time estimate; the feature-count
threshold feeds the layout analysis complexity rating.  Both stages read
them from this single source of truth.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


def _default_durations() -> Mapping[str, float]:
    return MappingProxyType({
        "lithography": 2.0,
        "etch": 1.0,
        "deposition": 3.0,
        "implantation": 2.0,
        "thermal_oxidation": 3.0,
        "cmp": 1.5,
        "metallization": 2.0,
        "strip": 0.5,
        "wet_etch": 0.5,
    })


@dataclass(frozen=True)
class PlanningRules:
    """Defaults used when a recipe or layout leaves something out.

    All durations are in hours.
    """

    default_process_type: str = "cmos_standard"
    """Recipe applied when the caller does not pick one."""

    default_durations_h: Mapping[str, float] = field(default_factory=_default_durations)
    """Per-operation duration for steps without duration_min."""

    fallback_duration_h: float = 1.0
    """Duration for operations missing from default_durations_h."""

    high_complexity_feature_count: int = 1000
    """CMOS layouts with more features than this are rated "high"."""

    def default_duration_h(self, operation: str) -> float:
        return self.default_durations_h.get(operation, self.fallback_duration_h)


# Module-level singleton — importable everywhere.
PLANNING_RULES = PlanningRules()
