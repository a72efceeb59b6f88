"""Process duration estimate."""

from __future__ import annotations

from typing import Iterable

from fabflow.numeric import round_half_up
from fabflow.pipeline.config import PLANNING_RULES, PlanningRules

from .models import MappedStep


def step_duration_hours(step: MappedStep, rules: PlanningRules = PLANNING_RULES) -> float:
    """Explicit duration_min if the recipe gives a non-zero one, else the operation default."""
    if step.duration_min:
        return step.duration_min / 60
    return rules.default_duration_h(step.operation)


def calculate_duration(steps: Iterable[MappedStep], rules: PlanningRules = PLANNING_RULES) -> float:
    """Total hours over all steps, rounded half-up to 0.1 h."""
    total_hours = 0.0
    for step in steps:
        total_hours += step_duration_hours(step, rules)
    return round_half_up(total_hours, 1)
