"""Heuristic layout analysis — suggest a process type from layer names.

Rules are evaluated in order on the upper-cased layer names; the first
rule whose predicate holds decides the suggestion.  New heuristics go
into SUGGESTION_RULES at the right priority.

The size metrics use `max_x * max_y` as the die area, without
subtracting the bounding-box minimums (unlike `get_layout_stats`).
Zero feature counts or degenerate boxes give inf/nan.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, NamedTuple

from fabflow.layout.models import Layout
from fabflow.numeric import ieee_div, ieee_sqrt, round_half_up
from fabflow.pipeline.config import PLANNING_RULES, PlanningRules

from .models import LayoutAnalysis, MEDIUM, HIGH


class Suggestion(NamedTuple):
    process_type: str
    reason: str
    complexity: str


@dataclass(frozen=True)
class SuggestionRule:
    name: str
    matches: Callable[[list[str]], bool]
    suggest: Callable[[list[str], Layout, PlanningRules], Suggestion]


def _any_contains(names: list[str], *needles: str) -> bool:
    return any(needle in name for name in names for needle in needles)


# ── Rules ──────────────────────────────────────────────────────────

def _suggest_mems(names: list[str], layout: Layout, rules: PlanningRules) -> Suggestion:
    if _any_contains(names, "ELECTRODE"):
        return Suggestion("mems_cantilever",
                          "Detected cantilever structures with electrodes", HIGH)
    return Suggestion("mems_pressure_sensor", "Detected MEMS membrane structures", HIGH)


def _suggest_photonics(names: list[str], layout: Layout, rules: PlanningRules) -> Suggestion:
    return Suggestion("photonics_waveguide", "Detected photonic waveguide patterns", HIGH)


def _suggest_cmos(names: list[str], layout: Layout, rules: PlanningRules) -> Suggestion:
    complexity = HIGH if layout.feature_count > rules.high_complexity_feature_count else MEDIUM
    return Suggestion("cmos_standard", "Standard CMOS layers detected (POLY, ACTIVE)", complexity)


SUGGESTION_RULES: tuple[SuggestionRule, ...] = (
    SuggestionRule(
        name="mems",
        matches=lambda names: _any_contains(names, "CANTILEVER", "MEMBRANE"),
        suggest=_suggest_mems,
    ),
    SuggestionRule(
        name="photonics",
        matches=lambda names: _any_contains(names, "WAVEGUIDE", "GRATING"),
        suggest=_suggest_photonics,
    ),
    SuggestionRule(
        name="cmos",
        # exact names, not substrings
        matches=lambda names: "POLY" in names and "ACTIVE" in names,
        suggest=_suggest_cmos,
    ),
)

DEFAULT_SUGGESTION = Suggestion("cmos_standard", "Default CMOS process", MEDIUM)


def suggest_process(layout: Layout, rules: PlanningRules = PLANNING_RULES) -> Suggestion:
    names = [layer.name.upper() for layer in layout.layers]
    for rule in SUGGESTION_RULES:
        if rule.matches(names):
            return rule.suggest(names, layout, rules)
    return DEFAULT_SUGGESTION


# ── Size metrics ───────────────────────────────────────────────────

def _raw_area(layout: Layout) -> float:
    bb = layout.bounding_box
    return bb.max_x * bb.max_y


def estimate_min_feature_size(layout: Layout) -> float:
    """Side of the average square feature, in user units, to 0.1."""
    avg_feature_area = ieee_div(_raw_area(layout), layout.feature_count)
    return round_half_up(ieee_sqrt(avg_feature_area), 1)


def feature_density(layout: Layout) -> float:
    return ieee_div(layout.feature_count, _raw_area(layout))


def analyze_layout(layout: Layout, rules: PlanningRules = PLANNING_RULES) -> LayoutAnalysis:
    """Suggest a process type and summarise the layout's size metrics.

    Pure function of *layout*; nothing is cached.
    """
    suggestion = suggest_process(layout, rules)
    return LayoutAnalysis(
        suggested_process=suggestion.process_type,
        reason=suggestion.reason,
        complexity=suggestion.complexity,
        min_feature_size=estimate_min_feature_size(layout),
        layer_count=len(layout.layers),
        feature_density=feature_density(layout),
    )
