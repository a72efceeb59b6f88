"""Planner output dataclasses."""

from __future__ import annotations

from dataclasses import dataclass


# ── Step status ────────────────────────────────────────────────────

MATCHED = "matched"
LAYER_MISSING = "layer_missing"
LAYER_INDEPENDENT = "layer_independent"
STEP_STATUSES = (MATCHED, LAYER_MISSING, LAYER_INDEPENDENT)

# ── Complexity ratings (analysis never yields "low") ───────────────

MEDIUM = "medium"
HIGH = "high"


@dataclass(frozen=True)
class MappedStep:
    """A recipe step annotated with how it lines up against the layout."""

    step: int
    operation: str
    description: str
    status: str                         # one of STEP_STATUSES
    layer: str | None = None
    material: str | None = None
    method: str | None = None
    thickness_nm: float | None = None
    temperature_c: float | None = None
    duration_min: float | None = None
    layout_layer: int | None = None     # matched only
    feature_count: int | None = None    # matched only
    warning: str | None = None          # layer_missing only


@dataclass(frozen=True)
class ProcessFlow:
    name: str
    process_type: str
    technology_node: str
    application: str
    layout_file: str
    layers_used: int                    # layers in the layout, not matched layers
    steps: tuple[MappedStep, ...]
    total_steps: int
    estimated_duration_hours: float


@dataclass(frozen=True)
class LayoutAnalysis:
    suggested_process: str
    reason: str
    complexity: str                     # MEDIUM | HIGH
    min_feature_size: float             # µm
    layer_count: int
    feature_density: float              # features per µm²
