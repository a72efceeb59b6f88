"""Planner — turns a layout and a recipe into a process flow.

Submodules:
  models        Output dataclasses and status / complexity constants.
  mapping       Recipe steps ↔ layout layers.
  duration      Per-step and total duration estimate.
  analysis      Process-type suggestion rules and size metrics.
  engine        generate_flow.
  serialization JSON conversion (flow_to_dict, parse_flow, analysis_to_dict).
"""

from .models import (
    MappedStep, ProcessFlow, LayoutAnalysis,
    MATCHED, LAYER_MISSING, LAYER_INDEPENDENT, STEP_STATUSES, MEDIUM, HIGH,
)
from .engine import generate_flow
from .analysis import analyze_layout, suggest_process, estimate_min_feature_size, feature_density
from .mapping import map_layers_to_steps, build_layer_index
from .duration import calculate_duration, step_duration_hours
from .serialization import flow_to_dict, parse_flow, analysis_to_dict

__all__ = [
    # Models
    "MappedStep", "ProcessFlow", "LayoutAnalysis",
    "MATCHED", "LAYER_MISSING", "LAYER_INDEPENDENT", "STEP_STATUSES", "MEDIUM", "HIGH",
    # Engine
    "generate_flow",
    # Analysis
    "analyze_layout", "suggest_process", "estimate_min_feature_size", "feature_density",
    # Helpers (used by tests)
    "map_layers_to_steps", "build_layer_index", "calculate_duration", "step_duration_hours",
    # Serialization
    "flow_to_dict", "parse_flow", "analysis_to_dict",
]
