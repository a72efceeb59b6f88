"""Planner serialization — ProcessFlow / LayoutAnalysis ↔ JSON-safe dicts."""

from __future__ import annotations

from typing import Any

from .models import MappedStep, ProcessFlow, LayoutAnalysis

# Omitted from the dict when None, in output order.
_OPTIONAL_STEP_FIELDS = (
    "layer", "material", "method", "thickness_nm", "temperature_c", "duration_min",
    "layout_layer", "feature_count", "warning",
)


def step_to_dict(s: MappedStep) -> dict:
    d: dict[str, Any] = {
        "step": s.step,
        "operation": s.operation,
        "description": s.description,
    }
    for key in _OPTIONAL_STEP_FIELDS:
        value = getattr(s, key)
        if value is not None:
            d[key] = value
    d["status"] = s.status
    return d


def flow_to_dict(flow: ProcessFlow) -> dict:
    """Convert a ProcessFlow to a JSON-serializable dict."""
    return {
        "name": flow.name,
        "process_type": flow.process_type,
        "technology_node": flow.technology_node,
        "application": flow.application,
        "layout_file": flow.layout_file,
        "layers_used": flow.layers_used,
        "steps": [step_to_dict(s) for s in flow.steps],
        "total_steps": flow.total_steps,
        "estimated_duration_hours": flow.estimated_duration_hours,
    }


def _parse_step(data: dict) -> MappedStep:
    return MappedStep(
        step=int(data["step"]),
        operation=data["operation"],
        description=data["description"],
        status=data["status"],
        **{key: data.get(key) for key in _OPTIONAL_STEP_FIELDS},
    )


def parse_flow(data: dict) -> ProcessFlow:
    """Parse a dict produced by flow_to_dict back into a ProcessFlow."""
    return ProcessFlow(
        name=data["name"],
        process_type=data["process_type"],
        technology_node=data["technology_node"],
        application=data["application"],
        layout_file=data["layout_file"],
        layers_used=int(data["layers_used"]),
        steps=tuple(_parse_step(s) for s in data["steps"]),
        total_steps=int(data["total_steps"]),
        estimated_duration_hours=float(data["estimated_duration_hours"]),
    )


def analysis_to_dict(a: LayoutAnalysis) -> dict:
    return {
        "suggested_process": a.suggested_process,
        "reason": a.reason,
        "complexity": a.complexity,
        "min_feature_size": a.min_feature_size,
        "layer_count": a.layer_count,
        "feature_density": a.feature_density,
    }
