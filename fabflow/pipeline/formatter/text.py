"""Plain-text process flow report."""

from __future__ import annotations

from fabflow.pipeline.planner.models import ProcessFlow

RULE_WIDTH = 60


def format_text(flow: ProcessFlow) -> str:
    lines: list[str] = []

    lines.append("=" * RULE_WIDTH)
    lines.append("FABRICATION PROCESS FLOW")
    lines.append("=" * RULE_WIDTH)
    lines.append("")

    lines.append(f"Process: {flow.name}")
    lines.append(f"Type: {flow.process_type}")
    lines.append(f"Technology: {flow.technology_node}")
    lines.append(f"Application: {flow.application}")
    lines.append(f"Layout File: {flow.layout_file}")
    lines.append(f"Total Steps: {flow.total_steps}")
    lines.append(f"Estimated Duration: {flow.estimated_duration_hours} hours")
    lines.append("")

    lines.append("-" * RULE_WIDTH)
    lines.append("PROCESS STEPS")
    lines.append("-" * RULE_WIDTH)
    lines.append("")

    for step in flow.steps:
        lines.append(f"Step {step.step}: {step.operation.upper()}")
        lines.append(f"  Description: {step.description}")
        if step.material:
            lines.append(f"  Material: {step.material}")
        if step.method:
            lines.append(f"  Method: {step.method}")
        if step.thickness_nm:
            lines.append(f"  Thickness: {step.thickness_nm} nm")
        if step.temperature_c:
            lines.append(f"  Temperature: {step.temperature_c}°C")
        if step.layer:
            lines.append(f"  Mask Layer: {step.layer}")
        if step.warning:
            lines.append(f"  ⚠ WARNING: {step.warning}")
        lines.append("")

    return "\n".join(lines) + "\n"
