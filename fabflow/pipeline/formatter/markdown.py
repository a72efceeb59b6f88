"""Markdown process flow report."""

from __future__ import annotations

from fabflow.pipeline.planner.models import MappedStep, ProcessFlow


def _parameter_lines(step: MappedStep) -> list[str]:
    """Bullet lines for the **Parameters:** block.

    A mask layer alone is enough to open the block, so layer-only steps
    (lithography, etch) still list the layer they pattern.
    """
    params: list[str] = []
    if step.material:
        params.append(f"- Material: {step.material}")
    if step.method:
        params.append(f"- Method: {step.method}")
    if step.thickness_nm:
        params.append(f"- Thickness: {step.thickness_nm} nm")
    if step.temperature_c:
        params.append(f"- Temperature: {step.temperature_c}°C")
    if step.layer:
        params.append(f"- Mask Layer: {step.layer}")
    return params


def format_markdown(flow: ProcessFlow) -> str:
    lines: list[str] = []

    lines.append("# Fabrication Process Flow")
    lines.append("")
    lines.append("## Process Information")
    lines.append("")
    lines.append(f"- **Process**: {flow.name}")
    lines.append(f"- **Type**: {flow.process_type}")
    lines.append(f"- **Technology**: {flow.technology_node}")
    lines.append(f"- **Application**: {flow.application}")
    lines.append(f"- **Layout File**: {flow.layout_file}")
    lines.append(f"- **Total Steps**: {flow.total_steps}")
    lines.append(f"- **Estimated Duration**: {flow.estimated_duration_hours} hours")
    lines.append("")

    lines.append("## Process Steps")
    lines.append("")

    for step in flow.steps:
        lines.append(f"### Step {step.step}: {step.operation}")
        lines.append("")
        lines.append(step.description)
        lines.append("")

        params = _parameter_lines(step)
        if params:
            lines.append("**Parameters:**")
            lines.extend(params)
            lines.append("")

        if step.warning:
            lines.append(f"> ⚠️ **Warning**: {step.warning}")
            lines.append("")

    return "\n".join(lines) + "\n"
