"""Map recipe steps onto the layout's mask layers."""

from __future__ import annotations

import logging

from fabflow.layout.models import Layer, Layout
from fabflow.recipes.models import Recipe, StepTemplate

from .models import MappedStep, MATCHED, LAYER_MISSING, LAYER_INDEPENDENT


log = logging.getLogger(__name__)


def build_layer_index(layout: Layout) -> dict[str, Layer]:
    """Name → Layer.  A later layer with the same name replaces an earlier one."""
    index: dict[str, Layer] = {}
    for layer in layout.layers:
        index[layer.name] = layer
    return index


def map_step(template: StepTemplate, layer_index: dict[str, Layer]) -> MappedStep:
    """Annotate a single step; every template attribute is carried over."""
    common = dict(
        step=template.step,
        operation=template.operation,
        description=template.description,
        layer=template.layer,
        material=template.material,
        method=template.method,
        thickness_nm=template.thickness_nm,
        temperature_c=template.temperature_c,
        duration_min=template.duration_min,
    )

    if template.layer and template.layer in layer_index:
        layer = layer_index[template.layer]
        return MappedStep(
            **common,
            status=MATCHED,
            layout_layer=layer.number,
            feature_count=layer.feature_count,
        )
    if template.layer:
        return MappedStep(
            **common,
            status=LAYER_MISSING,
            warning=f"Layer {template.layer} not found in layout",
        )
    return MappedStep(**common, status=LAYER_INDEPENDENT)


def map_layers_to_steps(layout: Layout, recipe: Recipe) -> list[MappedStep]:
    """One MappedStep per recipe step, in recipe order.

    A missing layer is a soft warning on the step, never an error.
    """
    layer_index = build_layer_index(layout)
    steps: list[MappedStep] = []

    for template in recipe.steps:
        mapped = map_step(template, layer_index)
        if mapped.status == LAYER_MISSING:
            log.warning("Step %d (%s): %s", mapped.step, mapped.operation, mapped.warning)
        else:
            log.debug("Step %d (%s): %s", mapped.step, mapped.operation, mapped.status)
        steps.append(mapped)

    return steps
