"""Process flow generation — recipe + layout → ProcessFlow."""

from __future__ import annotations

import logging

from fabflow.layout.models import Layout
from fabflow.pipeline.config import PLANNING_RULES, PlanningRules
from fabflow.recipes.store import RecipeStore

from .duration import calculate_duration
from .mapping import map_layers_to_steps
from .models import ProcessFlow, LAYER_MISSING


log = logging.getLogger(__name__)


def generate_flow(
    layout: Layout,
    store: RecipeStore,
    process_type: str | None = None,
    rules: PlanningRules = PLANNING_RULES,
) -> ProcessFlow:
    """Merge the recipe for *process_type* with *layout*.

    Args:
        layout: Layout from any LayoutProvider.
        store: Recipe table loaded at start-up.
        process_type: Recipe id; defaults to rules.default_process_type
            ("cmos_standard").

    Raises:
        UnknownProcessTypeError: no recipe for *process_type*.  Layers the
            recipe needs but the layout lacks are reported as step
            warnings instead.
    """
    process_type = process_type or rules.default_process_type
    recipe = store.lookup(process_type)

    steps = map_layers_to_steps(layout, recipe)
    total_duration = calculate_duration(steps, rules)

    missing = sum(1 for s in steps if s.status == LAYER_MISSING)
    log.info("Flow %s for %s: %d steps, %d missing layers, %.1f h",
             process_type, layout.filename, len(steps), missing, total_duration)

    return ProcessFlow(
        name=recipe.name,
        process_type=process_type,
        technology_node=recipe.technology_node or "N/A",
        application=recipe.application or "General",
        layout_file=layout.filename,
        layers_used=len(layout.layers),
        steps=tuple(steps),
        total_steps=len(steps),
        estimated_duration_hours=total_duration,
    )
