"""Recipe serialization — convert dataclasses to JSON-safe dicts."""

from __future__ import annotations

from typing import Any

from .models import Recipe, RecipeResult, StepTemplate

_OPTIONAL_STEP_FIELDS = (
    "layer", "material", "method", "thickness_nm", "temperature_c", "duration_min",
)


def step_to_dict(st: StepTemplate) -> dict:
    """Serialize a StepTemplate, omitting attributes the recipe left out."""
    d: dict[str, Any] = {
        "step": st.step,
        "operation": st.operation,
        "description": st.description,
    }
    for key in _OPTIONAL_STEP_FIELDS:
        value = getattr(st, key)
        if value is not None:
            d[key] = value
    return d


def recipe_to_dict(r: Recipe) -> dict:
    """Serialize a Recipe to a JSON-safe dict (same shape as recipe_db/*.json)."""
    d: dict[str, Any] = {
        "id": r.id,
        "name": r.name,
        **({"technology_node": r.technology_node} if r.technology_node else {}),
        **({"application": r.application} if r.application else {}),
        "steps": [step_to_dict(st) for st in r.steps],
    }
    return d


def recipe_summary(r: Recipe) -> dict:
    """Short description used by `list-recipes` and GET /api/recipes."""
    return {
        "id": r.id,
        "name": r.name,
        "steps": len(r.steps),
        "technology_node": r.technology_node,
        "application": r.application,
    }


def recipes_to_dict(result: RecipeResult) -> dict:
    """Serialize a RecipeResult (recipes + load errors)."""
    return {
        "ok": result.ok,
        "recipe_count": len(result.recipes),
        "recipes": [recipe_to_dict(r) for r in result.recipes],
        "errors": [{"recipe_id": e.recipe_id, "field": e.field, "message": e.message}
                   for e in result.errors],
    }
