"""Recipe loader — reads recipe_db/*.json files, parses and presence-checks them."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from .models import StepTemplate, Recipe, ValidationError, RecipeResult
from .store import RecipeStore


log = logging.getLogger(__name__)

RECIPE_DIR = Path(__file__).resolve().parent.parent / "recipe_db"
RECIPE_DIR_ENV = "FABFLOW_RECIPE_DIR"


def default_recipe_dir() -> Path:
    """The packaged recipe_db/, unless FABFLOW_RECIPE_DIR points elsewhere."""
    override = os.environ.get(RECIPE_DIR_ENV)
    return Path(override) if override else RECIPE_DIR


# ── Validation ─────────────────────────────────────────────────────

def _validate_recipe(recipe: Recipe) -> list[ValidationError]:
    """Presence checks only — the schema itself is not enforced."""
    errs: list[ValidationError] = []
    rid = recipe.id

    if not recipe.name:
        errs.append(ValidationError(rid, "name", "Must not be empty"))
    if not recipe.steps:
        errs.append(ValidationError(rid, "steps", "Recipe has no steps"))

    for st in recipe.steps:
        if not st.operation:
            errs.append(ValidationError(rid, f"steps.{st.step}.operation", "Missing operation"))
        if not st.description:
            errs.append(ValidationError(rid, f"steps.{st.step}.description", "Missing description"))

    return errs


# ── Parsing ────────────────────────────────────────────────────────

def _parse_step(data: dict, index: int) -> StepTemplate:
    return StepTemplate(
        step=int(data.get("step", index + 1)),
        operation=data.get("operation", ""),
        description=data.get("description", ""),
        layer=data.get("layer"),
        material=data.get("material"),
        method=data.get("method"),
        thickness_nm=data.get("thickness_nm"),
        temperature_c=data.get("temperature_c"),
        duration_min=data.get("duration_min"),
    )


def parse_recipe(data: dict, recipe_id: str | None = None, source_file: str = "") -> Recipe:
    """Parse a raw dict (from JSON) into a Recipe.

    The id comes from the data's "id" field, falling back to *recipe_id*
    (the file stem when loading from disk).
    """
    rid = data.get("id") or recipe_id
    if not rid:
        raise KeyError("id")
    return Recipe(
        id=rid,
        name=data["name"],
        steps=tuple(_parse_step(s, i) for i, s in enumerate(data["steps"])),
        technology_node=data.get("technology_node"),
        application=data.get("application"),
        source_file=source_file,
    )


# ── Public API ─────────────────────────────────────────────────────

def load_recipes(recipe_dir: Path | None = None) -> RecipeResult:
    """Load all recipe_db/*.json files, parse and presence-check them.

    Returns a RecipeResult with recipes and any validation errors.
    Recipes that fail to parse are skipped (error recorded).
    Recipes that parse but fail presence checks are still included.
    """
    d = Path(recipe_dir) if recipe_dir is not None else default_recipe_dir()
    recipes: list[Recipe] = []
    errors: list[ValidationError] = []

    json_files = sorted(d.glob("*.json"))
    if not json_files:
        errors.append(ValidationError("_recipes", "files", f"No .json files found in {d}"))
        return RecipeResult(recipes=recipes, errors=errors)

    for path in json_files:
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            errors.append(ValidationError(
                path.stem, "json", f"Parse error: {exc}"))
            continue
        except OSError as exc:
            errors.append(ValidationError(
                path.stem, "file", f"Read error: {exc}"))
            continue

        try:
            recipe = parse_recipe(raw, recipe_id=path.stem, source_file=str(path))
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            rid = raw.get("id", path.stem) if isinstance(raw, dict) else path.stem
            errors.append(ValidationError(
                rid, "parse", f"Missing/invalid field: {exc}"))
            continue

        errors.extend(_validate_recipe(recipe))
        recipes.append(recipe)

    # Check for duplicate IDs across files
    id_counts: dict[str, int] = {}
    for recipe in recipes:
        id_counts[recipe.id] = id_counts.get(recipe.id, 0) + 1
    for rid, count in id_counts.items():
        if count > 1:
            errors.append(ValidationError(rid, "id", f"Duplicate recipe ID (appears {count} times)"))

    return RecipeResult(recipes=recipes, errors=errors)


def load_recipe_store(recipe_dir: Path | None = None) -> RecipeStore:
    """Load the recipe database once and freeze it into a RecipeStore."""
    result = load_recipes(recipe_dir)
    for err in result.errors:
        log.warning("Recipe database: %s", err)
    store = RecipeStore.from_result(result)
    log.debug("Loaded %d recipes: %s", len(store), ", ".join(store.process_types))
    return store
