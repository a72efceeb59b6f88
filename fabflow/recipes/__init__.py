"""Recipe database — load, presence-check, look up and serialize recipe_db/*.json."""

from .models import (
    StepTemplate, Recipe, ValidationError, RecipeResult, UnknownProcessTypeError,
)
from .store import RecipeStore
from .loader import (
    load_recipes, load_recipe_store, parse_recipe, default_recipe_dir,
    RECIPE_DIR, RECIPE_DIR_ENV,
)
from .serialization import step_to_dict, recipe_to_dict, recipe_summary, recipes_to_dict

__all__ = [
    # Models
    "StepTemplate", "Recipe", "ValidationError", "RecipeResult",
    "UnknownProcessTypeError",
    # Store
    "RecipeStore",
    # Loader
    "load_recipes", "load_recipe_store", "parse_recipe", "default_recipe_dir",
    "RECIPE_DIR", "RECIPE_DIR_ENV",
    # Serialization
    "step_to_dict", "recipe_to_dict", "recipe_summary", "recipes_to_dict",
]
