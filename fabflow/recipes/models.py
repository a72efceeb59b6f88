"""Recipe dataclasses — typed representations of recipe_db/*.json entries."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StepTemplate:
    step: int                           # 1-based position within the recipe
    operation: str                      # "lithography" | "etch" | "deposition" | ...
    description: str
    layer: str | None = None            # mask layer this step depends on
    material: str | None = None
    method: str | None = None
    thickness_nm: float | None = None
    temperature_c: float | None = None
    duration_min: float | None = None


@dataclass(frozen=True)
class Recipe:
    id: str                             # process type, e.g. "cmos_standard"
    name: str
    steps: tuple[StepTemplate, ...]
    technology_node: str | None = None
    application: str | None = None
    source_file: str = ""               # path of the JSON file (for error reporting)


@dataclass
class ValidationError:
    recipe_id: str
    field: str
    message: str

    def __str__(self) -> str:
        return f"[{self.recipe_id}] {self.field}: {self.message}"


@dataclass
class RecipeResult:
    """Result of loading the recipe database — recipes + any validation errors."""
    recipes: list[Recipe]
    errors: list[ValidationError]

    @property
    def ok(self) -> bool:
        return len(self.errors) == 0


class UnknownProcessTypeError(Exception):
    """Raised when a process type has no recipe in the store."""

    def __init__(self, process_type: str, known: tuple[str, ...] = ()) -> None:
        self.process_type = process_type
        self.known = known
        super().__init__(f"Unknown process type: {process_type}")
