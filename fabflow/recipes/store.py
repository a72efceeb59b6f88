"""Read-only recipe lookup keyed by process type."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping

from .models import Recipe, RecipeResult, UnknownProcessTypeError


class RecipeStore:
    """Immutable process-type → Recipe table.

    Built once per invocation and handed to the planner; there is no
    mutation API.
    """

    __slots__ = ("_recipes",)

    def __init__(self, recipes: Mapping[str, Recipe]) -> None:
        self._recipes = MappingProxyType(dict(recipes))

    @classmethod
    def from_result(cls, result: RecipeResult) -> RecipeStore:
        """First occurrence wins when a recipe id is duplicated."""
        table: dict[str, Recipe] = {}
        for recipe in result.recipes:
            table.setdefault(recipe.id, recipe)
        return cls(table)

    @property
    def process_types(self) -> tuple[str, ...]:
        return tuple(sorted(self._recipes))

    def lookup(self, process_type: str) -> Recipe:
        try:
            return self._recipes[process_type]
        except KeyError:
            raise UnknownProcessTypeError(process_type, self.process_types) from None

    def recipes(self) -> list[Recipe]:
        """All recipes, ordered by process type."""
        return [self._recipes[pt] for pt in self.process_types]

    def __contains__(self, process_type: object) -> bool:
        return process_type in self._recipes

    def __iter__(self) -> Iterator[str]:
        return iter(self.process_types)

    def __len__(self) -> int:
        return len(self._recipes)
