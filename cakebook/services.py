import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from cakebook.models import Ingredient, Recipe, get_ingredients, ingredient_text
from cakebook.queries import (
    as_collection,
    find_recipe_by_name,
    get_recipes_by_author,
    get_recipes_by_ingredient,
    get_unique_authors,
)


logger = logging.getLogger(__name__)


def merge_unique(base: list[Any], to_add: Iterable[Any]) -> list[Any]:
    """Append the items of `to_add` whose string form is not in `base` yet.

    Mutates and returns `base`. Items are compared by `ingredient_text`, so
    `1` and `"1"` count as the same entry.
    """
    seen = {ingredient_text(x) for x in base}
    for x in to_add:
        s = ingredient_text(x)
        if s not in seen:
            seen.add(s)
            base.append(x)
    return base


class SavedIngredients:
    def __init__(self) -> None:
        self._items: list[Ingredient] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(tuple(self._items))

    def merge(self, ingredients: Iterable[Ingredient]) -> int:
        """Merge `ingredients` in, returning how many were new."""
        before = len(self._items)
        merge_unique(self._items, ingredients)
        return len(self._items) - before

    def to_list(self) -> list[Ingredient]:
        return list(self._items)


@dataclass(frozen=True)
class SaveResult:
    saved: int
    added: int
    total: int


class RecipeSession:
    """One run of the shell: the recipe collection plus the saved ingredients."""

    def __init__(
        self,
        recipes: Any,
        *,
        saved: SavedIngredients | None = None,
    ) -> None:
        self.recipes = as_collection(recipes)
        self.saved = SavedIngredients() if saved is None else saved

    def list_authors(self) -> list[str]:
        return sorted(get_unique_authors(self.recipes))

    def by_author(self, query: str) -> list[Recipe]:
        return get_recipes_by_author(self.recipes, query)

    def by_ingredient(self, query: str) -> list[Recipe]:
        return get_recipes_by_ingredient(self.recipes, query)

    def find_by_name(self, query: str) -> Recipe | None:
        return find_recipe_by_name(self.recipes, query)

    def save_ingredients(self, recipe: Recipe) -> SaveResult:
        ingredients = get_ingredients(recipe)
        added = self.saved.merge(ingredients)
        logger.debug("Saved %d new of %d ingredients.", added, len(ingredients))
        return SaveResult(saved=len(ingredients), added=added, total=len(self.saved))

    def list_saved_ingredients(self) -> list[Ingredient]:
        return self.saved.to_list()
