"""Pure queries over a recipe collection.

None of these mutate their input or raise on malformed records; a record the
accessors cannot read simply never matches.
"""

from collections.abc import Iterable, Sequence
from typing import Any

from cakebook.models import Ingredient, Recipe, get_author, get_ingredients, get_name


def as_collection(raw: Any) -> list[Recipe]:
    """The records of a parsed data source, or nothing if it is not a list."""
    if not isinstance(raw, (list, tuple)):
        return []
    return list(raw)


def get_unique_authors(recipes: Iterable[Recipe]) -> list[str]:
    """Distinct resolved authors in first-seen order. Unsorted."""
    authors: dict[str, None] = {}
    for recipe in recipes:
        author = get_author(recipe)
        if author:
            authors.setdefault(author)
    return list(authors)


def get_recipes_by_author(recipes: Iterable[Recipe], author: str) -> list[Recipe]:
    q = str(author).lower()
    return [r for r in recipes if (get_author(r) or "").lower() == q]


def get_recipes_by_ingredient(
    recipes: Iterable[Recipe],
    ingredient: str,
) -> list[Recipe]:
    q = str(ingredient).lower()
    return [r for r in recipes if any(q in i.lower() for i in get_ingredients(r))]


def find_recipe_by_name(recipes: Iterable[Recipe], name: str) -> Recipe | None:
    q = str(name).lower()
    return next((r for r in recipes if q in (get_name(r) or "").lower()), None)


def get_all_ingredients(recipes: Sequence[Recipe]) -> list[Ingredient]:
    return [i for r in recipes for i in get_ingredients(r)]
