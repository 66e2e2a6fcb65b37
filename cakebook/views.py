from collections.abc import Iterable
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from cakebook.models import (
    Ingredient,
    display_name,
    get_author,
    get_description,
    get_ingredients,
    get_url,
)


MENU_OPTIONS = (
    (1, "Show All Authors"),
    (2, "Show Recipe names by Author"),
    (3, "Show Recipe names by Ingredient"),
    (4, "Get Recipe by Name (and optionally save ingredients)"),
    (5, "Get All Ingredients of Saved Recipes"),
)


def template_environment(templates_dir: Path) -> Environment:
    return Environment(
        loader=FileSystemLoader(templates_dir),
        autoescape=select_autoescape(),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


class RecipeDetail:
    def __init__(
        self,
        recipe: Any,
        *,
        environment: Environment,
        template_name: str = "recipe-detail.txt",
    ) -> None:
        self.recipe = recipe
        self.env = environment
        self.name = template_name

    @property
    def title(self) -> str:
        return display_name(self.recipe)

    @property
    def author(self) -> str | None:
        return get_author(self.recipe)

    @property
    def url(self) -> str | None:
        return get_url(self.recipe)

    @property
    def description(self) -> str | None:
        return get_description(self.recipe)

    @property
    def ingredients(self) -> list[Ingredient]:
        return get_ingredients(self.recipe)

    def render(self) -> str:
        recipe = None if self.recipe is None else self
        return self.env.get_template(self.name).render(recipe=recipe)


class RecipeNames:
    def __init__(
        self,
        recipes: Iterable[Any] | None,
        *,
        environment: Environment,
        template_name: str = "recipe-names.txt",
    ) -> None:
        self.recipes = list(recipes or [])
        self.env = environment
        self.name = template_name

    @property
    def names(self) -> list[str]:
        return [display_name(r) for r in self.recipes]

    def render(self) -> str:
        return self.env.get_template(self.name).render(names=self.names)


class Menu:
    def __init__(
        self,
        *,
        environment: Environment,
        template_name: str = "menu.txt",
    ) -> None:
        self.env = environment
        self.name = template_name

    def render(self) -> str:
        return self.env.get_template(self.name).render(options=MENU_OPTIONS)
