"""The interactive menu on top of a `RecipeSession`."""

import logging
import re
from collections.abc import Callable
from typing import TypeAlias

from jinja2 import Environment
from rich.console import Console

from cakebook.services import RecipeSession
from cakebook.views import Menu, RecipeDetail, RecipeNames


logger = logging.getLogger(__name__)


Ask: TypeAlias = Callable[[str], str]


EXIT = 0
LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_choice(raw: str) -> int | None:
    """The integer `raw` starts with, `"2abc"` gives 2, `"abc"` gives None."""
    match = LEADING_INT.match(raw)
    return int(match.group(1)) if match else None


class Shell:
    def __init__(
        self,
        session: RecipeSession,
        *,
        environment: Environment,
        console: Console | None = None,
        ask: Ask | None = None,
        source: str = "cake-recipes.json",
    ) -> None:
        self.session = session
        self.env = environment
        self.console = Console() if console is None else console
        self._ask = self.console.input if ask is None else ask
        self.source = source
        self.actions: dict[int, Callable[[], None]] = {
            1: self.show_authors,
            2: self.show_by_author,
            3: self.show_by_ingredient,
            4: self.show_by_name,
            5: self.show_saved_ingredients,
        }

    def say(self, text: str = "", *, end: str = "\n", style: str | None = None) -> None:
        self.console.print(
            text, end=end, style=style, markup=False, highlight=False, emoji=False
        )

    def ask(self, question: str) -> str:
        return self._ask(question).strip()

    def pause(self) -> None:
        self.ask("\nPress Enter to continue...")

    def run(self) -> None:
        if not self.session.recipes:
            self.say(f"No recipes loaded. Check {self.source}.")
            return

        try:
            while self.step():
                pass
        except (EOFError, KeyboardInterrupt):
            logger.debug("Input closed, leaving the menu.")
            self.say("\nExiting...")

    def step(self) -> bool:
        """Show the menu and handle one choice. False once the user exits."""
        self.say(Menu(environment=self.env).render(), end="")
        choice = parse_choice(self.ask("Enter a number (1-5) or 0 to exit: "))

        if choice == EXIT:
            self.say("Exiting...")
            return False

        action = self.actions.get(choice) if choice is not None else None
        if action is None:
            self.say("Invalid input. Please enter a number between 0 and 5.", style="red")
            return True

        action()
        self.pause()
        return True

    def show_authors(self) -> None:
        authors = self.session.list_authors()
        self.say("\nAll Authors:")
        if not authors:
            self.say("(none found)")
        for author in authors:
            self.say(author)

    def show_by_author(self) -> None:
        author = self.ask("Enter author name: ")
        found = self.session.by_author(author)
        self.say(f"\nRecipes by {author}:")
        self.say(RecipeNames(found, environment=self.env).render(), end="")

    def show_by_ingredient(self) -> None:
        ingredient = self.ask("Enter ingredient: ")
        found = self.session.by_ingredient(ingredient)
        self.say(f'\nRecipes containing "{ingredient}":')
        self.say(RecipeNames(found, environment=self.env).render(), end="")

    def show_by_name(self) -> None:
        name = self.ask("Enter recipe name (or part of it): ")
        recipe = self.session.find_by_name(name)
        self.say("\nResult:")
        self.say(RecipeDetail(recipe, environment=self.env).render(), end="")

        if recipe is None:
            return

        answer = self.ask("\nSave this recipe's ingredients? (y/n): ").lower()
        if answer not in ("y", "yes"):
            self.say("Not saved.")
            return

        result = self.session.save_ingredients(recipe)
        self.say(
            f"Saved {result.saved} ingredients. Total saved items: {result.total}."
        )

    def show_saved_ingredients(self) -> None:
        saved = self.session.list_saved_ingredients()
        self.say("\nAll Saved Ingredients:")
        if not saved:
            self.say("(none saved yet)")
        for ingredient in saved:
            self.say(f"- {ingredient}")
