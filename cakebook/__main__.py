import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from cakebook import config
from cakebook.repository import RecipeDataError, RecipeRepository
from cakebook.services import RecipeSession
from cakebook.shell import Shell
from cakebook.views import template_environment


logger = logging.getLogger("cakebook")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True))],
    )


def main() -> int:
    settings = config.Config()
    configure_logging(settings.log_level)

    try:
        recipes = RecipeRepository(settings.recipes_path).list()
    except RecipeDataError as e:
        logger.error("Could not load recipes: %s", e)
        return 1

    session = RecipeSession(recipes)
    shell = Shell(
        session,
        environment=template_environment(settings.templates_dir),
        source=settings.recipes_path.name,
    )
    shell.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
