import json
import logging
from pathlib import Path

from cakebook.models import Recipe
from cakebook.queries import as_collection


logger = logging.getLogger(__name__)


class RecipeDataError(Exception):
    pass


class RecipeFileNotFound(RecipeDataError):
    pass


class RecipeFileInvalid(RecipeDataError):
    pass


class RecipeRepository:
    """Recipes read from a JSON file holding a list of records."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> object:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except FileNotFoundError as e:
            raise RecipeFileNotFound(f"{self.path}") from e
        except json.JSONDecodeError as e:
            raise RecipeFileInvalid(f"Invalid JSON in {self.path}: {e}") from e
        except UnicodeDecodeError as e:
            raise RecipeFileInvalid(f"{self.path} is not UTF-8 text: {e}") from e
        except OSError as e:
            raise RecipeDataError(f"Could not read {self.path}: {e}") from e

    def list(self) -> list[Recipe]:
        raw = self.load()
        if not isinstance(raw, list):
            logger.warning("%s does not hold a list of recipes.", self.path)
        recipes = as_collection(raw)
        logger.info("Loaded %d recipes from %s.", len(recipes), self.path)
        return recipes
