from enum import Enum
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


PACKAGE_DIR = Path(__file__).resolve().parent
SAMPLE_RECIPES = PACKAGE_DIR / "data" / "cake-recipes.json"


class Env(Enum):
    local = "local"
    dev = "dev"
    prod = "prod"


def default_recipes_path() -> Path:
    """`cake-recipes.json` in the working directory, else the bundled sample."""
    local = Path("cake-recipes.json")
    return local if local.exists() else SAMPLE_RECIPES


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CAKEBOOK_")

    env: Env = Env.local
    recipes_path: Path = Field(default_factory=default_recipes_path)
    templates_dir: Path = PACKAGE_DIR / "templates"
    log_level: str = "WARNING"
