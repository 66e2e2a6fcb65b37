import io

from jinja2 import Environment
from rich.console import Console
import pytest

from cakebook.config import PACKAGE_DIR
from cakebook.views import template_environment


@pytest.fixture
def environment() -> Environment:
    return template_environment(PACKAGE_DIR / "templates")


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=200)


@pytest.fixture
def recipes() -> list[dict[str, object]]:
    return [
        {
            "Name": "Christmas pie",
            "Author": "Mary Cadogan",
            "url": "https://example.com/christmas-pie",
            "Description": "A festive pie",
            "Ingredients": ["2 tbsp olive oil", "1 onion", "beaten egg"],
        },
        {
            "name": "Chocolate cake",
            "author": "sarah cook",
            "ingredients": ["Cocoa Powder", "egg", "flour"],
        },
        {
            "Title": "Lemon drizzle",
            "Chef": "Anonymous",
            "Ingredients": ["butter", 4, "eggs"],
        },
        {
            "Name": "Plain sponge",
            "Author": "Mary Cadogan",
        },
    ]
