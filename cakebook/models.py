import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias


Recipe: TypeAlias = Mapping[str, Any]
Ingredient: TypeAlias = str


NAME_KEYS = ("Name", "name", "Title")
AUTHOR_KEYS = ("Author", "author", "Chef")
INGREDIENTS_KEYS = ("Ingredients", "ingredients")
URL_KEYS = ("url",)
DESCRIPTION_KEYS = ("Description",)

UNNAMED_RECIPE = "(unnamed recipe)"


@dataclass(frozen=True)
class ResolvedField:
    """Outcome of looking a logical field up in a record.

    `key` is the candidate key that supplied the value, `None` when no
    candidate was present with a non-null value.
    """

    key: str | None = None
    value: Any = None

    @property
    def found(self) -> bool:
        return self.key is not None


MISSING = ResolvedField()


def resolve_field(record: Any, keys: tuple[str, ...]) -> ResolvedField:
    if not isinstance(record, Mapping):
        return MISSING
    for key in keys:
        value = record.get(key)
        if value is not None:
            return ResolvedField(key=key, value=value)
    return MISSING


def ingredient_text(value: Any) -> Ingredient:
    """The external string form of a value: strings as-is, anything else as JSON.

    Whole-number floats are written as integers, so `1.0` reads `"1"`.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    try:
        return json.dumps(value, ensure_ascii=False)
    except (TypeError, ValueError):
        return str(value)


def is_blank(value: Any) -> bool:
    """`None`, `False`, zero and `""`, the values a record uses for "nothing"."""
    return value is None or value in (False, 0, "")


def _text(field: ResolvedField) -> str | None:
    return ingredient_text(field.value) if field.found else None


def get_name(recipe: Any) -> str | None:
    return _text(resolve_field(recipe, NAME_KEYS))


def get_author(recipe: Any) -> str | None:
    """The resolved author, `None` when it is missing or blank."""
    field = resolve_field(recipe, AUTHOR_KEYS)
    return None if is_blank(field.value) else _text(field)


def get_ingredients(recipe: Any) -> list[Ingredient]:
    raw = resolve_field(recipe, INGREDIENTS_KEYS).value
    if not isinstance(raw, (list, tuple)):
        return []
    return [ingredient_text(i) for i in raw]


def get_url(recipe: Any) -> str | None:
    return _text(resolve_field(recipe, URL_KEYS))


def get_description(recipe: Any) -> str | None:
    return _text(resolve_field(recipe, DESCRIPTION_KEYS))


def display_name(recipe: Any) -> str:
    name = get_name(recipe)
    return UNNAMED_RECIPE if name is None else name
