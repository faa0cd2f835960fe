"""Ingredient line parsing and shopping list aggregation."""

import re
import unicodedata
from collections.abc import Iterable

from meal_planner.domain.meals import AggregatedIngredient, Meal, ParsedIngredient

# Words recognised as a unit after the leading quantity. Anything else is
# treated as the start of the ingredient name, so "2 eggs" keeps "eggs".
UNIT_WORDS: frozenset[str] = frozenset(
    {
        # weight
        "g",
        "gram",
        "grams",
        "kg",
        "kilogram",
        "kilograms",
        "mg",
        "oz",
        "ounce",
        "ounces",
        "lb",
        "lbs",
        "pound",
        "pounds",
        # volume
        "ml",
        "millilitre",
        "millilitres",
        "milliliter",
        "milliliters",
        "cl",
        "dl",
        "l",
        "litre",
        "litres",
        "liter",
        "liters",
        "pint",
        "pints",
        "pt",
        "qt",
        "quart",
        "quarts",
        "floz",
        # spoons and cups
        "tsp",
        "tsps",
        "teaspoon",
        "teaspoons",
        "tbsp",
        "tbsps",
        "tbs",
        "tablespoon",
        "tablespoons",
        "cup",
        "cups",
        "mug",
        "mugs",
        # packaging
        "can",
        "cans",
        "tin",
        "tins",
        "jar",
        "jars",
        "pack",
        "packs",
        "packet",
        "packets",
        "bag",
        "bags",
        "bottle",
        "bottles",
        "carton",
        "cartons",
        "bunch",
        "bunches",
        "handful",
        "handfuls",
        "pinch",
        "pinches",
        "slice",
        "slices",
        "sprig",
        "sprigs",
        "stick",
        "sticks",
        "knob",
        "knobs",
    }
)

_WITH_UNIT = re.compile(r"^(\d+(?:\.\d+)?)\s*([A-Za-z]+)\s+(.+)$")
_WITHOUT_UNIT = re.compile(r"^(\d+(?:\.\d+)?)\s+(.+)$")


def parse_ingredient(line: str) -> ParsedIngredient:
    """Split a free-text ingredient line into quantity, unit and name.

    Lines without a leading number become zero-quantity entries named after
    the whole line, so parsing never fails.
    """
    trimmed = line.strip()
    match = _WITH_UNIT.match(trimmed)
    if match and match.group(2).lower() in UNIT_WORDS:
        return ParsedIngredient(
            quantity=float(match.group(1)),
            unit=match.group(2).lower(),
            name=match.group(3).strip().lower(),
            raw=trimmed,
        )
    match = _WITHOUT_UNIT.match(trimmed)
    if match:
        return ParsedIngredient(
            quantity=float(match.group(1)),
            unit="",
            name=match.group(2).strip().lower(),
            raw=trimmed,
        )
    return ParsedIngredient(quantity=0.0, unit="", name=trimmed.lower(), raw=trimmed)


def collation_key(name: str) -> str:
    """Return a sort key that ignores accents and case, so "éclair" sorts by "e"."""
    decomposed = unicodedata.normalize("NFKD", name)
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return stripped.casefold()


def aggregate_ingredients(meals: Iterable[Meal]) -> list[AggregatedIngredient]:
    """Merge ingredient lines across meals into a sorted shopping list."""
    grouped: dict[tuple[str, str], AggregatedIngredient] = {}
    for meal in meals:
        for line in meal.ingredients_list.split("\n"):
            if not line.strip():
                continue
            parsed = parse_ingredient(line)
            key = (parsed.name, parsed.unit)
            entry = grouped.get(key)
            if entry is None:
                entry = AggregatedIngredient(name=parsed.name, unit=parsed.unit)
                grouped[key] = entry
            entry.add(parsed)
    return sorted(
        grouped.values(),
        key=lambda entry: (collation_key(entry.name), entry.name, entry.unit),
    )
