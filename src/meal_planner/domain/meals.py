"""Domain models for meals and shopping list entries."""

from dataclasses import dataclass, field

LIVE_SOURCE = "live"
FALLBACK_SOURCE = "fallback"


@dataclass(frozen=True)
class Meal:
    """A meal reconstructed from the source sheet."""

    id: str
    meal_name: str
    category: str = ""
    specialist: str = ""
    main_ingredient: str = ""
    book: str = ""
    page: str = ""
    serves: str = ""
    ingredients_list: str = ""


@dataclass(frozen=True)
class ParsedIngredient:
    """One ingredient line split into quantity, unit and name."""

    quantity: float
    unit: str
    name: str
    raw: str


@dataclass
class AggregatedIngredient:
    """Shopping list entry merging every line with the same name and unit."""

    name: str
    unit: str
    quantity: float = 0.0
    items: list[ParsedIngredient] = field(default_factory=list)

    def add(self, item: ParsedIngredient) -> None:
        """Accumulate a parsed line into this entry."""
        self.quantity += item.quantity
        self.items.append(item)


@dataclass(frozen=True)
class MealBatch:
    """Meals from one catalog load with their provenance."""

    meals: list[Meal]
    source: str
    notice: str | None = None

    @property
    def is_fallback(self) -> bool:
        return self.source == FALLBACK_SOURCE
