"""Random drafting of meal plans."""

from collections.abc import Collection, Sequence
from dataclasses import dataclass
from typing import Protocol, TypeVar

from meal_planner.domain.meals import Meal

_T = TypeVar("_T")


class RandomSource(Protocol):
    """Source of randomness; ``random.Random`` satisfies it."""

    def sample(self, population: Sequence[_T], k: int) -> list[_T]:
        """Return ``k`` distinct items chosen from the population."""

    def choice(self, seq: Sequence[_T]) -> _T:
        """Return one random item from a non-empty sequence."""


@dataclass
class MealSelector:
    """Draws plans and replacement meals from the catalog."""

    rng: RandomSource

    def draft_plan(
        self, meals: Sequence[Meal], recent_ids: Collection[str], count: int = 5
    ) -> list[Meal]:
        """Pick up to ``count`` meals, avoiding recently accepted ones if possible."""
        candidates = [meal for meal in meals if meal.id not in recent_ids]
        if len(candidates) < count:
            candidates = list(meals)
        return self.rng.sample(candidates, min(count, len(candidates)))

    def refresh_meal(
        self, meals: Sequence[Meal], selected: Sequence[Meal], meal_id: str
    ) -> list[Meal]:
        """Swap one selected meal for a random meal that is not selected."""
        if not any(meal.id == meal_id for meal in selected):
            return list(selected)
        selected_ids = {meal.id for meal in selected}
        alternatives = [meal for meal in meals if meal.id not in selected_ids]
        if not alternatives:
            return list(selected)
        replacement = self.rng.choice(alternatives)
        return [replacement if meal.id == meal_id else meal for meal in selected]
