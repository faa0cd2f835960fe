"""Application state for the meal planning screen."""

from dataclasses import dataclass, field
from enum import StrEnum

from meal_planner.domain.meals import LIVE_SOURCE, Meal


class Phase(StrEnum):
    """Screen phases of the planner."""

    IDLE = "idle"
    LOADING = "loading"
    SELECTING = "selecting"
    REVIEWING = "reviewing"
    ERROR = "error"


@dataclass(frozen=True)
class PlannerState:
    """Snapshot of everything the screen renders.

    ``ERROR`` means the live source failed and the demo meals are in use; plan
    actions behave as in ``SELECTING`` and ``notice`` stays set until a live
    load succeeds.
    """

    phase: Phase = Phase.IDLE
    meals: list[Meal] = field(default_factory=list)
    selected: list[Meal] = field(default_factory=list)
    accepted: list[Meal] = field(default_factory=list)
    source: str = LIVE_SOURCE
    notice: str | None = None

    @property
    def can_plan(self) -> bool:
        return self.phase in {Phase.SELECTING, Phase.ERROR, Phase.REVIEWING} and bool(
            self.meals
        )
