"""State machine driving the meal planning screen."""

import logging
from dataclasses import dataclass, replace

from meal_planner.domain.meals import AggregatedIngredient, MealBatch
from meal_planner.domain.planner import Phase, PlannerState
from meal_planner.services.catalog import MealCatalogService
from meal_planner.services.ingredients import aggregate_ingredients
from meal_planner.services.recent import RecentSelectionMemory
from meal_planner.services.selection import MealSelector

_logger = logging.getLogger(__name__)

_DRAFTING_PHASES = {Phase.SELECTING, Phase.ERROR}


@dataclass
class PlannerService:
    """Applies user and loading events to ``PlannerState`` snapshots."""

    catalog: MealCatalogService
    selector: MealSelector
    memory: RecentSelectionMemory
    plan_size: int = 5

    async def load(self, state: PlannerState) -> PlannerState:
        """Run a full catalog load starting from ``state``."""
        loading = self.start_loading(state)
        batch = await self.catalog.load()
        return self.finish_loading(loading, batch)

    def start_loading(self, state: PlannerState) -> PlannerState:
        """Enter the loading phase."""
        return replace(state, phase=Phase.LOADING)

    def finish_loading(self, state: PlannerState, batch: MealBatch) -> PlannerState:
        """Install a freshly loaded batch of meals."""
        if batch.is_fallback:
            return replace(
                state,
                phase=Phase.ERROR,
                meals=batch.meals,
                source=batch.source,
                notice=batch.notice,
            )
        return replace(
            state,
            phase=Phase.SELECTING,
            meals=batch.meals,
            source=batch.source,
            notice=None,
        )

    def generate(self, state: PlannerState) -> PlannerState:
        """Draft a new random plan."""
        if not state.can_plan:
            return state
        recent_ids = self.memory.load()
        selected = self.selector.draft_plan(state.meals, recent_ids, self.plan_size)
        return replace(state, phase=self._drafting_phase(state), selected=selected)

    def refresh(self, state: PlannerState, meal_id: str) -> PlannerState:
        """Swap one meal of the current draft."""
        if state.phase not in _DRAFTING_PHASES:
            return state
        selected = self.selector.refresh_meal(state.meals, state.selected, meal_id)
        return replace(state, selected=selected)

    def accept(self, state: PlannerState) -> PlannerState:
        """Freeze the current draft and remember it for the next plan."""
        if state.phase not in _DRAFTING_PHASES or not state.selected:
            return state
        try:
            self.memory.save(meal.id for meal in state.selected)
        except Exception:
            _logger.exception("Failed to save accepted meal ids")
        return replace(state, phase=Phase.REVIEWING, accepted=list(state.selected))

    def back(self, state: PlannerState) -> PlannerState:
        """Return to the selection view, keeping the accepted plan."""
        if state.phase is not Phase.REVIEWING:
            return state
        return replace(state, phase=self._drafting_phase(state))

    def shopping_list(self, state: PlannerState) -> list[AggregatedIngredient]:
        """Aggregate the ingredients of the accepted plan."""
        return aggregate_ingredients(state.accepted)

    @staticmethod
    def _drafting_phase(state: PlannerState) -> Phase:
        return Phase.ERROR if state.notice else Phase.SELECTING
