"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict

from fastapi import FastAPI, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from meal_planner.api.views import render_page
from meal_planner.app_logging import configure_logging
from meal_planner.containers import AppContainer
from meal_planner.domain.planner import Phase, PlannerState

_logger = logging.getLogger(__name__)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        await _load_meals(app)
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container
    app.state.planner = PlannerState()

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/", response_class=HTMLResponse)
    async def index(request: Request) -> HTMLResponse:
        """Render the planner screen for the current state."""
        state = await _ensure_loaded(request.app)
        state_container: AppContainer = request.app.state.container
        shopping = state_container.planner_service.shopping_list(state)
        return HTMLResponse(render_page(state, shopping))

    @app.post("/plan/generate")
    async def generate_plan(request: Request) -> RedirectResponse:
        """Draft a new random meal plan."""
        planner = request.app.state.container.planner_service
        request.app.state.planner = planner.generate(request.app.state.planner)
        return _back_to_index()

    @app.post("/plan/meals/{meal_id}/refresh")
    async def refresh_meal(meal_id: str, request: Request) -> RedirectResponse:
        """Replace one meal of the draft."""
        planner = request.app.state.container.planner_service
        request.app.state.planner = planner.refresh(request.app.state.planner, meal_id)
        return _back_to_index()

    @app.post("/plan/accept")
    async def accept_plan(request: Request) -> RedirectResponse:
        """Accept the draft and show the shopping list."""
        planner = request.app.state.container.planner_service
        request.app.state.planner = planner.accept(request.app.state.planner)
        return _back_to_index()

    @app.post("/plan/back")
    async def back_to_selection(request: Request) -> RedirectResponse:
        """Return to the selection view."""
        planner = request.app.state.container.planner_service
        request.app.state.planner = planner.back(request.app.state.planner)
        return _back_to_index()

    @app.post("/meals/retry")
    async def retry_fetch(request: Request) -> RedirectResponse:
        """Fetch the meal sheet again."""
        await _load_meals(request.app)
        return _back_to_index()

    @app.get("/api/state")
    async def planner_state(request: Request) -> dict[str, object]:
        """Return the planner state as JSON."""
        state = await _ensure_loaded(request.app)
        return {
            "phase": state.phase.value,
            "source": state.source,
            "notice": state.notice,
            "meals": [asdict(meal) for meal in state.meals],
            "selected": [asdict(meal) for meal in state.selected],
            "accepted": [asdict(meal) for meal in state.accepted],
        }

    @app.get("/api/shopping-list")
    async def shopping_list(request: Request) -> dict[str, object]:
        """Return the aggregated shopping list of the accepted plan."""
        state_container: AppContainer = request.app.state.container
        items = state_container.planner_service.shopping_list(request.app.state.planner)
        return {"items": [asdict(item) for item in items]}

    return app


async def _load_meals(app: FastAPI) -> PlannerState:
    """Load meals into the app state and return the new state."""
    planner = app.state.container.planner_service
    state = planner.start_loading(app.state.planner)
    app.state.planner = state
    try:
        app.state.planner = await planner.load(state)
    except Exception:
        _logger.exception("Unexpected error while loading meals, using demo data")
        batch = planner.catalog.fallback_batch()
        app.state.planner = planner.finish_loading(state, batch)
    return app.state.planner


async def _ensure_loaded(app: FastAPI) -> PlannerState:
    """Load meals on first use when startup loading did not run."""
    state: PlannerState = app.state.planner
    if state.phase is Phase.IDLE:
        return await _load_meals(app)
    return state


def _back_to_index() -> RedirectResponse:
    return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)
