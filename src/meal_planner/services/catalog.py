"""Meal catalog loading with fallback to demo data."""

import logging
from dataclasses import dataclass

import httpx
from pydantic import ValidationError

from meal_planner.adapters.sheet_client import MealSheetClient
from meal_planner.domain.errors import MealSourceError, ShapeError, TransportError
from meal_planner.domain.fallback import FALLBACK_NOTICE, fallback_meals
from meal_planner.domain.meals import FALLBACK_SOURCE, LIVE_SOURCE, Meal, MealBatch
from meal_planner.domain.sheet import RawRow, SheetResponse
from meal_planner.services.reconstruction import reconstruct

_logger = logging.getLogger(__name__)


@dataclass
class MealCatalogService:
    """Loads meals from the sheet, degrading to demo data on failure."""

    client: MealSheetClient

    async def load(self) -> MealBatch:
        """Return live meals, or the demo meals with a notice on failure."""
        try:
            meals = await self.fetch_meals()
        except MealSourceError:
            _logger.exception("Meal source unavailable, using demo data")
            return self.fallback_batch()
        _logger.info("Loaded %s meals from the meal sheet", len(meals))
        return MealBatch(meals=meals, source=LIVE_SOURCE)

    @staticmethod
    def fallback_batch() -> MealBatch:
        """Return the demo meals with the fallback notice."""
        return MealBatch(
            meals=fallback_meals(),
            source=FALLBACK_SOURCE,
            notice=FALLBACK_NOTICE,
        )

    async def fetch_meals(self) -> list[Meal]:
        """Fetch and reconstruct live meals, raising ``MealSourceError``."""
        try:
            payload = await self.client.fetch_rows()
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as exc:
            raise TransportError(str(exc)) from exc
        except ValueError as exc:
            raise ShapeError(f"Response is not valid JSON: {exc}") from exc
        try:
            response = SheetResponse.model_validate(payload)
        except ValidationError as exc:
            raise ShapeError(f"Unexpected meal sheet payload: {exc}") from exc
        return reconstruct(_valid_rows(response.data_entry))


def _valid_rows(entries: list[object]) -> list[RawRow]:
    """Validate rows one by one, dropping the ones that do not fit."""
    rows: list[RawRow] = []
    for index, entry in enumerate(entries):
        try:
            rows.append(RawRow.model_validate(entry))
        except ValidationError as exc:
            _logger.warning("Dropping malformed sheet row %s: %s", index, exc)
    return rows
