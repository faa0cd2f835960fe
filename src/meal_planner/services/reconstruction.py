"""Rebuild meals from the denormalized meal sheet rows."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from meal_planner.domain.meals import Meal
from meal_planner.domain.sheet import RawRow

_logger = logging.getLogger(__name__)


@dataclass
class _MealDraft:
    header: RawRow
    lines: list[str] = field(default_factory=list)


def reconstruct(rows: Iterable[RawRow]) -> list[Meal]:
    """Group header and continuation rows into meals, preserving input order.

    A row with a meal name starts a new meal. A row without a meal name but
    with an ingredient adds a line to the most recently started meal; such
    rows are dropped when no meal has been started yet. Rows with neither are
    ignored.
    """
    drafts: list[_MealDraft] = []
    current: int | None = None
    for row in rows:
        if _text(row.meal_name):
            drafts.append(_MealDraft(header=row))
            current = len(drafts) - 1
            if _text(row.ingredients):
                drafts[current].lines.append(compose_ingredient_line(row))
        elif _text(row.ingredients):
            if current is None:
                _logger.debug("Dropping continuation row %s before any meal", row.id)
                continue
            drafts[current].lines.append(compose_ingredient_line(row))

    meals = [_build_meal(draft) for draft in drafts]
    seen: set[str] = set()
    for meal in meals:
        if meal.id in seen:
            _logger.warning("Duplicate meal id in sheet: %s", meal.id)
        seen.add(meal.id)
    return meals


def compose_ingredient_line(row: RawRow) -> str:
    """Return ``"<quantity> <measurement> <ingredient>"`` omitting empty parts.

    A numeric quantity of zero counts as missing.
    """
    quantity = "" if _is_zero(row.quantity) else _text(row.quantity)
    parts = (quantity, _text(row.measurement), _text(row.ingredients))
    return " ".join(part for part in parts if part)


def _build_meal(draft: _MealDraft) -> Meal:
    header = draft.header
    return Meal(
        id=_text(header.id),
        meal_name=_text(header.meal_name),
        category=_text(header.category),
        specialist=_text(header.specialist),
        main_ingredient=_text(header.main_ingredient),
        book=_text(header.book),
        page=_text(header.page),
        serves=_text(header.serves),
        ingredients_list="\n".join(draft.lines),
    )


def _text(value: object) -> str:
    """Normalize an optional sheet cell to a trimmed string."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def _is_zero(value: object) -> bool:
    return isinstance(value, int | float) and value == 0
