"""Server-rendered HTML for the planner screen."""

from html import escape
from urllib.parse import quote

from meal_planner.domain.meals import AggregatedIngredient, Meal
from meal_planner.domain.planner import Phase, PlannerState


def render_page(state: PlannerState, shopping: list[AggregatedIngredient]) -> str:
    """Render the whole planner page for a state snapshot."""
    if state.phase is Phase.REVIEWING:
        body = _render_review(state.accepted, shopping)
    else:
        body = _render_selection(state)
    return _PAGE_TEMPLATE.format(notice=_render_notice(state), body=body)


def format_total(ingredient: AggregatedIngredient) -> str:
    """Return the shopping list total, or "As needed" without a quantity."""
    if ingredient.quantity <= 0:
        return "As needed"
    total = f"{ingredient.quantity:.2f}".rstrip("0").rstrip(".")
    return f"{total} {ingredient.unit}".strip()


def _render_notice(state: PlannerState) -> str:
    if not state.notice:
        return ""
    return (
        '<div class="notice"><h3>Notice:</h3>'
        f"<p>{escape(state.notice)}</p>"
        '<form method="post" action="/meals/retry">'
        '<button type="submit" class="link">Try reconnecting</button></form></div>'
    )


def _render_selection(state: PlannerState) -> str:
    disabled = "" if state.meals else " disabled"
    parts = [
        '<div class="center"><form method="post" action="/plan/generate">'
        f'<button type="submit" class="primary"{disabled}>GENERATE MEAL PLAN</button>'
        "</form>"
    ]
    if state.phase is Phase.LOADING:
        parts.append('<p class="muted">Loading meals...</p>')
    elif not state.meals:
        parts.append('<p class="muted">No meals available</p>')
    parts.append("</div>")
    if state.selected:
        parts.append('<div class="grid">')
        parts.extend(_render_card(meal) for meal in state.selected)
        parts.append("</div>")
        parts.append(
            '<div class="center"><form method="post" action="/plan/accept">'
            '<button type="submit" class="accept">ACCEPT MEAL PLAN</button>'
            "</form></div>"
        )
    return "".join(parts)


def _render_card(meal: Meal) -> str:
    refresh_url = f"/plan/meals/{quote(meal.id, safe='')}/refresh"
    return (
        '<div class="card">'
        f"<h3>{escape(meal.meal_name)}</h3>"
        f'<form method="post" action="{escape(refresh_url)}">'
        '<button type="submit" title="Refresh this meal">&#x21bb;</button></form>'
        f"<p><strong>{escape(meal.book)}</strong></p>"
        f"<p>Page {escape(meal.page)}</p>"
        f'<p class="muted">Serves {escape(meal.serves)}</p>'
        "</div>"
    )


def _render_review(accepted: list[Meal], shopping: list[AggregatedIngredient]) -> str:
    meal_rows = [
        (escape(meal.meal_name), escape(meal.book), escape(meal.page))
        for meal in accepted
    ]
    shopping_rows = [
        (
            f'<span class="capitalize">{escape(item.name)}</span>',
            escape(format_total(item)),
            escape(", ".join(parsed.raw for parsed in item.items)),
        )
        for item in shopping
    ]
    return (
        '<form method="post" action="/plan/back">'
        '<button type="submit" class="link">&lsaquo; Back to Meal Selection</button>'
        "</form>"
        "<h2>Meal Overview</h2>"
        + _render_table(("Meal", "Book", "Page"), meal_rows)
        + "<h2>Shopping List</h2>"
        + _render_table(("Ingredient", "Total", "Details"), shopping_rows)
    )


def _render_table(headers: tuple[str, ...], rows: list[tuple[str, ...]]) -> str:
    head = "".join(f"<th>{header}</th>" for header in headers)
    body = "".join(
        f'<tr class="{"even" if index % 2 == 0 else "odd"}">'
        + "".join(f"<td>{cell}</td>" for cell in row)
        + "</tr>"
        for index, row in enumerate(rows)
    )
    return f"<table><thead><tr>{head}</tr></thead><tbody>{body}</tbody></table>"


_PAGE_TEMPLATE = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Meal Planning Assistant</title>
    <style>
      body {{ font-family: ui-sans-serif, system-ui, sans-serif; max-width: 72rem;
        margin: 0 auto; padding: 1.5rem; }}
      header {{ background: #f3f4f6; border-radius: 0.5rem; padding: 2rem;
        text-align: center; margin-bottom: 1.5rem; }}
      .center {{ text-align: center; margin-bottom: 2rem; }}
      .muted {{ color: #6b7280; font-size: 0.875rem; }}
      .notice {{ background: #fef2f2; border: 1px solid #fecaca; border-radius: 0.5rem;
        padding: 1rem; margin-bottom: 1.5rem; color: #b91c1c; }}
      .grid {{ display: grid;
        grid-template-columns: repeat(auto-fill, minmax(18rem, 1fr));
        gap: 1.5rem; margin-bottom: 2rem; }}
      .card {{ border: 2px solid #e5e7eb; border-radius: 0.5rem; padding: 1.5rem; }}
      button.primary {{ background: #2563eb; color: white; padding: 1rem 2rem;
        border: 0; border-radius: 0.5rem; font-weight: 600; }}
      button.accept {{ background: #16a34a; color: white; padding: 0.75rem 2rem;
        border: 0; border-radius: 0.5rem; font-weight: 600; }}
      button.link {{ background: none; border: 0; color: #2563eb; cursor: pointer;
        text-decoration: underline; padding: 0; }}
      table {{ width: 100%; border-collapse: collapse; margin-bottom: 2rem; }}
      th, td {{ text-align: left; padding: 1rem; }}
      thead tr {{ background: #f3f4f6; }}
      tr.odd {{ background: #f9fafb; }}
      .capitalize {{ text-transform: capitalize; }}
    </style>
  </head>
  <body>
    <main>
      {notice}
      <header>
        <h1>Meal Planning Assistant</h1>
        <p>Generate smart meal plans with ingredient aggregation</p>
      </header>
      {body}
    </main>
  </body>
</html>
"""
