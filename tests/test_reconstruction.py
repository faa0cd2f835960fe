"""Tests for rebuilding meals from sheet rows."""

from meal_planner.domain.sheet import RawRow
from meal_planner.services.reconstruction import compose_ingredient_line, reconstruct
from tests.conftest import sheet_payload


def test_reconstruct_merges_continuation_rows() -> None:
    rows = [
        RawRow(id=1, meal_name="A", ingredients=""),
        RawRow(
            id="1b", meal_name="", ingredients="flour", quantity=2, measurement="cups"
        ),
    ]

    meals = reconstruct(rows)

    assert len(meals) == 1
    assert meals[0].id == "1"
    assert meals[0].meal_name == "A"
    assert meals[0].ingredients_list == "2 cups flour"


def test_reconstruct_from_sheet_payload_keeps_order() -> None:
    rows = [RawRow.model_validate(entry) for entry in sheet_payload()["dataEntry"]]

    meals = reconstruct(rows)

    assert [meal.meal_name for meal in meals] == ["Chilli con Carne", "Tomato Soup"]
    chilli, soup = meals
    assert chilli.ingredients_list.split("\n") == [
        "500 g minced beef",
        "1 can kidney beans",
        "400 g chopped tomatoes",
    ]
    assert chilli.page == "12"
    assert chilli.serves == "4"
    assert chilli.specialist == ""
    assert soup.ingredients_list == "400 g chopped tomatoes\npinch of salt"


def test_reconstruct_output_length_matches_header_rows() -> None:
    rows = [
        RawRow(id=1, meal_name="A"),
        RawRow(id=2, meal_name="  "),
        RawRow(id=3, meal_name="B", ingredients="rice", quantity=200, measurement="g"),
        RawRow(id=4),
        RawRow(id=5, meal_name="C"),
    ]

    meals = reconstruct(rows)

    assert [meal.id for meal in meals] == ["1", "3", "5"]


def test_continuation_before_any_meal_is_dropped() -> None:
    rows = [
        RawRow(id=1, ingredients="orphan", quantity=1),
        RawRow(
            id=2, meal_name="Stew", ingredients="beef", quantity=500, measurement="g"
        ),
    ]

    meals = reconstruct(rows)

    assert len(meals) == 1
    assert meals[0].ingredients_list == "500 g beef"


def test_meal_without_ingredients_has_empty_list() -> None:
    meals = reconstruct([RawRow(id=9, meal_name="Toast")])

    assert meals[0].ingredients_list == ""
    assert meals[0].book == ""


def test_continuation_attaches_to_most_recent_meal() -> None:
    rows = [
        RawRow(id=1, meal_name="First", ingredients="eggs", quantity=2),
        RawRow(id=2, meal_name="Second"),
        RawRow(id=3, ingredients="milk", quantity=300, measurement="ml"),
    ]

    first, second = reconstruct(rows)

    assert first.ingredients_list == "2 eggs"
    assert second.ingredients_list == "300 ml milk"


def test_duplicate_ids_are_kept() -> None:
    rows = [RawRow(id=1, meal_name="A"), RawRow(id=1, meal_name="B")]

    meals = reconstruct(rows)

    assert [meal.meal_name for meal in meals] == ["A", "B"]


def test_compose_ingredient_line_omits_missing_parts() -> None:
    assert compose_ingredient_line(RawRow(id=1, ingredients=" salt ")) == "salt"
    assert (
        compose_ingredient_line(RawRow(id=1, ingredients="oil", quantity=1.5))
        == "1.5 oil"
    )
    assert (
        compose_ingredient_line(
            RawRow(id=1, ingredients="stock", quantity=1.0, measurement=" l ")
        )
        == "1 l stock"
    )


def test_compose_ingredient_line_treats_zero_quantity_as_missing() -> None:
    row = RawRow(id=1, ingredients="salt", quantity=0, measurement="pinch")

    assert compose_ingredient_line(row) == "pinch salt"
    pepper = RawRow(id=2, ingredients="pepper", quantity=0.0)
    assert compose_ingredient_line(pepper) == "pepper"
