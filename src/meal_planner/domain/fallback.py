"""Built-in demo meals used when the live source is unavailable."""

from meal_planner.domain.meals import Meal

FALLBACK_NOTICE = "Failed to connect to API. Using demo data."


def fallback_meals() -> list[Meal]:
    """Return the fixed demo meal list."""
    return [
        Meal(
            id="1",
            meal_name="Spaghetti Bolognese",
            category="Pasta",
            specialist="Italian",
            main_ingredient="Beef",
            book="The Italian Cookbook",
            page="45",
            serves="4",
            ingredients_list="\n".join(
                [
                    "400g minced beef",
                    "2 tbsp olive oil",
                    "1 onion, chopped",
                    "2 garlic cloves, crushed",
                    "400g canned tomatoes",
                    "300g spaghetti",
                ]
            ),
        ),
        Meal(
            id="2",
            meal_name="Chicken Curry",
            category="Asian",
            specialist="Indian",
            main_ingredient="Chicken",
            book="Indian Cooking",
            page="78",
            serves="4",
            ingredients_list="\n".join(
                [
                    "500g chicken",
                    "2 tbsp curry powder",
                    "1 onion",
                    "2 garlic cloves",
                    "400ml coconut milk",
                ]
            ),
        ),
    ]
