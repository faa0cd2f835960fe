"""ASGI entrypoint for the meal planner app."""

from meal_planner.api.app import create_app
from meal_planner.containers import build_container

app = create_app(build_container())
