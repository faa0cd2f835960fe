"""Errors raised while loading meals from the source sheet."""


class MealSourceError(Exception):
    """Base error for failures reaching or reading the meal source."""


class TransportError(MealSourceError):
    """The meal source could not be reached or returned a non-2xx status."""


class ShapeError(MealSourceError):
    """The meal source responded with an unexpected payload."""
