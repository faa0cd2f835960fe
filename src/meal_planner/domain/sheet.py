"""Models for rows read from the meal sheet."""

from pydantic import BaseModel, ConfigDict, Field

# Sheet cells come back as numbers or strings depending on their content.
Cell = int | float | str | None


class RawRow(BaseModel):
    """One denormalized row of the meal sheet."""

    model_config = ConfigDict(populate_by_name=True)

    id: int | str
    meal_name: Cell = Field(default=None, alias="mealName")
    category: Cell = None
    specialist: Cell = None
    main_ingredient: Cell = Field(default=None, alias="mainIngredient")
    book: Cell = None
    page: Cell = None
    serves: Cell = None
    ingredients: Cell = None
    quantity: Cell = None
    measurement: Cell = None


class SheetResponse(BaseModel):
    """Top-level payload returned by the meal sheet endpoint.

    Rows are kept raw here and validated one at a time, so a bad row can be
    dropped without losing the batch.
    """

    data_entry: list[object] = Field(alias="dataEntry")
