"""Request bodies for the bar tracker API."""

from pydantic import BaseModel, Field, StrictFloat, StrictInt


class StockUpdate(BaseModel):
    """Set whether an ingredient is in stock."""

    in_stock: bool


class AmountUpdate(BaseModel):
    """Raw amount as entered by the user; validated by the inventory."""

    amount: StrictFloat | StrictInt | str


class IngredientUpdate(BaseModel):
    """Full replacement of an ingredient's editable fields."""

    name: str
    category: str = ""
    in_stock: bool = False
    amount: float | None = Field(default=None, ge=0)
    unit: str | None = None


class SubstitutionUpdate(BaseModel):
    """Set substitute matching; omit ``allow`` to toggle."""

    allow: bool | None = None


class ShoppingListAdd(BaseModel):
    """Ingredient ids to add to the shopping list."""

    ingredient_ids: list[str] = Field(min_length=1)
