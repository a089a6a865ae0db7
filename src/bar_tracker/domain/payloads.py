"""Pydantic models for catalog files and persisted snapshots.

Catalog JSON uses camelCase keys; these models accept either spelling and
convert to the frozen domain records.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from bar_tracker.domain.drinks import Drink, DrinkIngredient, DrinkTags
from bar_tracker.domain.ingredients import Category, Ingredient


class _CatalogModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class IngredientPayload(_CatalogModel):
    """Ingredient entry of the catalog or of a stored snapshot."""

    id: str
    name: str
    category: str = ""
    in_stock: bool = Field(default=False, alias="inStock")
    amount: float | None = None
    unit: str | None = None

    def to_domain(self) -> Ingredient:
        """Convert to the domain record."""
        return Ingredient(
            id=self.id,
            name=self.name,
            category=self.category,
            in_stock=self.in_stock,
            amount=self.amount,
            unit=self.unit,
        )

    @classmethod
    def from_domain(cls, ingredient: Ingredient) -> "IngredientPayload":
        """Build a payload from the domain record."""
        return cls(
            id=ingredient.id,
            name=ingredient.name,
            category=ingredient.category,
            in_stock=ingredient.in_stock,
            amount=ingredient.amount,
            unit=ingredient.unit,
        )


class CategoryPayload(_CatalogModel):
    """Ingredient category entry."""

    id: str
    name: str
    description: str = ""


class DrinkIngredientPayload(_CatalogModel):
    """Recipe line item."""

    ingredient_id: str = Field(alias="ingredientId")
    amount: str = ""
    unit: str = ""
    category: Literal["primary", "secondary"] | None = None
    substitutes: list[str] = Field(default_factory=list)

    @field_validator("amount", mode="before")
    @classmethod
    def _amount_as_text(cls, value: object) -> object:
        if isinstance(value, int | float) and not isinstance(value, bool):
            return f"{value:g}"
        return value


class DrinkTagsPayload(_CatalogModel):
    """Authored drink tags. Any ``canMake`` in the source is ignored."""

    strength: Literal["light", "medium", "strong"]
    taste: list[str] = Field(default_factory=list)


class DrinkPayload(_CatalogModel):
    """Drink recipe entry."""

    id: str
    name: str
    ingredients: list[DrinkIngredientPayload] = Field(default_factory=list)
    instructions: str = ""
    image: str | None = None
    tags: DrinkTagsPayload
    easter_egg: str | None = Field(default=None, alias="carAuctionEasterEgg")

    def to_domain(self) -> Drink:
        """Convert to the domain record with ``can_make`` unset."""
        return Drink(
            id=self.id,
            name=self.name,
            ingredients=tuple(
                DrinkIngredient(
                    ingredient_id=item.ingredient_id,
                    amount=item.amount,
                    unit=item.unit,
                    category=item.category or "primary",
                    substitutes=tuple(item.substitutes),
                )
                for item in self.ingredients
            ),
            instructions=self.instructions,
            tags=DrinkTags(
                strength=self.tags.strength,
                taste=tuple(self.tags.taste),
            ),
            image=self.image,
            easter_egg=self.easter_egg,
        )


_INGREDIENTS = TypeAdapter(list[IngredientPayload])
_CATEGORIES = TypeAdapter(list[CategoryPayload])
_DRINKS = TypeAdapter(list[DrinkPayload])
_IDS = TypeAdapter(list[str])


def parse_ingredients(raw: object) -> list[Ingredient]:
    """Validate a JSON array of ingredients."""
    return [item.to_domain() for item in _INGREDIENTS.validate_python(raw)]


def parse_categories(raw: object) -> list[Category]:
    """Validate a JSON array of categories."""
    return [
        Category(id=item.id, name=item.name, description=item.description)
        for item in _CATEGORIES.validate_python(raw)
    ]


def parse_drinks(raw: object) -> list[Drink]:
    """Validate a JSON array of drinks."""
    return [item.to_domain() for item in _DRINKS.validate_python(raw)]


def parse_ids(raw: object) -> list[str]:
    """Validate a JSON array of ingredient ids."""
    return _IDS.validate_python(raw)


def dump_ingredients(ingredients: list[Ingredient]) -> list[dict[str, object]]:
    """Serialize ingredients in the catalog's camelCase shape."""
    return [
        IngredientPayload.from_domain(item).model_dump(
            by_alias=True, exclude_none=True
        )
        for item in ingredients
    ]
