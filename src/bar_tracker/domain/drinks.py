"""Domain models for drink recipes."""

from dataclasses import dataclass
from typing import Literal

Strength = Literal["light", "medium", "strong"]
RequirementCategory = Literal["primary", "secondary"]


@dataclass(frozen=True)
class DrinkIngredient:
    """One line item of a recipe."""

    ingredient_id: str
    amount: str
    unit: str
    category: RequirementCategory = "primary"
    substitutes: tuple[str, ...] = ()


@dataclass(frozen=True)
class DrinkTags:
    """Descriptive tags of a drink.

    ``can_make`` is derived by the availability engine and is ``None`` until
    the drink has been annotated.
    """

    strength: Strength
    taste: tuple[str, ...] = ()
    can_make: bool | None = None


@dataclass(frozen=True)
class Drink:
    """A drink recipe from the catalog."""

    id: str
    name: str
    ingredients: tuple[DrinkIngredient, ...]
    instructions: str
    tags: DrinkTags
    image: str | None = None
    easter_egg: str | None = None


@dataclass(frozen=True)
class RequirementStatus:
    """Availability of a single requirement for the recipe view."""

    requirement: DrinkIngredient
    status: Literal["in_stock", "substitute_available", "missing"]
    available_substitutes: tuple[str, ...] = ()
