"""Domain models for the ingredient inventory."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Ingredient:
    """A stockable bar ingredient."""

    id: str
    name: str
    category: str
    in_stock: bool
    amount: float | None = None
    unit: str | None = None


@dataclass(frozen=True)
class Category:
    """Reference data grouping ingredients."""

    id: str
    name: str
    description: str
