"""Filtering, searching and pagination over annotated drinks."""

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from bar_tracker.domain.drinks import Drink, Strength
from bar_tracker.domain.ingredients import Ingredient
from bar_tracker.domain.tastes import expand_taste_categories

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 6


@dataclass(frozen=True)
class DrinkFilters:
    """Declarative drink filter criteria. ``None`` or empty means inactive."""

    can_make: bool | None = None
    strength: Strength | None = None
    taste_categories: tuple[str, ...] = ()

    @property
    def is_active(self) -> bool:
        """Return True when at least one predicate is set."""
        return (
            self.can_make is not None
            or self.strength is not None
            or bool(self.taste_categories)
        )


@dataclass(frozen=True)
class Page(Generic[T]):
    """One display page of a filtered result."""

    items: list[T]
    page: int
    page_size: int
    total: int

    @property
    def total_pages(self) -> int:
        """Return the number of pages for the full result."""
        return math.ceil(self.total / self.page_size)


def filter_drinks(drinks: Sequence[Drink], filters: DrinkFilters) -> list[Drink]:
    """Return the drinks matching every active filter, in catalog order."""
    if not filters.is_active:
        return list(drinks)
    tastes = (
        expand_taste_categories(filters.taste_categories)
        if filters.taste_categories
        else None
    )
    return [drink for drink in drinks if _matches(drink, filters, tastes)]


def _matches(drink: Drink, filters: DrinkFilters, tastes: set[str] | None) -> bool:
    if filters.can_make is not None and drink.tags.can_make is not filters.can_make:
        return False
    if filters.strength is not None and drink.tags.strength != filters.strength:
        return False
    if tastes is not None and not any(
        label.lower() in tastes for label in drink.tags.taste
    ):
        return False
    return True


def search_drinks(drinks: Sequence[Drink], query: str | None) -> list[Drink]:
    """Return drinks whose name contains the query, ignoring case."""
    if not query:
        return list(drinks)
    needle = query.lower()
    return [drink for drink in drinks if needle in drink.name.lower()]


def search_ingredients(
    ingredients: Sequence[Ingredient], query: str | None
) -> list[Ingredient]:
    """Return ingredients whose name contains the query, ignoring case."""
    if not query:
        return list(ingredients)
    needle = query.lower()
    return [item for item in ingredients if needle in item.name.lower()]


def group_by_category(
    ingredients: Iterable[Ingredient],
) -> dict[str, list[Ingredient]]:
    """Group ingredients by category, keeping first-seen category order."""
    grouped: dict[str, list[Ingredient]] = {}
    for ingredient in ingredients:
        grouped.setdefault(ingredient.category or "Other", []).append(ingredient)
    return grouped


def paginate(
    items: Sequence[T], page: int = 1, page_size: int = DEFAULT_PAGE_SIZE
) -> Page[T]:
    """Slice a result into a 1-based page."""
    if page < 1:
        raise ValueError("page must be >= 1")
    if page_size < 1:
        raise ValueError("page_size must be >= 1")
    start = (page - 1) * page_size
    return Page(
        items=list(items[start : start + page_size]),
        page=page,
        page_size=page_size,
        total=len(items),
    )
