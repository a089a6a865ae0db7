"""Shopping list state and shopping suggestions."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Protocol

from bar_tracker.domain.drinks import Drink
from bar_tracker.domain.errors import UnknownIngredient
from bar_tracker.domain.ingredients import Ingredient
from bar_tracker.services.availability import (
    in_stock_ids,
    missing_ingredients,
    missing_requirement_count,
)
from bar_tracker.services.inventory import InventoryService

ALMOST_MAKEABLE_MAX_MISSING = 2


class ShoppingListRepository(Protocol):
    """Persistence interface for the shopping list."""

    def load_shopping_list(self) -> list[str] | None:
        """Return the persisted ingredient ids, or None when nothing is stored."""

    def save_shopping_list(self, ingredient_ids: list[str]) -> None:
        """Persist the shopping list."""


def almost_makeable_ingredients(
    drinks: Sequence[Drink], ingredients: Sequence[Ingredient]
) -> list[Ingredient]:
    """Collect ingredients missing from drinks that lack only one or two items.

    The count ignores substitutes. Results are unique by id, in the order
    they are first encountered.
    """
    stocked = in_stock_ids(ingredients)
    seen: set[str] = set()
    result: list[Ingredient] = []
    for drink in drinks:
        missing_count = missing_requirement_count(drink, stocked)
        if not 1 <= missing_count <= ALMOST_MAKEABLE_MAX_MISSING:
            continue
        for ingredient in missing_ingredients(drink, ingredients):
            if ingredient.id in seen:
                continue
            seen.add(ingredient.id)
            result.append(ingredient)
    return result


@dataclass
class ShoppingListService:
    """Ordered, duplicate-free list of ingredient ids to buy."""

    repository: ShoppingListRepository
    inventory: InventoryService
    ingredient_ids: list[str] = field(default_factory=list)

    def initialize(self) -> None:
        """Load the persisted list, dropping duplicates."""
        self.ingredient_ids = []
        self._extend(self.repository.load_shopping_list() or [])

    def is_present(self, ingredient_id: str) -> bool:
        """Return True when the id is on the list."""
        return ingredient_id in self.ingredient_ids

    def add(self, ingredient_id: str) -> None:
        """Add an id unless it is already listed."""
        if self.is_present(ingredient_id):
            return
        self.ingredient_ids.append(ingredient_id)
        self._save()

    def add_multiple(self, ingredient_ids: Iterable[str]) -> list[str]:
        """Add the ids not yet listed and return the ones that were added."""
        added = self._extend(ingredient_ids)
        if added:
            self._save()
        return added

    def remove(self, ingredient_id: str) -> None:
        """Remove an id from the list."""
        if not self.is_present(ingredient_id):
            return
        self.ingredient_ids = [i for i in self.ingredient_ids if i != ingredient_id]
        self._save()

    def mark_purchased(self, ingredient_id: str) -> Ingredient:
        """Remove the id from the list and mark the ingredient in stock.

        Ids unknown to the inventory are still unlisted before the error
        propagates, so stale entries can be cleared.
        """
        try:
            ingredient = self.inventory.toggle_stock(ingredient_id, True)
        except UnknownIngredient:
            self.remove(ingredient_id)
            raise
        self.remove(ingredient_id)
        return ingredient

    def mark_in_stock(self, ingredient_id: str, in_stock: bool) -> Ingredient:
        """Set stock from the shopping view; stocking also removes the id."""
        ingredient = self.inventory.toggle_stock(ingredient_id, in_stock)
        if in_stock:
            self.remove(ingredient_id)
        return ingredient

    def add_out_of_stock(self) -> list[str]:
        """Add every out-of-stock ingredient."""
        return self.add_multiple(item.id for item in self.inventory.out_of_stock())

    def add_missing_for_drink(self, drink: Drink) -> list[str]:
        """Add the ingredients the drink is missing."""
        missing = missing_ingredients(drink, self.inventory.ingredients)
        return self.add_multiple(item.id for item in missing)

    def suggestions(self, drinks: Sequence[Drink]) -> list[Ingredient]:
        """Return almost-makeable ingredients that are not yet listed."""
        return [
            item
            for item in almost_makeable_ingredients(drinks, self.inventory.ingredients)
            if not self.is_present(item.id)
        ]

    def items(self) -> list[Ingredient]:
        """Resolve the listed ids to ingredients, skipping unknown ids."""
        by_id = {item.id: item for item in self.inventory.ingredients}
        return [by_id[i] for i in self.ingredient_ids if i in by_id]

    def _extend(self, ingredient_ids: Iterable[str]) -> list[str]:
        added = []
        for ingredient_id in ingredient_ids:
            if ingredient_id in self.ingredient_ids:
                continue
            self.ingredient_ids.append(ingredient_id)
            added.append(ingredient_id)
        return added

    def _save(self) -> None:
        self.repository.save_shopping_list(list(self.ingredient_ids))
