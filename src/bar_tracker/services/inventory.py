"""Ingredient store: the inventory of what is on hand."""

import logging
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, replace
from typing import Protocol

from bar_tracker.domain.errors import InvalidAmountInput, UnknownIngredient
from bar_tracker.domain.ingredients import Category, Ingredient

_logger = logging.getLogger(__name__)

InventoryListener = Callable[[list[Ingredient]], None]


class IngredientSnapshotRepository(Protocol):
    """Persistence interface for the ingredient snapshot."""

    def load_ingredients(self) -> list[Ingredient] | None:
        """Return the persisted ingredients, or None when nothing is stored."""

    def save_ingredients(self, ingredients: list[Ingredient]) -> None:
        """Persist the full ingredient list."""


def parse_amount(raw: object) -> float:
    """Parse a user-entered stock amount."""
    if isinstance(raw, bool):
        raise InvalidAmountInput(f"Invalid amount: {raw!r}")
    if isinstance(raw, str):
        try:
            value = float(raw.strip())
        except ValueError as exc:
            raise InvalidAmountInput(f"Invalid amount: {raw!r}") from exc
    elif isinstance(raw, int | float):
        value = float(raw)
    else:
        raise InvalidAmountInput(f"Invalid amount: {raw!r}")
    if not math.isfinite(value) or value < 0:
        raise InvalidAmountInput(f"Invalid amount: {raw!r}")
    return value


@dataclass
class InventoryService:
    """Owns the ingredient list and persists it after every change."""

    repository: IngredientSnapshotRepository
    ingredients: list[Ingredient] = field(default_factory=list)
    categories: list[Category] = field(default_factory=list)
    listeners: list[InventoryListener] = field(default_factory=list)

    def initialize(
        self,
        catalog_ingredients: Sequence[Ingredient],
        categories: Sequence[Category] = (),
    ) -> None:
        """Load the inventory, preferring a persisted snapshot over the catalog."""
        persisted = self.repository.load_ingredients()
        if persisted is not None:
            _logger.info("Restored %s ingredients from snapshot", len(persisted))
            self.ingredients = list(persisted)
        else:
            self.ingredients = list(catalog_ingredients)
        self.categories = list(categories)
        self._notify()

    def subscribe(self, listener: InventoryListener) -> None:
        """Register a callback invoked with the ingredients after each change."""
        self.listeners.append(listener)

    def get(self, ingredient_id: str) -> Ingredient:
        """Return an ingredient by id."""
        for ingredient in self.ingredients:
            if ingredient.id == ingredient_id:
                return ingredient
        raise UnknownIngredient(ingredient_id)

    def in_stock(self) -> list[Ingredient]:
        """Return ingredients currently in stock."""
        return [item for item in self.ingredients if item.in_stock]

    def out_of_stock(self) -> list[Ingredient]:
        """Return ingredients currently out of stock."""
        return [item for item in self.ingredients if not item.in_stock]

    def update_ingredient(self, updated: Ingredient) -> Ingredient:
        """Replace an ingredient with the same id."""
        self.get(updated.id)
        self._commit(
            [updated if item.id == updated.id else item for item in self.ingredients]
        )
        return updated

    def toggle_stock(self, ingredient_id: str, in_stock: bool) -> Ingredient:
        """Set the in-stock flag of an ingredient."""
        return self.update_ingredient(
            replace(self.get(ingredient_id), in_stock=in_stock)
        )

    def set_amount(self, ingredient_id: str, raw_amount: object) -> Ingredient:
        """Set the on-hand amount; invalid input leaves the inventory unchanged."""
        amount = parse_amount(raw_amount)
        return self.update_ingredient(replace(self.get(ingredient_id), amount=amount))

    def _commit(self, ingredients: list[Ingredient]) -> None:
        self.repository.save_ingredients(ingredients)
        self.ingredients = ingredients
        self._notify()

    def _notify(self) -> None:
        for listener in self.listeners:
            listener(self.ingredients)
