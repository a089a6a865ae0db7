"""Drink catalog service with availability annotations."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from bar_tracker.domain.drinks import Drink, RequirementStatus
from bar_tracker.domain.errors import UnknownDrink
from bar_tracker.domain.ingredients import Ingredient
from bar_tracker.services.availability import (
    compute_availability,
    count_makeable,
    missing_ingredients,
    requirement_statuses,
)
from bar_tracker.services.filters import (
    DEFAULT_PAGE_SIZE,
    DrinkFilters,
    Page,
    filter_drinks,
    paginate,
    search_drinks,
)

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DrinkDetail:
    """A drink with its per-requirement availability."""

    drink: Drink
    requirements: list[RequirementStatus]
    missing: list[Ingredient]


@dataclass
class DrinkService:
    """Holds the immutable catalog and its current annotated copy."""

    catalog: list[Drink] = field(default_factory=list)
    allow_substitutions: bool = True
    possible_drinks: list[Drink] = field(default_factory=list)
    ingredients: list[Ingredient] = field(default_factory=list)

    def load_catalog(
        self, drinks: Sequence[Drink], ingredients: Sequence[Ingredient]
    ) -> None:
        """Install the catalog and annotate it against the inventory."""
        self.catalog = list(drinks)
        self.update_possible_drinks(ingredients)

    def update_possible_drinks(self, ingredients: Sequence[Ingredient]) -> None:
        """Recompute availability for a new inventory."""
        self.ingredients = list(ingredients)
        self._recompute()

    def set_allow_substitutions(self, allow: bool) -> None:
        """Enable or disable substitute matching and recompute."""
        self.allow_substitutions = allow
        self._recompute()

    def toggle_allow_substitutions(self) -> bool:
        """Flip substitute matching and return the new value."""
        self.set_allow_substitutions(not self.allow_substitutions)
        return self.allow_substitutions

    @property
    def can_make_count(self) -> int:
        """Number of drinks makeable right now."""
        return count_makeable(self.possible_drinks)

    def get_drink(self, drink_id: str) -> Drink:
        """Return an annotated drink by id."""
        for drink in self.possible_drinks:
            if drink.id == drink_id:
                return drink
        raise UnknownDrink(drink_id)

    def query(
        self,
        filters: DrinkFilters | None = None,
        search: str | None = None,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> Page[Drink]:
        """Filter, search and paginate the annotated drinks."""
        drinks = filter_drinks(self.possible_drinks, filters or DrinkFilters())
        return paginate(search_drinks(drinks, search), page, page_size)

    def detail(self, drink_id: str) -> DrinkDetail:
        """Return the recipe view of a drink."""
        drink = self.get_drink(drink_id)
        return DrinkDetail(
            drink=drink,
            requirements=requirement_statuses(drink, self.ingredients),
            missing=missing_ingredients(drink, self.ingredients),
        )

    def missing_for_drink(self, drink_id: str) -> list[Ingredient]:
        """Return the out-of-stock ingredients of a drink."""
        return missing_ingredients(self.get_drink(drink_id), self.ingredients)

    def _recompute(self) -> None:
        self.possible_drinks = compute_availability(
            self.catalog, self.ingredients, self.allow_substitutions
        )
        _logger.debug(
            "Recomputed availability: %s/%s makeable",
            self.can_make_count,
            len(self.possible_drinks),
        )
