"""Drink availability engine.

All functions here are pure: they take the catalog and the inventory as
arguments and never mutate them.
"""

from collections.abc import Iterable, Sequence
from dataclasses import replace

from bar_tracker.domain.drinks import Drink, DrinkIngredient, RequirementStatus
from bar_tracker.domain.ingredients import Ingredient


def in_stock_ids(ingredients: Iterable[Ingredient]) -> set[str]:
    """Return the ids of ingredients currently in stock."""
    return {ingredient.id for ingredient in ingredients if ingredient.in_stock}


def compute_availability(
    drinks: Sequence[Drink],
    ingredients: Sequence[Ingredient],
    allow_substitutions: bool = True,
) -> list[Drink]:
    """Return annotated copies of the drinks with ``tags.can_make`` set."""
    stocked = in_stock_ids(ingredients)
    return [
        replace(
            drink,
            tags=replace(
                drink.tags, can_make=can_make(drink, stocked, allow_substitutions)
            ),
        )
        for drink in drinks
    ]


def can_make(drink: Drink, stocked: set[str], allow_substitutions: bool) -> bool:
    """Return True when every requirement is satisfied by the stocked ids."""
    return all(
        _is_satisfied(requirement, stocked, allow_substitutions)
        for requirement in drink.ingredients
    )


def _is_satisfied(
    requirement: DrinkIngredient, stocked: set[str], allow_substitutions: bool
) -> bool:
    if requirement.ingredient_id in stocked:
        return True
    if not allow_substitutions:
        return False
    return any(substitute in stocked for substitute in requirement.substitutes)


def missing_ingredients(
    drink: Drink, ingredients: Sequence[Ingredient]
) -> list[Ingredient]:
    """Return inventory entries required by the drink that are out of stock.

    Substitutes are ignored: the result answers "what should I buy", not
    "can I make this".
    """
    stocked = in_stock_ids(ingredients)
    missing_ids = {
        requirement.ingredient_id
        for requirement in drink.ingredients
        if requirement.ingredient_id not in stocked
    }
    return [ingredient for ingredient in ingredients if ingredient.id in missing_ids]


def missing_requirement_count(drink: Drink, stocked: set[str]) -> int:
    """Count requirements whose primary ingredient is not stocked."""
    return sum(
        1
        for requirement in drink.ingredients
        if requirement.ingredient_id not in stocked
    )


def requirement_statuses(
    drink: Drink, ingredients: Sequence[Ingredient]
) -> list[RequirementStatus]:
    """Describe each requirement as in stock, substitutable or missing."""
    stocked = in_stock_ids(ingredients)
    statuses = []
    for requirement in drink.ingredients:
        if requirement.ingredient_id in stocked:
            statuses.append(RequirementStatus(requirement, "in_stock"))
            continue
        available = tuple(sub for sub in requirement.substitutes if sub in stocked)
        status = "substitute_available" if available else "missing"
        statuses.append(RequirementStatus(requirement, status, available))
    return statuses


def count_makeable(drinks: Iterable[Drink]) -> int:
    """Return how many annotated drinks can be made."""
    return sum(1 for drink in drinks if drink.tags.can_make)
