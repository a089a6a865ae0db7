"""Static taste categories used to group taste labels for filtering."""

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class TasteCategory:
    """Umbrella name for related taste labels."""

    name: str
    tastes: tuple[str, ...]
    color: str | None = None


TASTE_CATEGORIES: tuple[TasteCategory, ...] = (
    TasteCategory(
        name="Sweet",
        tastes=("Sweet", "Fruity", "Berry", "Tropical", "Caramel"),
        color="#ff6b6b",
    ),
    TasteCategory(
        name="Sour",
        tastes=("Sour", "Citrus", "Lime", "Lemon"),
        color="#ffe66d",
    ),
    TasteCategory(
        name="Bitter",
        tastes=("Bitter", "Coffee", "Chocolate", "Herbal"),
        color="#88d8b0",
    ),
    TasteCategory(
        name="Spicy",
        tastes=("Spicy", "Ginger", "Cinnamon", "Pepper"),
        color="#ff8e5e",
    ),
    TasteCategory(
        name="Refreshing",
        tastes=("Refreshing", "Mint", "Cucumber", "Light"),
        color="#6abfff",
    ),
)


def find_category_for_taste(taste: str) -> TasteCategory | None:
    """Return the category containing a taste label, ignoring case."""
    needle = taste.lower()
    for category in TASTE_CATEGORIES:
        if any(label.lower() == needle for label in category.tastes):
            return category
    return None


def get_category(name: str) -> TasteCategory | None:
    """Return a taste category by name, ignoring case."""
    needle = name.lower()
    for category in TASTE_CATEGORIES:
        if category.name.lower() == needle:
            return category
    return None


def expand_taste_categories(names: Iterable[str]) -> set[str]:
    """Expand category names into their lower-cased member taste labels."""
    labels: set[str] = set()
    for name in names:
        category = get_category(name)
        if category is None:
            continue
        labels.update(label.lower() for label in category.tastes)
    return labels
