"""Drink image lookup with a placeholder fallback."""

from bar_tracker.domain.drinks import Drink

DEFAULT_IMAGE = "default.jpg"


def resolve_image(drink: Drink, base_url: str, fallback: str = DEFAULT_IMAGE) -> str:
    """Return the image URL for a drink, or the placeholder when it has none."""
    name = (drink.image or "").strip() or fallback
    if name.startswith(("http://", "https://")):
        return name
    return f"{base_url.rstrip('/')}/{name.lstrip('/')}"
