"""Catalog loading with failures degraded to empty collections."""

import json
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Protocol, TypeVar

import httpx
from pydantic import ValidationError

from bar_tracker.domain.drinks import Drink
from bar_tracker.domain.errors import LoadFailure
from bar_tracker.domain.ingredients import Category, Ingredient
from bar_tracker.domain.payloads import (
    parse_categories,
    parse_drinks,
    parse_ingredients,
)

T = TypeVar("T")

_logger = logging.getLogger(__name__)


class CatalogSource(Protocol):
    """Interface for fetching the raw catalog JSON."""

    async def load_ingredients(self) -> object:
        """Return the raw ingredient array."""

    async def load_categories(self) -> object:
        """Return the raw category array."""

    async def load_drinks(self) -> object:
        """Return the raw drink array."""


@dataclass
class CatalogLoadResult:
    """Whatever could be loaded plus user-facing error messages."""

    ingredients: list[Ingredient] = field(default_factory=list)
    categories: list[Category] = field(default_factory=list)
    drinks: list[Drink] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


@dataclass
class CatalogLoader:
    """Loads and validates the catalog without ever raising."""

    source: CatalogSource

    async def load(self) -> CatalogLoadResult:
        """Load ingredients, categories and drinks independently."""
        result = CatalogLoadResult()
        result.ingredients = await self._load(
            "ingredients", self.source.load_ingredients, parse_ingredients, result
        )
        result.categories = await self._load(
            "categories", self.source.load_categories, parse_categories, result
        )
        result.drinks = await self._load(
            "drinks", self.source.load_drinks, parse_drinks, result
        )
        return result

    async def _load(
        self,
        name: str,
        fetch: Callable[[], Awaitable[object]],
        parse: Callable[[object], list[T]],
        result: CatalogLoadResult,
    ) -> list[T]:
        try:
            return parse(await fetch())
        except (
            LoadFailure,
            httpx.HTTPError,
            OSError,
            json.JSONDecodeError,
            UnicodeDecodeError,
            ValidationError,
        ) as exc:
            _logger.warning("Failed to load %s: %s", name, exc)
            result.errors.append(f"Failed to load {name} data")
            return []
