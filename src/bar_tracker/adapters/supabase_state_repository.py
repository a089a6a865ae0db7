"""Supabase storage for inventory and shopping list snapshots."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime

from pydantic import ValidationError
from supabase import Client

from bar_tracker.domain.ingredients import Ingredient
from bar_tracker.domain.payloads import dump_ingredients, parse_ids, parse_ingredients
from bar_tracker.services.inventory import IngredientSnapshotRepository
from bar_tracker.services.shopping import ShoppingListRepository

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseStateRepository(IngredientSnapshotRepository, ShoppingListRepository):
    """Key/value snapshots stored in the ``bar_state`` table."""

    client: Client
    table: str = "bar_state"

    def load_ingredients(self) -> list[Ingredient] | None:
        """Return the stored ingredients, if any."""
        raw = self._get("ingredients")
        if raw is None:
            return None
        try:
            return parse_ingredients(raw)
        except ValidationError as exc:
            _logger.warning("Ignoring invalid ingredient snapshot: %s", exc)
            return None

    def save_ingredients(self, ingredients: list[Ingredient]) -> None:
        """Upsert the ingredient snapshot."""
        self._put("ingredients", dump_ingredients(ingredients))

    def load_shopping_list(self) -> list[str] | None:
        """Return the stored shopping list, if any."""
        raw = self._get("shoppingList")
        if raw is None:
            return None
        try:
            return parse_ids(raw)
        except ValidationError as exc:
            _logger.warning("Ignoring invalid shopping list snapshot: %s", exc)
            return None

    def save_shopping_list(self, ingredient_ids: list[str]) -> None:
        """Upsert the shopping list snapshot."""
        self._put("shoppingList", ingredient_ids)

    def _get(self, key: str) -> object | None:
        response = (
            self.client.table(self.table)
            .select("value")
            .eq("key", key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0].get("value")

    def _put(self, key: str, value: object) -> None:
        self.client.table(self.table).upsert(
            {
                "key": key,
                "value": value,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="key",
        ).execute()
