"""Local JSON file storage for inventory and shopping list snapshots."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from bar_tracker.domain.ingredients import Ingredient
from bar_tracker.domain.payloads import dump_ingredients, parse_ids, parse_ingredients
from bar_tracker.services.inventory import IngredientSnapshotRepository
from bar_tracker.services.shopping import ShoppingListRepository

_logger = logging.getLogger(__name__)


@dataclass
class JsonFileStateRepository(IngredientSnapshotRepository, ShoppingListRepository):
    """Stores each snapshot as ``<key>.json`` inside a state directory."""

    directory: Path

    def load_ingredients(self) -> list[Ingredient] | None:
        """Return the stored ingredients, if any."""
        raw = self._read("ingredients")
        if raw is None:
            return None
        try:
            return parse_ingredients(raw)
        except ValidationError as exc:
            _logger.warning("Ignoring invalid ingredient snapshot: %s", exc)
            return None

    def save_ingredients(self, ingredients: list[Ingredient]) -> None:
        """Write the ingredient snapshot."""
        self._write("ingredients", dump_ingredients(ingredients))

    def load_shopping_list(self) -> list[str] | None:
        """Return the stored shopping list, if any."""
        raw = self._read("shoppingList")
        if raw is None:
            return None
        try:
            return parse_ids(raw)
        except ValidationError as exc:
            _logger.warning("Ignoring invalid shopping list snapshot: %s", exc)
            return None

    def save_shopping_list(self, ingredient_ids: list[str]) -> None:
        """Write the shopping list snapshot."""
        self._write("shoppingList", ingredient_ids)

    def _read(self, key: str) -> object | None:
        path = self.directory / f"{key}.json"
        if not path.is_file():
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            _logger.warning("Failed to parse %s: %s", path, exc)
            return None

    def _write(self, key: str, value: object) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.directory / f"{key}.json"
        tmp_path = path.with_suffix(".json.tmp")
        tmp_path.write_text(json.dumps(value), encoding="utf-8")
        tmp_path.replace(path)
