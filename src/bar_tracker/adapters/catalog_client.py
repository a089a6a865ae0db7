"""Catalog sources: HTTP and local JSON files."""

import json
from dataclasses import dataclass
from pathlib import Path

import httpx

from bar_tracker.domain.errors import LoadFailure
from bar_tracker.services.catalog import CatalogSource


@dataclass
class HttpxCatalogClient(CatalogSource):
    """HTTPX-backed catalog source serving ``<name>.json`` files."""

    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str) -> "HttpxCatalogClient":
        """Create a catalog client with a managed httpx session."""
        return cls(base_url=base_url, http_client=httpx.AsyncClient())

    async def load_ingredients(self) -> object:
        """Fetch the ingredient catalog."""
        return await self._get("ingredients.json")

    async def load_categories(self) -> object:
        """Fetch the category list."""
        return await self._get("categories.json")

    async def load_drinks(self) -> object:
        """Fetch the drink catalog."""
        return await self._get("drinks.json")

    async def _get(self, name: str) -> object:
        url = f"{self.base_url.rstrip('/')}/{name}"
        response = await self.http_client.get(url, timeout=15)
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


@dataclass
class FileCatalogSource(CatalogSource):
    """Catalog source reading JSON files from a directory."""

    directory: Path

    async def load_ingredients(self) -> object:
        """Read ``ingredients.json``."""
        return self._read("ingredients.json")

    async def load_categories(self) -> object:
        """Read ``categories.json``."""
        return self._read("categories.json")

    async def load_drinks(self) -> object:
        """Read ``drinks.json``."""
        return self._read("drinks.json")

    def _read(self, name: str) -> object:
        path = self.directory / name
        if not path.is_file():
            raise LoadFailure(f"Catalog file not found: {path}")
        return json.loads(path.read_text(encoding="utf-8"))
