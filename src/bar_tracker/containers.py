"""Dependency container wiring for the application."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from pathlib import Path

from supabase import create_client

from bar_tracker.adapters.catalog_client import FileCatalogSource, HttpxCatalogClient
from bar_tracker.adapters.json_file_state_repository import JsonFileStateRepository
from bar_tracker.adapters.supabase_state_repository import SupabaseStateRepository
from bar_tracker.config import Settings
from bar_tracker.services.catalog import CatalogLoader, CatalogSource
from bar_tracker.services.drinks import DrinkService
from bar_tracker.services.inventory import (
    IngredientSnapshotRepository,
    InventoryService,
)
from bar_tracker.services.shopping import ShoppingListRepository, ShoppingListService

_logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide state containers and collaborators."""

    settings: Settings
    catalog_loader: CatalogLoader
    inventory_service: InventoryService
    drink_service: DrinkService
    shopping_service: ShoppingListService
    close_resources: Callable[[], Awaitable[None]]
    load_errors: list[str] = field(default_factory=list)

    async def load(self) -> list[str]:
        """Load the catalog and persisted state, returning load error messages."""
        result = await self.catalog_loader.load()
        self.inventory_service.initialize(result.ingredients, result.categories)
        self.shopping_service.initialize()
        self.drink_service.load_catalog(
            result.drinks, self.inventory_service.ingredients
        )
        self.load_errors = list(result.errors)
        _logger.info(
            "Loaded %s drinks and %s ingredients",
            len(result.drinks),
            len(self.inventory_service.ingredients),
        )
        return self.load_errors


def wire_container(
    settings: Settings,
    source: CatalogSource,
    ingredient_repository: IngredientSnapshotRepository,
    shopping_repository: ShoppingListRepository,
    close_resources: Callable[[], Awaitable[None]] | None = None,
) -> AppContainer:
    """Connect services to the given collaborators."""
    inventory_service = InventoryService(ingredient_repository)
    drink_service = DrinkService(allow_substitutions=settings.allow_substitutions)
    inventory_service.subscribe(drink_service.update_possible_drinks)
    shopping_service = ShoppingListService(shopping_repository, inventory_service)

    async def _noop() -> None:
        return None

    return AppContainer(
        settings=settings,
        catalog_loader=CatalogLoader(source),
        inventory_service=inventory_service,
        drink_service=drink_service,
        shopping_service=shopping_service,
        close_resources=close_resources or _noop,
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()

    state_repository: JsonFileStateRepository | SupabaseStateRepository
    if resolved_settings.state_backend == "supabase":
        if not (
            resolved_settings.supabase_url and resolved_settings.supabase_service_key
        ):
            raise ValueError("Supabase state backend requires url and service key")
        state_repository = SupabaseStateRepository(
            create_client(
                resolved_settings.supabase_url,
                resolved_settings.supabase_service_key,
            )
        )
    else:
        state_repository = JsonFileStateRepository(Path(resolved_settings.state_dir))

    http_client: HttpxCatalogClient | None = None
    source: CatalogSource
    if resolved_settings.catalog_base_url:
        http_client = HttpxCatalogClient.create(resolved_settings.catalog_base_url)
        source = http_client
    else:
        source = FileCatalogSource(Path(resolved_settings.catalog_dir))

    async def close_resources() -> None:
        if http_client is not None:
            await http_client.close()

    return wire_container(
        settings=resolved_settings,
        source=source,
        ingredient_repository=state_repository,
        shopping_repository=state_repository,
        close_resources=close_resources,
    )
