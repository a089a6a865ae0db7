"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from bar_tracker.config import Settings
from bar_tracker.containers import AppContainer, wire_container
from bar_tracker.domain.drinks import Drink, DrinkIngredient, DrinkTags
from bar_tracker.domain.errors import LoadFailure
from bar_tracker.domain.ingredients import Ingredient
from bar_tracker.services.catalog import CatalogSource
from bar_tracker.services.inventory import IngredientSnapshotRepository
from bar_tracker.services.shopping import ShoppingListRepository


@dataclass
class InMemoryStateRepository(IngredientSnapshotRepository, ShoppingListRepository):
    """In-memory snapshot storage for tests."""

    ingredients: list[Ingredient] | None = None
    shopping_list: list[str] | None = None
    ingredient_saves: int = 0
    shopping_saves: int = 0

    def load_ingredients(self) -> list[Ingredient] | None:
        return None if self.ingredients is None else list(self.ingredients)

    def save_ingredients(self, ingredients: list[Ingredient]) -> None:
        self.ingredients = list(ingredients)
        self.ingredient_saves += 1

    def load_shopping_list(self) -> list[str] | None:
        return None if self.shopping_list is None else list(self.shopping_list)

    def save_shopping_list(self, ingredient_ids: list[str]) -> None:
        self.shopping_list = list(ingredient_ids)
        self.shopping_saves += 1


@dataclass
class FakeCatalogSource(CatalogSource):
    """Catalog source returning fixed payloads, or failing per collection."""

    ingredients: object = field(default_factory=lambda: list(INGREDIENTS_JSON))
    categories: object = field(default_factory=lambda: list(CATEGORIES_JSON))
    drinks: object = field(default_factory=lambda: list(DRINKS_JSON))
    failing: set[str] = field(default_factory=set)

    async def load_ingredients(self) -> object:
        return self._get("ingredients", self.ingredients)

    async def load_categories(self) -> object:
        return self._get("categories", self.categories)

    async def load_drinks(self) -> object:
        return self._get("drinks", self.drinks)

    def _get(self, name: str, payload: object) -> object:
        if name in self.failing:
            raise LoadFailure(f"{name} unavailable")
        return payload


INGREDIENTS_JSON = [
    {"id": "gin", "name": "Gin", "category": "spirits", "inStock": True},
    {"id": "tonic", "name": "Tonic Water", "category": "mixers", "inStock": False},
    {"id": "lime", "name": "Lime", "category": "fruit", "inStock": True},
    {"id": "soda", "name": "Soda Water", "category": "mixers", "inStock": False},
    {"id": "rum", "name": "White Rum", "category": "spirits", "inStock": False},
    {"id": "mint", "name": "Mint", "category": "garnish", "inStock": False},
    {"id": "sugar", "name": "Sugar Syrup", "category": "mixers", "inStock": True},
]

CATEGORIES_JSON = [
    {"id": "spirits", "name": "Spirits", "description": "Base spirits"},
    {"id": "mixers", "name": "Mixers", "description": "Non-alcoholic mixers"},
]

DRINKS_JSON = [
    {
        "id": "gin-tonic",
        "name": "Gin & Tonic",
        "ingredients": [
            {"ingredientId": "gin", "amount": "50", "unit": "ml"},
            {
                "ingredientId": "tonic",
                "amount": "150",
                "unit": "ml",
                "substitutes": ["soda"],
            },
            {
                "ingredientId": "lime",
                "amount": "1",
                "unit": "wedge",
                "category": "secondary",
            },
        ],
        "instructions": "Build over ice.",
        "image": "gin-tonic.jpg",
        "tags": {"strength": "medium", "taste": ["Bitter", "Refreshing"]},
    },
    {
        "id": "gimlet",
        "name": "Gimlet",
        "ingredients": [
            {"ingredientId": "gin", "amount": 60, "unit": "ml"},
            {"ingredientId": "lime", "amount": "20", "unit": "ml"},
            {"ingredientId": "sugar", "amount": "a splash", "unit": ""},
        ],
        "instructions": "Shake and strain.",
        "tags": {"strength": "strong", "taste": ["Lime"], "canMake": False},
    },
    {
        "id": "mojito",
        "name": "Mojito",
        "ingredients": [
            {"ingredientId": "rum", "amount": "50", "unit": "ml"},
            {"ingredientId": "mint", "amount": "6", "unit": "leaves"},
            {"ingredientId": "soda", "amount": "top", "unit": ""},
            {"ingredientId": "lime", "amount": "1/2", "unit": ""},
        ],
        "instructions": "Muddle, build, top with soda.",
        "tags": {"strength": "light", "taste": ["Mint", "Sweet"]},
        "carAuctionEasterEgg": "Sold!",
    },
]


def make_ingredient(ingredient_id: str, in_stock: bool, **kwargs: object) -> Ingredient:
    return Ingredient(
        id=ingredient_id,
        name=kwargs.pop("name", ingredient_id.title()),
        category=kwargs.pop("category", "misc"),
        in_stock=in_stock,
        **kwargs,
    )


def make_drink(
    drink_id: str,
    requirements: list[str | tuple[str, tuple[str, ...]]],
    strength: str = "medium",
    taste: tuple[str, ...] = (),
) -> Drink:
    items = []
    for requirement in requirements:
        if isinstance(requirement, str):
            ingredient_id, substitutes = requirement, ()
        else:
            ingredient_id, substitutes = requirement
        items.append(
            DrinkIngredient(
                ingredient_id=ingredient_id,
                amount="1",
                unit="oz",
                substitutes=substitutes,
            )
        )
    return Drink(
        id=drink_id,
        name=drink_id.replace("-", " ").title(),
        ingredients=tuple(items),
        instructions="",
        tags=DrinkTags(strength=strength, taste=taste),  # type: ignore[arg-type]
    )


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        catalog_dir=str(tmp_path / "catalog"),
        state_dir=str(tmp_path / "state"),
        page_size=2,
    )


@pytest.fixture
def state_repository() -> InMemoryStateRepository:
    return InMemoryStateRepository()


@pytest.fixture
def catalog_source() -> FakeCatalogSource:
    return FakeCatalogSource()


@pytest.fixture
def container(
    settings: Settings,
    catalog_source: FakeCatalogSource,
    state_repository: InMemoryStateRepository,
) -> AppContainer:
    return wire_container(
        settings=settings,
        source=catalog_source,
        ingredient_repository=state_repository,
        shopping_repository=state_repository,
    )
