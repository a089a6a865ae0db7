"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict

from fastapi import FastAPI, Query, Request, status
from fastapi.responses import JSONResponse

from bar_tracker.api.schemas import (
    AmountUpdate,
    IngredientUpdate,
    ShoppingListAdd,
    StockUpdate,
    SubstitutionUpdate,
)
from bar_tracker.app_logging import configure_logging
from bar_tracker.containers import AppContainer
from bar_tracker.domain.drinks import Drink, Strength
from bar_tracker.domain.errors import (
    InvalidAmountInput,
    UnknownDrink,
    UnknownIngredient,
)
from bar_tracker.domain.ingredients import Ingredient
from bar_tracker.domain.tastes import TASTE_CATEGORIES
from bar_tracker.services.assets import resolve_image
from bar_tracker.services.filters import (
    DrinkFilters,
    group_by_category,
    search_ingredients,
)


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        errors = await app.state.container.load()
        for message in errors:
            logger.warning("Catalog load error: %s", message)
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    async def _not_found(_request: Request, exc: KeyError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": f"Not found: {exc.args[0]}"},
        )

    async def _invalid_amount(
        _request: Request, exc: InvalidAmountInput
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc)},
        )

    app.add_exception_handler(UnknownIngredient, _not_found)
    app.add_exception_handler(UnknownDrink, _not_found)
    app.add_exception_handler(InvalidAmountInput, _invalid_amount)

    def _drink_view(drink: Drink) -> dict[str, object]:
        view = asdict(drink)
        view["image_url"] = resolve_image(drink, container.settings.image_base_url)
        return view

    @app.get("/health")
    async def health(request: Request) -> dict[str, object]:
        """Health check including any catalog load errors."""
        state_container: AppContainer = request.app.state.container
        return {"status": "ok", "errors": state_container.load_errors}

    @app.get("/ingredients")
    async def list_ingredients(
        request: Request,
        in_stock: bool | None = None,
        grouped: bool = False,
        q: str | None = None,
    ) -> dict[str, object]:
        """Return the inventory, optionally filtered, searched or grouped."""
        inventory = request.app.state.container.inventory_service
        if in_stock is None:
            ingredients = inventory.ingredients
        elif in_stock:
            ingredients = inventory.in_stock()
        else:
            ingredients = inventory.out_of_stock()
        ingredients = search_ingredients(ingredients, q)
        if grouped:
            return {"categories": group_by_category(ingredients)}
        return {"ingredients": ingredients}

    @app.get("/categories")
    async def list_categories(request: Request) -> dict[str, object]:
        """Return ingredient categories."""
        return {"categories": request.app.state.container.inventory_service.categories}

    @app.put("/ingredients/{ingredient_id}")
    async def replace_ingredient(
        ingredient_id: str, body: IngredientUpdate, request: Request
    ) -> Ingredient:
        """Replace an ingredient's editable fields."""
        inventory = request.app.state.container.inventory_service
        return inventory.update_ingredient(
            Ingredient(
                id=ingredient_id,
                name=body.name,
                category=body.category,
                in_stock=body.in_stock,
                amount=body.amount,
                unit=body.unit,
            )
        )

    @app.put("/ingredients/{ingredient_id}/stock")
    async def set_stock(
        ingredient_id: str, body: StockUpdate, request: Request
    ) -> Ingredient:
        """Set the in-stock flag of an ingredient."""
        inventory = request.app.state.container.inventory_service
        return inventory.toggle_stock(ingredient_id, body.in_stock)

    @app.put("/ingredients/{ingredient_id}/amount")
    async def set_amount(
        ingredient_id: str, body: AmountUpdate, request: Request
    ) -> Ingredient:
        """Set the on-hand amount of an ingredient."""
        inventory = request.app.state.container.inventory_service
        return inventory.set_amount(ingredient_id, body.amount)

    @app.get("/drinks")
    async def list_drinks(  # noqa: PLR0913
        request: Request,
        can_make: bool | None = None,
        strength: Strength | None = None,
        taste: list[str] = Query(default=[]),
        q: str | None = None,
        page: int = Query(default=1, ge=1),
    ) -> dict[str, object]:
        """Return one page of filtered drinks."""
        state_container: AppContainer = request.app.state.container
        drinks = state_container.drink_service
        result = drinks.query(
            DrinkFilters(
                can_make=can_make, strength=strength, taste_categories=tuple(taste)
            ),
            search=q,
            page=page,
            page_size=state_container.settings.page_size,
        )
        return {
            "drinks": [_drink_view(drink) for drink in result.items],
            "page": result.page,
            "page_size": result.page_size,
            "total": result.total,
            "total_pages": result.total_pages,
            "can_make_count": drinks.can_make_count,
            "allow_substitutions": drinks.allow_substitutions,
        }

    @app.get("/drinks/{drink_id}")
    async def drink_detail(drink_id: str, request: Request) -> dict[str, object]:
        """Return a drink with per-requirement availability."""
        detail = request.app.state.container.drink_service.detail(drink_id)
        return {
            "drink": _drink_view(detail.drink),
            "requirements": detail.requirements,
            "missing": detail.missing,
        }

    @app.post("/drinks/{drink_id}/shopping-list")
    async def add_drink_missing(drink_id: str, request: Request) -> dict[str, object]:
        """Add a drink's missing ingredients to the shopping list."""
        state_container: AppContainer = request.app.state.container
        drink = state_container.drink_service.get_drink(drink_id)
        added = state_container.shopping_service.add_missing_for_drink(drink)
        return {"added": added}

    @app.get("/tastes")
    async def list_tastes() -> dict[str, object]:
        """Return the taste categories used by the drink filter."""
        return {"categories": TASTE_CATEGORIES}

    @app.get("/settings")
    async def get_settings(request: Request) -> dict[str, object]:
        """Return user-adjustable matching settings."""
        drinks = request.app.state.container.drink_service
        return {"allow_substitutions": drinks.allow_substitutions}

    @app.put("/settings/substitutions")
    async def set_substitutions(
        body: SubstitutionUpdate, request: Request
    ) -> dict[str, object]:
        """Set or toggle substitute matching."""
        drinks = request.app.state.container.drink_service
        if body.allow is None:
            drinks.toggle_allow_substitutions()
        else:
            drinks.set_allow_substitutions(body.allow)
        return {
            "allow_substitutions": drinks.allow_substitutions,
            "can_make_count": drinks.can_make_count,
        }

    @app.get("/shopping-list")
    async def get_shopping_list(request: Request) -> dict[str, object]:
        """Return the shopping list resolved to ingredients."""
        shopping = request.app.state.container.shopping_service
        return {"ids": shopping.ingredient_ids, "items": shopping.items()}

    @app.post("/shopping-list")
    async def add_to_shopping_list(
        body: ShoppingListAdd, request: Request
    ) -> dict[str, object]:
        """Add ingredient ids, skipping ones already listed."""
        shopping = request.app.state.container.shopping_service
        added = shopping.add_multiple(body.ingredient_ids)
        return {"added": added, "ids": shopping.ingredient_ids}

    @app.post("/shopping-list/out-of-stock")
    async def add_out_of_stock(request: Request) -> dict[str, object]:
        """Add every out-of-stock ingredient."""
        shopping = request.app.state.container.shopping_service
        return {"added": shopping.add_out_of_stock(), "ids": shopping.ingredient_ids}

    @app.get("/shopping-list/suggestions")
    async def shopping_suggestions(request: Request) -> dict[str, object]:
        """Return ingredients that would unlock almost-makeable drinks."""
        state_container: AppContainer = request.app.state.container
        suggestions = state_container.shopping_service.suggestions(
            state_container.drink_service.catalog
        )
        return {"items": suggestions}

    @app.delete("/shopping-list/{ingredient_id}")
    async def remove_from_shopping_list(
        ingredient_id: str, request: Request
    ) -> dict[str, object]:
        """Remove an id from the shopping list."""
        shopping = request.app.state.container.shopping_service
        shopping.remove(ingredient_id)
        return {"ids": shopping.ingredient_ids}

    @app.post("/shopping-list/{ingredient_id}/purchase")
    async def mark_purchased(ingredient_id: str, request: Request) -> dict[str, object]:
        """Mark an ingredient as bought: unlist it and set it in stock."""
        shopping = request.app.state.container.shopping_service
        ingredient = shopping.mark_purchased(ingredient_id)
        return {"ingredient": ingredient, "ids": shopping.ingredient_ids}

    @app.put("/shopping-list/{ingredient_id}/stock")
    async def shopping_stock(
        ingredient_id: str, body: StockUpdate, request: Request
    ) -> dict[str, object]:
        """Set stock from the shopping view; in-stock items leave the list."""
        shopping = request.app.state.container.shopping_service
        ingredient = shopping.mark_in_stock(ingredient_id, body.in_stock)
        return {"ingredient": ingredient, "ids": shopping.ingredient_ids}

    return app
