"""Tests for the HTTP API."""

from fastapi.testclient import TestClient

from bar_tracker.api.app import create_app


def test_health_reports_load_errors(container, catalog_source) -> None:
    catalog_source.failing.add("categories")

    with TestClient(create_app(container)) as client:
        response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "ok",
        "errors": ["Failed to load categories data"],
    }


def test_list_drinks_filters_and_paginates(container) -> None:
    with TestClient(create_app(container)) as client:
        response = client.get("/drinks", params={"can_make": "false"})

    data = response.json()
    assert response.status_code == 200
    assert [drink["id"] for drink in data["drinks"]] == ["gin-tonic", "mojito"]
    assert data["total"] == 2
    assert data["total_pages"] == 1
    assert data["can_make_count"] == 1
    assert data["drinks"][0]["image_url"] == "/images/gin-tonic.jpg"
    assert data["drinks"][1]["image_url"] == "/images/default.jpg"


def test_list_drinks_by_taste_category(container) -> None:
    with TestClient(create_app(container)) as client:
        response = client.get("/drinks", params=[("taste", "Sour")])

    assert [drink["id"] for drink in response.json()["drinks"]] == ["gimlet"]


def test_list_drinks_second_page(container) -> None:
    with TestClient(create_app(container)) as client:
        response = client.get("/drinks", params={"page": 2})

    data = response.json()
    assert [drink["id"] for drink in data["drinks"]] == ["mojito"]
    assert data["page"] == 2


def test_drink_detail(container) -> None:
    with TestClient(create_app(container)) as client:
        response = client.get("/drinks/gin-tonic")
        missing = client.get("/drinks/zombie")

    data = response.json()
    assert data["drink"]["tags"]["can_make"] is False
    assert [item["id"] for item in data["missing"]] == ["tonic"]
    assert [item["status"] for item in data["requirements"]] == [
        "in_stock",
        "missing",
        "in_stock",
    ]
    assert missing.status_code == 404


def test_stock_toggle_updates_availability(container, state_repository) -> None:
    with TestClient(create_app(container)) as client:
        stock = client.put("/ingredients/soda/stock", json={"in_stock": True})
        drinks = client.get("/drinks", params={"can_make": "true"})

    assert stock.status_code == 200
    assert stock.json()["in_stock"] is True
    assert [drink["id"] for drink in drinks.json()["drinks"]] == [
        "gin-tonic",
        "gimlet",
    ]
    assert state_repository.ingredient_saves == 1


def test_substitution_toggle(container) -> None:
    with TestClient(create_app(container)) as client:
        client.put("/ingredients/soda/stock", json={"in_stock": True})
        toggled = client.put("/settings/substitutions", json={})
        settings = client.get("/settings")

    assert toggled.json() == {"allow_substitutions": False, "can_make_count": 1}
    assert settings.json() == {"allow_substitutions": False}


def test_invalid_amount_is_rejected(container, state_repository) -> None:
    with TestClient(create_app(container)) as client:
        invalid = client.put("/ingredients/gin/amount", json={"amount": "lots"})
        negative = client.put("/ingredients/gin/amount", json={"amount": -2})
        boolean = client.put("/ingredients/gin/amount", json={"amount": True})
        valid = client.put("/ingredients/gin/amount", json={"amount": "700"})

    assert invalid.status_code == 422
    assert negative.status_code == 422
    assert boolean.status_code == 422
    assert valid.json()["amount"] == 700.0
    assert state_repository.ingredient_saves == 1


def test_replace_ingredient_unknown_id(container) -> None:
    with TestClient(create_app(container)) as client:
        response = client.put("/ingredients/absinthe", json={"name": "Absinthe"})

    assert response.status_code == 404


def test_list_ingredients_grouped(container) -> None:
    with TestClient(create_app(container)) as client:
        response = client.get("/ingredients", params={"in_stock": "true"})
        grouped = client.get("/ingredients", params={"grouped": "true"})

    assert [item["id"] for item in response.json()["ingredients"]] == [
        "gin",
        "lime",
        "sugar",
    ]
    assert list(grouped.json()["categories"]) == [
        "spirits",
        "mixers",
        "fruit",
        "garnish",
    ]


def test_search_ingredients_by_name(container) -> None:
    with TestClient(create_app(container)) as client:
        response = client.get("/ingredients", params={"q": "WATER", "in_stock": False})

    assert [item["id"] for item in response.json()["ingredients"]] == [
        "tonic",
        "soda",
    ]


def test_shopping_list_flow(container) -> None:
    with TestClient(create_app(container)) as client:
        added = client.post(
            "/shopping-list", json={"ingredient_ids": ["tonic", "rum", "tonic"]}
        )
        purchased = client.post("/shopping-list/tonic/purchase")
        removed = client.delete("/shopping-list/rum")
        listing = client.get("/shopping-list")
        drinks = client.get("/drinks", params={"can_make": "true"})

    assert added.json()["ids"] == ["tonic", "rum"]
    assert purchased.json()["ingredient"]["in_stock"] is True
    assert purchased.json()["ids"] == ["rum"]
    assert removed.json()["ids"] == []
    assert listing.json() == {"ids": [], "items": []}
    assert [drink["id"] for drink in drinks.json()["drinks"]] == [
        "gin-tonic",
        "gimlet",
    ]


def test_shopping_view_stock_update(container) -> None:
    with TestClient(create_app(container)) as client:
        client.post("/shopping-list", json={"ingredient_ids": ["tonic", "rum"]})
        response = client.put("/shopping-list/rum/stock", json={"in_stock": True})

    assert response.json()["ingredient"]["in_stock"] is True
    assert response.json()["ids"] == ["tonic"]


def test_shopping_suggestions_and_drink_missing(container) -> None:
    with TestClient(create_app(container)) as client:
        suggestions = client.get("/shopping-list/suggestions")
        added = client.post("/drinks/mojito/shopping-list")
        out_of_stock = client.post("/shopping-list/out-of-stock")

    assert [item["id"] for item in suggestions.json()["items"]] == ["tonic"]
    assert added.json()["added"] == ["soda", "rum", "mint"]
    assert out_of_stock.json()["added"] == ["tonic"]


def test_tastes_endpoint(container) -> None:
    with TestClient(create_app(container)) as client:
        response = client.get("/tastes")

    names = [category["name"] for category in response.json()["categories"]]
    assert names == ["Sweet", "Sour", "Bitter", "Spicy", "Refreshing"]
