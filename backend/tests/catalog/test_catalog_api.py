from decimal import Decimal

import pytest
from httpx import AsyncClient

PRODUCTS_API_PREFIX = "/api/v1/products"
CATEGORIES_API_PREFIX = "/api/v1/categories"


@pytest.mark.asyncio
async def test_get_product_with_attributes(test_client: AsyncClient, catalog: dict):
    """Le détail produit expose prix et jeux d'attributs dans l'ordre du catalogue."""
    response = await test_client.get(f"{PRODUCTS_API_PREFIX}/jacket")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Jacket"
    assert data["inStock"] is True
    assert [attribute_set["name"] for attribute_set in data["attributes"]] == ["Size", "Color"]
    assert [item["value"] for item in data["attributes"][0]["items"]] == ["S", "M"]
    assert data["attributes"][1]["type"] == "swatch"
    assert Decimal(data["prices"][0]["amount"]) == Decimal("120.00")
    assert data["prices"][0]["currency"] == {"label": "USD", "symbol": "$"}
    # Galerie triée par position, pas par ordre d'insertion
    assert data["gallery"] == [
        "https://cdn.example.com/jacket-front.jpg",
        "https://cdn.example.com/jacket-back.jpg",
    ]

    response = await test_client.get(f"{PRODUCTS_API_PREFIX}/airtag")
    assert response.json()["gallery"] == []


@pytest.mark.asyncio
async def test_get_product_not_found(test_client: AsyncClient, catalog: dict):
    response = await test_client.get(f"{PRODUCTS_API_PREFIX}/ghost")
    assert response.status_code == 404
    error = response.json()["errors"][0]
    assert error["extensions"] == {"category": "user", "code": "PRODUCT_NOT_FOUND"}


@pytest.mark.asyncio
async def test_list_products_by_category(test_client: AsyncClient, catalog: dict):
    response = await test_client.get(PRODUCTS_API_PREFIX + "/", params={"category": "clothes"})
    assert response.status_code == 200
    assert [product["id"] for product in response.json()] == ["jacket"]

    response = await test_client.get(PRODUCTS_API_PREFIX + "/", params={"category": "all"})
    assert response.status_code == 200
    assert len(response.json()) == 5


@pytest.mark.asyncio
async def test_list_categories(test_client: AsyncClient, catalog: dict):
    """Les catégories sont triées par nom et paginées."""
    response = await test_client.get(CATEGORIES_API_PREFIX + "/")
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 2
    assert [category["name"] for category in data["items"]] == ["clothes", "tech"]

    response = await test_client.get(CATEGORIES_API_PREFIX + "/", params={"limit": 1, "offset": 1})
    assert [category["name"] for category in response.json()["items"]] == ["tech"]


@pytest.mark.asyncio
async def test_invalid_query_parameter_is_bad_request(test_client: AsyncClient, catalog: dict):
    response = await test_client.get(CATEGORIES_API_PREFIX + "/", params={"limit": 0})
    assert response.status_code == 400
    assert response.json()["errors"][0]["extensions"] == {"category": "user", "code": "BAD_REQUEST"}
