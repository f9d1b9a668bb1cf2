"""
Tests for Category API endpoints.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_list_categories_has_placeholder(client: AsyncClient):
    """Test the placeholder category is always listed."""
    response = await client.get("/api/v1/categories")
    assert response.status_code == 200
    assert response.json() == [
        {
            "id": "uncategorized",
            "name": "Uncategorized",
            "description": "Data types that have not been assigned to a category.",
        }
    ]


@pytest.mark.asyncio
async def test_create_category(client: AsyncClient):
    response = await client.post("/api/v1/categories", json={"name": "Transport", "description": "Moving"})
    assert response.status_code == 201
    assert response.json()["name"] == "Transport"

    response = await client.get("/api/v1/categories")
    assert [c["name"] for c in response.json()] == ["Transport", "Uncategorized"]


@pytest.mark.asyncio
async def test_create_category_duplicate(client: AsyncClient):
    """Test creating a category with a duplicate name fails."""
    await client.post("/api/v1/categories", json={"name": "Transport"})
    response = await client.post("/api/v1/categories", json={"name": "transport"})
    assert response.status_code == 409
    assert "already exists" in response.json()["detail"]


@pytest.mark.asyncio
async def test_create_placeholder_refused(client: AsyncClient):
    response = await client.post("/api/v1/categories", json={"name": "Uncategorized"})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_rename_category_moves_data_types(client: AsyncClient):
    category = (await client.post("/api/v1/categories", json={"name": "Transport"})).json()
    roads = (await client.post("/api/v1/data-types", json={"name": "Roads", "category": "Transport"})).json()

    response = await client.patch(f"/api/v1/categories/{category['id']}", json={"name": "Mobility"})
    assert response.status_code == 200

    response = await client.get(f"/api/v1/data-types/{roads['id']}")
    assert response.json()["category"] == "Mobility"

    response = await client.get(f"/api/v1/categories/{category['id']}/data-types")
    assert [d["name"] for d in response.json()] == ["Roads"]


@pytest.mark.asyncio
async def test_delete_category(client: AsyncClient):
    category = (await client.post("/api/v1/categories", json={"name": "Transport"})).json()
    roads = (await client.post("/api/v1/data-types", json={"name": "Roads", "category": "Transport"})).json()

    response = await client.delete(f"/api/v1/categories/{category['id']}", params={"cascade": "false"})
    assert response.status_code == 409

    response = await client.delete(f"/api/v1/categories/{category['id']}")
    assert response.status_code == 200
    assert response.json() == {"reassigned_data_types": 1}

    response = await client.get(f"/api/v1/data-types/{roads['id']}")
    assert response.json()["category"] == "Uncategorized"

    response = await client.get("/api/v1/categories/uncategorized/data-types")
    assert [d["name"] for d in response.json()] == ["Roads"]


@pytest.mark.asyncio
async def test_delete_placeholder_refused(client: AsyncClient):
    response = await client.delete("/api/v1/categories/uncategorized")
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_category_not_found(client: AsyncClient):
    response = await client.delete("/api/v1/categories/missing")
    assert response.status_code == 404

    response = await client.get("/api/v1/categories/missing/data-types")
    assert response.status_code == 404
