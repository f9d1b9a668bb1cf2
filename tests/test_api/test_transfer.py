"""
Tests for import/export and report endpoints.
"""

import json

import pytest
from httpx import AsyncClient

CREATED = "2024-03-01T12:00:00+00:00"

DOCUMENT = {
    "dataTypes": [{"id": "T1", "name": "Roads", "category": "Transport", "created_at": CREATED}],
    "datasets": [{"id": "D1", "name": "OSM", "created_at": CREATED}],
    "categories": [{"id": "C1", "name": "Transport", "description": ""}],
    "dataTypeDatasets": [{"id": "L1", "data_type_id": "T1", "dataset_id": "D1"}],
}


@pytest.mark.asyncio
async def test_import_then_export(client: AsyncClient):
    """Test an imported document is served back with the same ids."""
    response = await client.post("/api/v1/transfer/import", content=json.dumps(DOCUMENT))
    assert response.status_code == 200
    assert response.json() == {"data_types": 1, "datasets": 1, "categories": 1, "links": 1}

    response = await client.get("/api/v1/data-types/T1/datasets")
    assert [d["id"] for d in response.json()] == ["D1"]

    response = await client.get("/api/v1/transfer/export.json")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    assert "urban_data_export.json" in response.headers["content-disposition"]
    exported = response.json()
    assert [d["id"] for d in exported["dataTypes"]] == ["T1"]
    assert exported["dataTypeDatasets"][0]["id"] == "L1"


@pytest.mark.asyncio
async def test_import_malformed(client: AsyncClient):
    """Test a broken file is refused with a 400 and existing data is kept."""
    await client.post("/api/v1/datasets", json={"name": "OSM"})

    response = await client.post("/api/v1/transfer/import", content="{broken")
    assert response.status_code == 400
    assert "not valid JSON" in response.json()["detail"]

    response = await client.post("/api/v1/transfer/import", content=json.dumps({"dataTypes": []}))
    assert response.status_code == 400

    response = await client.get("/api/v1/datasets")
    assert [d["name"] for d in response.json()] == ["OSM"]


@pytest.mark.asyncio
async def test_export_csv(client: AsyncClient):
    await client.post("/api/v1/transfer/import", content=json.dumps(DOCUMENT))

    response = await client.get("/api/v1/transfer/export.csv")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert "urban_data_export.csv" in response.headers["content-disposition"]
    assert response.text.startswith("Data Types\n")
    assert '"L1","T1","Roads","D1","OSM"' in response.text


@pytest.mark.asyncio
async def test_progress_report(client: AsyncClient):
    await client.post("/api/v1/transfer/import", content=json.dumps(DOCUMENT))
    await client.post("/api/v1/data-types", json={"name": "Soil"})

    response = await client.get("/api/v1/reports/progress")
    assert response.status_code == 200
    data = response.json()
    assert data["total_data_types"] == 2
    assert data["linked_data_types"] == 1
    assert data["percent_linked"] == 50


@pytest.mark.asyncio
async def test_dashboard_report(client: AsyncClient):
    await client.post("/api/v1/transfer/import", content=json.dumps(DOCUMENT))
    await client.post("/api/v1/data-types", json={"name": "Soil"})

    response = await client.get("/api/v1/reports/dashboard", params={"recent": 1})
    assert response.status_code == 200
    data = response.json()
    assert (data["data_types"], data["datasets"], data["categories"]) == (2, 1, 2)
    assert [d["name"] for d in data["recent_data_types"]] == ["Soil"]
