from __future__ import annotations

from datetime import date, timedelta

import pytest
from httpx import AsyncClient

from app.schemas.state import AppState
from app.services.state_store import StateStore
from tests.factories import make_crop


@pytest.mark.asyncio
async def test_register_and_list_crops(client: AsyncClient, store: StateStore, today: date) -> None:
    response = await client.post(
        "/api/v1/crops",
        json={
            "type": "rice",
            "sowingDate": (today - timedelta(days=40)).isoformat(),
            "soilType": "black",
            "region": "pune",
            "nickname": "North plot",
        },
    )

    assert response.status_code == 201
    body = response.json()
    assert len(body["id"]) == 9
    assert body["stage"] == "vegetative"
    assert body["displayName"] == "North plot"

    listing = await client.get("/api/v1/crops")
    assert listing.status_code == 200
    assert [item["id"] for item in listing.json()["items"]] == [body["id"]]

    state = await store.load()
    assert state.crops[0].nickname == "North plot"


@pytest.mark.asyncio
async def test_register_rejects_unknown_crop_type(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/crops",
        json={"type": "banana", "sowingDate": "2026-01-01", "soilType": "red"},
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_crop_detail_includes_stage_soil_and_advisory(client: AsyncClient, store: StateStore) -> None:
    await store.save(AppState(crops=[make_crop("f1", "wheat", days_ago=80, soil_type="alluvial")]))

    response = await client.get("/api/v1/crops/f1")

    assert response.status_code == 200
    body = response.json()
    assert body["stage"]["stage"] == "flowering"
    assert body["stage"]["elapsedDays"] == 80
    assert body["stage"]["daysToNextStage"] == 20
    assert body["stage"]["cropKnown"] is True
    assert body["soil"]["waterRetention"] == "Medium"
    assert body["advisory"]["stage"] == "flowering"
    assert body["advisory"]["tips"]


@pytest.mark.asyncio
async def test_crop_detail_for_unknown_crop_type_has_no_advisory(client: AsyncClient, store: StateStore) -> None:
    await store.save(AppState(crops=[make_crop("odd", "banana", days_ago=3)]))

    response = await client.get("/api/v1/crops/odd")

    assert response.status_code == 200
    body = response.json()
    assert body["stage"]["cropKnown"] is False
    assert body["advisory"] is None


@pytest.mark.asyncio
async def test_delete_crop(client: AsyncClient, store: StateStore) -> None:
    await store.save(AppState(crops=[make_crop("a"), make_crop("b")]))

    response = await client.delete("/api/v1/crops/a")
    assert response.status_code == 204

    state = await store.load()
    assert [crop.id for crop in state.crops] == ["b"]


@pytest.mark.asyncio
async def test_missing_crop_maps_to_404(client: AsyncClient) -> None:
    assert (await client.get("/api/v1/crops/nope")).status_code == 404
    assert (await client.delete("/api/v1/crops/nope")).status_code == 404
