from __future__ import annotations

import pytest
from httpx import AsyncClient

from app.services.state_store import StateStore


@pytest.mark.asyncio
async def test_no_user_before_sign_in(client: AsyncClient) -> None:
    response = await client.get("/api/v1/session")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_login_fills_defaults_and_logout_clears(client: AsyncClient, store: StateStore) -> None:
    response = await client.post("/api/v1/session/login", json={"phone": "+91 90000 00000"})

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Farmer User"
    assert body["village"] == "Regional District"
    assert body["irrigationMethod"] == "manual"

    current = await client.get("/api/v1/session")
    assert current.json()["phone"] == "+91 90000 00000"

    logout = await client.post("/api/v1/session/logout")
    assert logout.status_code == 204
    assert (await store.load()).user is None


@pytest.mark.asyncio
async def test_google_sign_in_uses_demo_profile(client: AsyncClient) -> None:
    response = await client.post("/api/v1/session/google")

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Rajesh Kumar"
    assert body["cropPreferences"] == ["wheat", "cotton"]


@pytest.mark.asyncio
async def test_settings_partial_update(client: AsyncClient, store: StateStore) -> None:
    initial = await client.get("/api/v1/settings")
    assert initial.json()["settings"]["criticalAlertsOnly"] is False

    response = await client.patch(
        "/api/v1/settings",
        json={"language": "hi", "criticalAlertsOnly": True, "fontSize": 18},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["language"] == "hi"
    assert body["settings"]["criticalAlertsOnly"] is True
    assert body["settings"]["fontSize"] == 18
    assert body["settings"]["theme"] == "light"

    state = await store.load()
    assert state.settings.font_size == 18


@pytest.mark.asyncio
async def test_settings_rejects_out_of_range_font(client: AsyncClient) -> None:
    response = await client.patch("/api/v1/settings", json={"fontSize": 30})
    assert response.status_code == 422
