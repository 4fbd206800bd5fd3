from __future__ import annotations

from datetime import UTC, date, datetime

import pytest
from httpx import AsyncClient

from app.config import Settings
from app.models.enums import CropType, SoilType, WeatherCondition
from app.schemas.state import AppState, UserSettings
from app.services import advisory_service
from app.services.advisory_service import AdvisoryService
from app.services.state_store import StateStore
from app.services.weather_provider import SimulatedWeatherProvider
from tests.factories import make_crop, make_day


def _rainy_state() -> AppState:
	return AppState(
		crops=[
			make_crop("c1", CropType.rice, days_ago=5, soil_type=SoilType.black, nickname="Paddy"),
			make_crop("c2", CropType.cotton, days_ago=5, soil_type=SoilType.red),
		],
		weather_snapshot=[
			make_day("2026-03-01"),
			make_day("2026-03-02", condition=WeatherCondition.cloudy, precip_chance=75),
			make_day("2026-03-03"),
			make_day("2026-03-04"),
		],
	)


def test_simulated_forecast_shape() -> None:
	provider = SimulatedWeatherProvider(days=4, seed=7)
	days = provider.forecast(date(2026, 12, 30))

	assert [day.date for day in days] == ["2026-12-30", "2026-12-31", "2027-01-01", "2027-01-02"]
	assert all(28 <= day.temp <= 35 for day in days)
	assert all(0 <= day.precip_chance <= 99 for day in days)


def test_simulated_forecast_is_reproducible_with_seed() -> None:
	first = SimulatedWeatherProvider(seed=42).forecast(date(2026, 3, 1))
	second = SimulatedWeatherProvider(seed=42).forecast(date(2026, 3, 1))
	assert first == second


def test_simulated_forecast_rejects_empty_horizon() -> None:
	with pytest.raises(ValueError):
		SimulatedWeatherProvider(days=0)


@pytest.mark.asyncio
async def test_insights_endpoint_preserves_generation_order(client: AsyncClient, store: StateStore) -> None:
	await store.save(_rainy_state())

	response = await client.get("/api/v1/insights")

	assert response.status_code == 200
	body = response.json()
	assert body["ranked"] is False
	assert [(item["cropId"], item["title"]) for item in body["items"]] == [
		("c1", "Critical: Waterlogging Risk"),
		("c1", "Delay Fertilizer"),
		("c1", "Pest Scouting"),
		("c2", "Delay Fertilizer"),
		("c2", "Whitefly Watch"),
	]
	assert body["items"][0]["cropNickname"] == "Paddy"
	assert body["items"][3]["cropNickname"] == "cotton"


@pytest.mark.asyncio
async def test_insights_endpoint_ranked_with_preferences(client: AsyncClient, store: StateStore) -> None:
	state = _rainy_state()
	state.settings = UserSettings(pest_alerts=False)
	await store.save(state)

	response = await client.get("/api/v1/insights", params={"ranked": "true", "apply_preferences": "true"})

	assert response.status_code == 200
	body = response.json()
	assert body["preferencesApplied"] is True
	assert [item["priority"] for item in body["items"]] == ["critical", "warning", "warning"]


@pytest.mark.asyncio
async def test_insights_endpoint_with_no_crops(client: AsyncClient) -> None:
	response = await client.get("/api/v1/insights")
	assert response.status_code == 200
	assert response.json()["items"] == []


@pytest.mark.asyncio
async def test_sync_weather_stores_forecast_and_cached_insights(store: StateStore) -> None:
	await store.save(AppState(crops=[make_crop("c1", CropType.wheat, days_ago=130)]))
	service = AdvisoryService(store, SimulatedWeatherProvider(days=4, seed=3))
	now = datetime(2026, 3, 1, 6, 30, tzinfo=UTC)

	snapshot = await service.sync_weather(now=now)

	state = await store.load()
	assert len(snapshot.days) == 4
	assert state.weather_snapshot == snapshot.days
	assert state.weather_snapshot[0].date == "2026-03-01"
	assert state.last_sync_time == "2026-03-01T06:30+00:00"
	expected_harvest = state.weather_snapshot[0].condition == WeatherCondition.sunny
	assert ("Harvest Opportunity" in [item.title for item in state.cached_insights]) == expected_harvest


@pytest.mark.asyncio
async def test_weather_endpoints(client: AsyncClient, monkeypatch: pytest.MonkeyPatch) -> None:
	monkeypatch.setattr(
		"app.services.advisory_service.default_weather_provider",
		lambda: SimulatedWeatherProvider(days=4, seed=11),
	)

	empty = await client.get("/api/v1/weather")
	assert empty.json()["days"] == []
	assert empty.json()["lastSyncTime"] is None

	synced = await client.post("/api/v1/weather/sync")
	assert synced.status_code == 200
	assert len(synced.json()["days"]) == 4

	stored = await client.get("/api/v1/weather")
	assert stored.json()["days"] == synced.json()["days"]
	assert "precipChance" in stored.json()["days"][0]


@pytest.mark.asyncio
async def test_seeded_default_provider_advances_across_syncs(
	store: StateStore, monkeypatch: pytest.MonkeyPatch
) -> None:
	monkeypatch.setattr(advisory_service, "get_settings", lambda: Settings(weather_seed=7, weather_forecast_days=4))
	advisory_service.default_weather_provider.cache_clear()
	try:
		assert advisory_service.default_weather_provider() is advisory_service.default_weather_provider()

		now = datetime(2026, 3, 1, 6, 0, tzinfo=UTC)
		first = await AdvisoryService(store).sync_weather(now)
		second = await AdvisoryService(store).sync_weather(now)
	finally:
		advisory_service.default_weather_provider.cache_clear()

	reference = SimulatedWeatherProvider(days=4, seed=7)
	assert first.days == reference.forecast(now.date())
	assert second.days == reference.forecast(now.date())
	assert first.days != second.days
