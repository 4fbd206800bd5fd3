"""Insight computation and weather sync over the persisted state."""

from __future__ import annotations

from datetime import UTC, datetime
from functools import lru_cache

import structlog

from app.config import get_settings
from app.models.reference import SOIL_PROFILES
from app.schemas.insights import InsightListRead
from app.schemas.weather import WeatherSnapshotRead
from app.services.insight_engine import filter_for_settings, generate_insights, rank_insights
from app.services.state_store import StateStore
from app.services.weather_provider import SimulatedWeatherProvider, WeatherProvider

logger = structlog.get_logger("agrisynch.advisory")


@lru_cache
def default_weather_provider() -> WeatherProvider:
	"""Process-wide provider; a seeded sequence advances across syncs."""
	settings = get_settings()
	return SimulatedWeatherProvider(days=settings.weather_forecast_days, seed=settings.weather_seed)


class AdvisoryService:
	def __init__(self, store: StateStore, weather_provider: WeatherProvider | None = None):
		self.store = store
		self.weather_provider = weather_provider or default_weather_provider()

	async def get_insights(
		self,
		*,
		ranked: bool = False,
		apply_preferences: bool = False,
		now: datetime | None = None,
	) -> InsightListRead:
		now = now or datetime.now(UTC)
		state = await self.store.load()
		items = generate_insights(state.crops, state.weather_snapshot, SOIL_PROFILES, now)
		if apply_preferences:
			items = filter_for_settings(items, state.settings)
		if ranked:
			items = rank_insights(items)
		logger.info(
			"insights_generated",
			crops=len(state.crops),
			forecast_days=len(state.weather_snapshot),
			insights=len(items),
		)
		return InsightListRead(
			generated_at=now,
			ranked=ranked,
			preferences_applied=apply_preferences,
			items=items,
		)

	async def get_weather(self) -> WeatherSnapshotRead:
		state = await self.store.load()
		return WeatherSnapshotRead(
			last_sync_time=state.last_sync_time,
			is_online=state.is_online,
			days=state.weather_snapshot,
		)

	async def sync_weather(self, now: datetime | None = None) -> WeatherSnapshotRead:
		"""Replace the stored forecast and refresh the cached insights."""
		now = now or datetime.now(UTC)
		state = await self.store.load()
		state.weather_snapshot = self.weather_provider.forecast(now.date())
		state.last_sync_time = now.isoformat(timespec="minutes")
		state.is_online = True
		state.cached_insights = generate_insights(state.crops, state.weather_snapshot, SOIL_PROFILES, now)
		await self.store.save(state)
		logger.info(
			"weather_synced",
			forecast_days=len(state.weather_snapshot),
			cached_insights=len(state.cached_insights),
		)
		return WeatherSnapshotRead(
			last_sync_time=state.last_sync_time,
			is_online=state.is_online,
			days=state.weather_snapshot,
		)
