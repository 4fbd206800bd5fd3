"""Forward-looking insight generation from crops, forecast and soil data.

Each crop is run through five independent rule groups, in this order:

    1. waterlogging risk   rain ahead + poorly drained soil       CRITICAL
    2. fertilizer delay    rain ahead                             WARNING
    3. heat / irrigation   vegetative or flowering + temp > 35    CRITICAL | NORMAL
    4. pest scouting       cloudy or rainy tomorrow               NORMAL
    5. harvest window      harvest stage + sunny today            CRITICAL

Output order is crop order, then rule order.  Nothing here re-sorts;
``rank_insights`` is for consumers that want priority order.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from datetime import date, datetime

from app.models.enums import (
	CropType,
	Drainage,
	GrowthStage,
	InsightCategory,
	InsightPriority,
	SoilType,
	WaterRetention,
	WeatherCondition,
)
from app.models.reference import SoilProfile
from app.schemas.insights import OfflineInsight
from app.schemas.state import FarmerCrop, UserSettings, WeatherDay
from app.services.growth_stage import resolve_stage

RAIN_PRECIP_THRESHOLD = 50
HEAT_TEMP_THRESHOLD = 35

_PRIORITY_RANK: dict[InsightPriority, int] = {
	InsightPriority.critical: 0,
	InsightPriority.warning: 1,
	InsightPriority.normal: 2,
}


@dataclass(frozen=True, slots=True)
class _Forecast:
	today: WeatherDay | None
	tomorrow: WeatherDay | None
	day_after: WeatherDay | None

	@classmethod
	def from_snapshot(cls, snapshot: Sequence[WeatherDay | None]) -> "_Forecast":
		def _at(index: int) -> WeatherDay | None:
			return snapshot[index] if len(snapshot) > index else None

		return cls(today=_at(0), tomorrow=_at(1), day_after=_at(2))

	@property
	def rain_ahead(self) -> bool:
		return _precip_above(self.tomorrow) or _precip_above(self.day_after)

	@property
	def hot(self) -> bool:
		return _temp_above(self.today) or _temp_above(self.tomorrow)


def _precip_above(day: WeatherDay | None) -> bool:
	return day is not None and day.precip_chance > RAIN_PRECIP_THRESHOLD


def _temp_above(day: WeatherDay | None) -> bool:
	return day is not None and day.temp > HEAT_TEMP_THRESHOLD


def _condition_in(day: WeatherDay | None, conditions: set[WeatherCondition]) -> bool:
	return day is not None and day.condition in conditions


def _soil_for(crop: FarmerCrop, soil_profiles: Mapping[SoilType, SoilProfile]) -> SoilProfile | None:
	try:
		return soil_profiles.get(SoilType(crop.soil_type))
	except ValueError:
		return None


def _insight(
	crop: FarmerCrop,
	*,
	title: str,
	description: str,
	priority: InsightPriority,
	action_date: str,
	category: InsightCategory,
) -> OfflineInsight:
	return OfflineInsight(
		crop_id=crop.id,
		crop_nickname=crop.display_name,
		title=title,
		description=description,
		priority=priority,
		action_date=action_date,
		category=category,
	)


# ── Rule groups ─────────────────────────────────────────────────────────────


def _waterlogging(crop: FarmerCrop, soil: SoilProfile | None, forecast: _Forecast) -> list[OfflineInsight]:
	if not forecast.rain_ahead or soil is None or soil.drainage != Drainage.poor:
		return []
	return [
		_insight(
			crop,
			title="Critical: Waterlogging Risk",
			description=f"Rain coming. Your {soil.name} has poor drainage. Clear drainage channels now.",
			priority=InsightPriority.critical,
			action_date="Today",
			category=InsightCategory.weather,
		)
	]


def _fertilizer_delay(crop: FarmerCrop, forecast: _Forecast) -> list[OfflineInsight]:
	if not forecast.rain_ahead:
		return []
	return [
		_insight(
			crop,
			title="Delay Fertilizer",
			description="Rain expected. Applying fertilizer now will waste nutrients via leaching.",
			priority=InsightPriority.warning,
			action_date=(forecast.tomorrow.date if forecast.tomorrow and forecast.tomorrow.date else "Soon"),
			category=InsightCategory.fertilizer,
		)
	]


def _heat_irrigation(
	crop: FarmerCrop,
	stage: GrowthStage,
	soil: SoilProfile | None,
	forecast: _Forecast,
) -> list[OfflineInsight]:
	if stage not in (GrowthStage.vegetative, GrowthStage.flowering) or not forecast.hot:
		return []
	if soil is not None and soil.water_retention == WaterRetention.low:
		return [
			_insight(
				crop,
				title="Immediate Irrigation",
				description=f"{soil.name} dries fast. Heatwave + low retention requires extra watering today.",
				priority=InsightPriority.critical,
				action_date="Today",
				category=InsightCategory.soil,
			)
		]
	return [
		_insight(
			crop,
			title="Prepare Irrigation",
			description="High temperature ahead. Plan to water early morning for moisture conservation.",
			priority=InsightPriority.normal,
			action_date="Tomorrow",
			category=InsightCategory.weather,
		)
	]


def _pest_scouting(crop: FarmerCrop, forecast: _Forecast) -> list[OfflineInsight]:
	if not _condition_in(forecast.tomorrow, {WeatherCondition.cloudy, WeatherCondition.rainy}):
		return []
	title = "Whitefly Watch" if crop.type == CropType.cotton else "Pest Scouting"
	return [
		_insight(
			crop,
			title=title,
			description="Moist/Cloudy conditions favored by pests. Inspect leaf undersides.",
			priority=InsightPriority.normal,
			action_date=(forecast.tomorrow.date if forecast.tomorrow and forecast.tomorrow.date else "Tomorrow"),
			category=InsightCategory.pest,
		)
	]


def _harvest_window(crop: FarmerCrop, stage: GrowthStage, forecast: _Forecast) -> list[OfflineInsight]:
	if stage != GrowthStage.harvest or not _condition_in(forecast.today, {WeatherCondition.sunny}):
		return []
	return [
		_insight(
			crop,
			title="Harvest Opportunity",
			description="Dry weather today is perfect for harvesting and drying grains.",
			priority=InsightPriority.critical,
			action_date="Today",
			category=InsightCategory.weather,
		)
	]


# ── Public API ──────────────────────────────────────────────────────────────


def generate_insights(
	crops: Iterable[FarmerCrop],
	weather_snapshot: Sequence[WeatherDay | None],
	soil_profiles: Mapping[SoilType, SoilProfile],
	now: date | datetime | None = None,
) -> list[OfflineInsight]:
	"""Evaluate every rule group for every crop and return the insights.

	Missing forecast days never trigger a rule.  A crop whose soil type has no
	profile skips the soil-dependent checks but still gets the others.  Inputs
	are read only.
	"""
	forecast = _Forecast.from_snapshot(weather_snapshot)
	insights: list[OfflineInsight] = []

	for crop in crops:
		stage = resolve_stage(crop.type, crop.sowing_date, now)
		soil = _soil_for(crop, soil_profiles)

		insights.extend(_waterlogging(crop, soil, forecast))
		insights.extend(_fertilizer_delay(crop, forecast))
		insights.extend(_heat_irrigation(crop, stage, soil, forecast))
		insights.extend(_pest_scouting(crop, forecast))
		insights.extend(_harvest_window(crop, stage, forecast))

	return insights


def rank_insights(insights: Iterable[OfflineInsight]) -> list[OfflineInsight]:
	"""Stable sort by priority: critical, then warning, then normal."""
	return sorted(insights, key=lambda item: _PRIORITY_RANK[item.priority])


def filter_for_settings(insights: Iterable[OfflineInsight], settings: UserSettings) -> list[OfflineInsight]:
	"""Drop insights the farmer opted out of in their alert preferences."""
	kept: list[OfflineInsight] = []
	for item in insights:
		if settings.critical_alerts_only and item.priority != InsightPriority.critical:
			continue
		if not settings.weather_alerts and item.category == InsightCategory.weather:
			continue
		if not settings.pest_alerts and item.category == InsightCategory.pest:
			continue
		kept.append(item)
	return kept
