"""Pydantic schemas for the persisted application state blob."""

from __future__ import annotations

from pydantic import ConfigDict, Field, field_validator

from app.models.enums import (
	AdvisoryFrequency,
	CropType,
	IrrigationMethod,
	Language,
	SoilType,
	Theme,
	UsageMode,
	WeatherCondition,
)
from app.schemas.base import CamelModel
from app.schemas.insights import OfflineInsight


class FarmerCrop(CamelModel):
	"""A registered field.  Immutable once stored; removed only by deletion.

	``type`` and ``soil_type`` fall back to the raw string when a stored
	blob carries a value outside the known enums, so one bad record never
	prevents the rest of the state from loading.
	"""

	model_config = ConfigDict(frozen=True)

	id: str = Field(min_length=1, max_length=64)
	type: CropType | str = Field(union_mode="left_to_right")
	sowing_date: str
	soil_type: SoilType | str = Field(union_mode="left_to_right")
	region: str = ""
	nickname: str = ""

	@field_validator("type", mode="before")
	@classmethod
	def _known_crop_type(cls, value: object) -> object:
		try:
			return CropType(value)
		except ValueError:
			return value

	@field_validator("soil_type", mode="before")
	@classmethod
	def _known_soil_type(cls, value: object) -> object:
		try:
			return SoilType(value)
		except ValueError:
			return value

	@property
	def display_name(self) -> str:
		return self.nickname or str(self.type)


class WeatherDay(CamelModel):
	date: str
	temp: int
	condition: WeatherCondition
	precip_chance: int = Field(ge=0, le=100)


class UserProfile(CamelModel):
	name: str = Field(min_length=1, max_length=255)
	phone: str = ""
	village: str = ""
	experience: str = "Intermediate"
	photo_url: str | None = None
	crop_preferences: list[CropType] = Field(default_factory=list)
	irrigation_method: IrrigationMethod = IrrigationMethod.manual
	advisory_frequency: AdvisoryFrequency = AdvisoryFrequency.daily


class UserSettings(CamelModel):
	theme: Theme = Theme.light
	usage_mode: UsageMode = UsageMode.simple
	high_contrast: bool = False
	haptic_feedback: bool = True
	critical_alerts_only: bool = False
	daily_reminder_time: str = "08:00"
	pin_lock: str | None = None
	hide_sensitive_info: bool = False
	notification_sound: str = "Bell"
	font_size: int = Field(default=14, ge=12, le=20)
	weather_alerts: bool = True
	pest_alerts: bool = True
	market_price_alerts: bool = False
	govt_schemes_alerts: bool = True
	two_factor_auth: bool = False


class DiagnosticCase(CamelModel):
	id: str
	timestamp: str
	crop_nickname: str
	description: str
	diagnosis: str
	image_url: str | None = None


class AppState(CamelModel):
	"""The whole client state, stored and replaced as one unit."""

	language: Language = Language.english
	user: UserProfile | None = None
	crops: list[FarmerCrop] = Field(default_factory=list)
	weather_snapshot: list[WeatherDay] = Field(default_factory=list)
	is_online: bool = True
	last_sync_time: str | None = None
	cached_insights: list[OfflineInsight] = Field(default_factory=list)
	diagnostic_history: list[DiagnosticCase] = Field(default_factory=list)
	settings: UserSettings = Field(default_factory=UserSettings)
