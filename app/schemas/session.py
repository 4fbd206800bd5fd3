"""Pydantic schemas for mocked sign-in and user settings."""

from __future__ import annotations

from pydantic import Field

from app.models.enums import Language, Theme, UsageMode
from app.schemas.base import CamelModel
from app.schemas.state import UserSettings


class LoginRequest(CamelModel):
	name: str = Field(default="", max_length=255)
	village: str = Field(default="", max_length=255)
	phone: str = Field(default="", max_length=32)


class SettingsUpdate(CamelModel):
	language: Language | None = None
	theme: Theme | None = None
	usage_mode: UsageMode | None = None
	high_contrast: bool | None = None
	haptic_feedback: bool | None = None
	critical_alerts_only: bool | None = None
	daily_reminder_time: str | None = Field(default=None, pattern=r"^\d{2}:\d{2}$")
	pin_lock: str | None = None
	hide_sensitive_info: bool | None = None
	notification_sound: str | None = None
	font_size: int | None = Field(default=None, ge=12, le=20)
	weather_alerts: bool | None = None
	pest_alerts: bool | None = None
	market_price_alerts: bool | None = None
	govt_schemes_alerts: bool | None = None
	two_factor_auth: bool | None = None


class SettingsRead(CamelModel):
	language: Language
	settings: UserSettings
