"""Pydantic schemas for the weather snapshot endpoints."""

from __future__ import annotations

from pydantic import Field

from app.schemas.base import CamelModel
from app.schemas.state import WeatherDay


class WeatherSnapshotRead(CamelModel):
	last_sync_time: str | None = None
	is_online: bool = True
	days: list[WeatherDay] = Field(default_factory=list)
