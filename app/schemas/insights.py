"""Pydantic schemas for generated advisories."""

from __future__ import annotations

from datetime import datetime

from pydantic import ConfigDict, Field

from app.models.enums import InsightCategory, InsightPriority
from app.schemas.base import CamelModel


class OfflineInsight(CamelModel):
	model_config = ConfigDict(frozen=True)

	crop_id: str
	crop_nickname: str
	title: str
	description: str
	priority: InsightPriority
	action_date: str
	category: InsightCategory


class InsightListRead(CamelModel):
	generated_at: datetime
	ranked: bool = False
	preferences_applied: bool = False
	items: list[OfflineInsight] = Field(default_factory=list)
