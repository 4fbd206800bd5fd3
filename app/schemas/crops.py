"""Pydantic request/response schemas for registered crops."""

from __future__ import annotations

from datetime import date

from pydantic import ConfigDict, Field

from app.models.enums import CropType, GrowthStage, SoilType
from app.schemas.base import CamelModel
from app.schemas.reference import CropAdvisoryRead, SoilProfileRead
from app.schemas.state import FarmerCrop


class CropCreate(CamelModel):
	type: CropType
	sowing_date: date
	soil_type: SoilType
	region: str = Field(default="", max_length=100)
	nickname: str = Field(default="", max_length=100)


class CropRead(CamelModel):
	model_config = ConfigDict(from_attributes=True)

	id: str
	type: str
	sowing_date: str
	soil_type: str
	region: str
	nickname: str
	display_name: str
	stage: GrowthStage


class CropListRead(CamelModel):
	items: list[CropRead]


class StageDetailRead(CamelModel):
	stage: GrowthStage
	elapsed_days: int | None
	days_to_next_stage: int | None
	crop_known: bool
	date_valid: bool


class CropDetailRead(CamelModel):
	crop: FarmerCrop
	stage: StageDetailRead
	soil: SoilProfileRead | None = None
	advisory: CropAdvisoryRead | None = None
