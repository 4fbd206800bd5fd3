"""Read schemas for the static crop/soil/region reference tables."""

from __future__ import annotations

from pydantic import ConfigDict

from app.models.enums import Drainage, GrowthStage, SoilType, WaterRetention
from app.schemas.base import CamelModel


class SoilProfileRead(CamelModel):
	model_config = ConfigDict(from_attributes=True)

	soil_type: SoilType
	name: str
	hindi_name: str
	marathi_name: str
	water_retention: WaterRetention
	drainage: Drainage
	drainage_note: str
	fertility: str
	action_tips: list[str]


class CropAdvisoryRead(CamelModel):
	model_config = ConfigDict(from_attributes=True)

	stage: GrowthStage
	fertilizer: str
	pest_alert: str
	irrigation: str
	tips: list[str]


class CropDatasetRead(CamelModel):
	model_config = ConfigDict(from_attributes=True)

	name: str
	hindi_name: str
	marathi_name: str
	advisories: dict[GrowthStage, CropAdvisoryRead]


class RegionBoundsRead(CamelModel):
	model_config = ConfigDict(from_attributes=True)

	min_lat: float
	max_lat: float
	min_lng: float
	max_lng: float


class RegionRead(CamelModel):
	model_config = ConfigDict(from_attributes=True)

	id: str
	name: str
	hindi_name: str
	marathi_name: str
	state: str
	default_soil: SoilType
	bounds: RegionBoundsRead
