"""Registered-crop management over the persisted application state."""

from __future__ import annotations

import secrets
import string
from datetime import date, datetime

import structlog

from app.models.enums import CropType, SoilType
from app.models.reference import CROP_DATASETS, SOIL_PROFILES
from app.schemas.crops import CropCreate, CropDetailRead, CropRead, StageDetailRead
from app.schemas.reference import CropAdvisoryRead, SoilProfileRead
from app.schemas.state import FarmerCrop
from app.services.growth_stage import resolve_stage, resolve_stage_detail
from app.services.state_store import StateStore

logger = structlog.get_logger("agrisynch.fields")

_ID_ALPHABET = string.ascii_lowercase + string.digits


def _new_crop_id() -> str:
	return "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))


class FieldService:
	"""Service for crop registration, removal and per-crop detail views."""

	def __init__(self, store: StateStore):
		self.store = store

	async def register_crop(self, payload: CropCreate) -> FarmerCrop:
		state = await self.store.load()
		crop = FarmerCrop(
			id=_new_crop_id(),
			type=payload.type,
			sowing_date=payload.sowing_date.isoformat(),
			soil_type=payload.soil_type,
			region=payload.region,
			nickname=payload.nickname,
		)
		state.crops = [*state.crops, crop]
		await self.store.save(state)
		logger.info("crop_registered", crop_id=crop.id, crop_type=str(crop.type))
		return crop

	async def list_crops(self) -> list[FarmerCrop]:
		state = await self.store.load()
		return list(state.crops)

	async def get_crop(self, crop_id: str) -> FarmerCrop:
		state = await self.store.load()
		for crop in state.crops:
			if crop.id == crop_id:
				return crop
		raise LookupError(f"Crop {crop_id} not found")

	async def delete_crop(self, crop_id: str) -> None:
		state = await self.store.load()
		remaining = [crop for crop in state.crops if crop.id != crop_id]
		if len(remaining) == len(state.crops):
			raise LookupError(f"Crop {crop_id} not found")
		state.crops = remaining
		await self.store.save(state)
		logger.info("crop_removed", crop_id=crop_id)

	async def get_crop_detail(self, crop_id: str, now: date | datetime | None = None) -> CropDetailRead:
		crop = await self.get_crop(crop_id)
		return self.build_detail(crop, now)

	@staticmethod
	def to_read(crop: FarmerCrop, now: date | datetime | None = None) -> CropRead:
		return CropRead(
			id=crop.id,
			type=str(crop.type),
			sowing_date=crop.sowing_date,
			soil_type=str(crop.soil_type),
			region=crop.region,
			nickname=crop.nickname,
			display_name=crop.display_name,
			stage=resolve_stage(crop.type, crop.sowing_date, now),
		)

	@staticmethod
	def build_detail(crop: FarmerCrop, now: date | datetime | None = None) -> CropDetailRead:
		resolution = resolve_stage_detail(crop.type, crop.sowing_date, now)
		if not resolution.crop_known:
			logger.warning("unknown_crop_type", crop_id=crop.id, crop_type=str(crop.type))

		advisory = None
		if resolution.crop_known:
			dataset = CROP_DATASETS.get(CropType(crop.type))
			if dataset is not None:
				advisory = CropAdvisoryRead.model_validate(dataset.advisories[resolution.stage])

		soil = None
		try:
			profile = SOIL_PROFILES.get(SoilType(crop.soil_type))
		except ValueError:
			profile = None
		if profile is not None:
			soil = SoilProfileRead.model_validate(profile)

		return CropDetailRead(
			crop=crop,
			stage=StageDetailRead(
				stage=resolution.stage,
				elapsed_days=resolution.elapsed_days,
				days_to_next_stage=resolution.days_to_next_stage,
				crop_known=resolution.crop_known,
				date_valid=resolution.date_valid,
			),
			soil=soil,
			advisory=advisory,
		)
