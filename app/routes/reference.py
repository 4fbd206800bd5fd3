"""Read-only reference data and region lookup routes."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, status

from app.models.enums import CropType
from app.models.reference import CROP_DATASETS, SOIL_PROFILES
from app.schemas.reference import CropDatasetRead, RegionRead, SoilProfileRead
from app.services.region_service import locate_region

router = APIRouter(tags=["reference"])


def _map_error(exc: Exception) -> HTTPException:
	if isinstance(exc, LookupError):
		return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
	if isinstance(exc, ValueError):
		return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
	return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="reference failure")


@router.get("/reference/crops", response_model=dict[CropType, CropDatasetRead])
async def list_crop_datasets() -> dict[CropType, CropDatasetRead]:
	return {crop_type: CropDatasetRead.model_validate(dataset) for crop_type, dataset in CROP_DATASETS.items()}


@router.get("/reference/crops/{crop_type}", response_model=CropDatasetRead)
async def get_crop_dataset(crop_type: CropType) -> CropDatasetRead:
	return CropDatasetRead.model_validate(CROP_DATASETS[crop_type])


@router.get("/reference/soils", response_model=list[SoilProfileRead])
async def list_soil_profiles() -> list[SoilProfileRead]:
	return [SoilProfileRead.model_validate(profile) for profile in SOIL_PROFILES.values()]


@router.get("/regions/locate", response_model=RegionRead)
async def locate(
	lat: float = Query(),
	lng: float = Query(),
) -> RegionRead:
	try:
		region = locate_region(lat, lng)
	except Exception as exc:
		raise _map_error(exc) from exc
	return RegionRead.model_validate(region)
