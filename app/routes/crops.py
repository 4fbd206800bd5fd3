"""Registered crop (field) routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status

from app.schemas.crops import CropCreate, CropDetailRead, CropListRead, CropRead
from app.services.field_service import FieldService
from app.services.state_store import StateStore
from app.store import get_state_store

router = APIRouter(prefix="/crops", tags=["crops"])


def _map_error(exc: Exception) -> HTTPException:
	if isinstance(exc, LookupError):
		return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
	if isinstance(exc, ValueError):
		return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
	return HTTPException(
		status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
		detail="Unexpected crop service failure",
	)


@router.post("", response_model=CropRead, status_code=status.HTTP_201_CREATED)
async def register_crop(
	payload: CropCreate,
	store: StateStore = Depends(get_state_store),
) -> CropRead:
	service = FieldService(store)
	try:
		crop = await service.register_crop(payload)
	except Exception as exc:
		raise _map_error(exc) from exc
	return service.to_read(crop)


@router.get("", response_model=CropListRead)
async def list_crops(store: StateStore = Depends(get_state_store)) -> CropListRead:
	service = FieldService(store)
	try:
		crops = await service.list_crops()
	except Exception as exc:
		raise _map_error(exc) from exc
	return CropListRead(items=[service.to_read(crop) for crop in crops])


@router.get("/{crop_id}", response_model=CropDetailRead)
async def get_crop(
	crop_id: str,
	store: StateStore = Depends(get_state_store),
) -> CropDetailRead:
	service = FieldService(store)
	try:
		return await service.get_crop_detail(crop_id)
	except Exception as exc:
		raise _map_error(exc) from exc


@router.delete("/{crop_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_crop(
	crop_id: str,
	store: StateStore = Depends(get_state_store),
) -> Response:
	service = FieldService(store)
	try:
		await service.delete_crop(crop_id)
	except Exception as exc:
		raise _map_error(exc) from exc
	return Response(status_code=status.HTTP_204_NO_CONTENT)
