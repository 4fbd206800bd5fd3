"""Advisory insight and weather routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.schemas.insights import InsightListRead
from app.schemas.weather import WeatherSnapshotRead
from app.services.advisory_service import AdvisoryService
from app.services.state_store import StateStore
from app.store import get_state_store

router = APIRouter(tags=["advisory"])


def _map_error(exc: Exception) -> HTTPException:
	if isinstance(exc, LookupError):
		return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
	if isinstance(exc, ValueError):
		return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
	return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="advisory failure")


@router.get("/insights", response_model=InsightListRead)
async def get_insights(
	ranked: bool = Query(default=False),
	apply_preferences: bool = Query(default=False),
	store: StateStore = Depends(get_state_store),
) -> InsightListRead:
	service = AdvisoryService(store)
	try:
		return await service.get_insights(ranked=ranked, apply_preferences=apply_preferences)
	except Exception as exc:
		raise _map_error(exc) from exc


@router.get("/weather", response_model=WeatherSnapshotRead)
async def get_weather(store: StateStore = Depends(get_state_store)) -> WeatherSnapshotRead:
	service = AdvisoryService(store)
	try:
		return await service.get_weather()
	except Exception as exc:
		raise _map_error(exc) from exc


@router.post("/weather/sync", response_model=WeatherSnapshotRead)
async def sync_weather(store: StateStore = Depends(get_state_store)) -> WeatherSnapshotRead:
	service = AdvisoryService(store)
	try:
		return await service.sync_weather()
	except Exception as exc:
		raise _map_error(exc) from exc
