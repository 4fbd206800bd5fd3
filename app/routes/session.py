"""Mocked sign-in and user settings routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status

from app.schemas.session import LoginRequest, SettingsRead, SettingsUpdate
from app.schemas.state import UserProfile
from app.services.account_service import AccountService
from app.services.state_store import StateStore
from app.store import get_state_store

router = APIRouter(tags=["session"])


def _map_error(exc: Exception) -> HTTPException:
	if isinstance(exc, LookupError):
		return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
	if isinstance(exc, ValueError):
		return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
	return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="session failure")


@router.get("/session", response_model=UserProfile)
async def current_user(store: StateStore = Depends(get_state_store)) -> UserProfile:
	try:
		return await AccountService(store).current_user()
	except Exception as exc:
		raise _map_error(exc) from exc


@router.post("/session/login", response_model=UserProfile)
async def login(payload: LoginRequest, store: StateStore = Depends(get_state_store)) -> UserProfile:
	try:
		return await AccountService(store).sign_in(payload)
	except Exception as exc:
		raise _map_error(exc) from exc


@router.post("/session/google", response_model=UserProfile)
async def google_sign_in(store: StateStore = Depends(get_state_store)) -> UserProfile:
	try:
		return await AccountService(store).sign_in_demo()
	except Exception as exc:
		raise _map_error(exc) from exc


@router.post("/session/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(store: StateStore = Depends(get_state_store)) -> Response:
	try:
		await AccountService(store).sign_out()
	except Exception as exc:
		raise _map_error(exc) from exc
	return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/settings", response_model=SettingsRead)
async def get_user_settings(store: StateStore = Depends(get_state_store)) -> SettingsRead:
	try:
		return await AccountService(store).get_settings()
	except Exception as exc:
		raise _map_error(exc) from exc


@router.patch("/settings", response_model=SettingsRead)
async def update_user_settings(
	payload: SettingsUpdate,
	store: StateStore = Depends(get_state_store),
) -> SettingsRead:
	try:
		return await AccountService(store).update_settings(payload)
	except Exception as exc:
		raise _map_error(exc) from exc
