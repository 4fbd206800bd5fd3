"""Mocked sign-in and user settings.

There is no identity system: signing in just stores a ``UserProfile`` in the
application state, signing out clears it.
"""

from __future__ import annotations

import structlog

from app.models.enums import AdvisoryFrequency, CropType, IrrigationMethod
from app.schemas.session import LoginRequest, SettingsRead, SettingsUpdate
from app.schemas.state import UserProfile
from app.services.state_store import StateStore

logger = structlog.get_logger("agrisynch.account")

DEMO_PROFILE = UserProfile(
	name="Rajesh Kumar",
	village="Narayangaon",
	phone="+91 98765 43210",
	experience="Expert",
	crop_preferences=[CropType.wheat, CropType.cotton],
	irrigation_method=IrrigationMethod.drip,
	advisory_frequency=AdvisoryFrequency.daily,
)


class AccountService:
	def __init__(self, store: StateStore):
		self.store = store

	async def current_user(self) -> UserProfile:
		state = await self.store.load()
		if state.user is None:
			raise LookupError("No user is signed in")
		return state.user

	async def sign_in(self, payload: LoginRequest) -> UserProfile:
		profile = UserProfile(
			name=payload.name.strip() or "Farmer User",
			village=payload.village.strip() or "Regional District",
			phone=payload.phone.strip(),
			experience="Intermediate",
			irrigation_method=IrrigationMethod.manual,
			advisory_frequency=AdvisoryFrequency.daily,
		)
		return await self._store_user(profile)

	async def sign_in_demo(self) -> UserProfile:
		return await self._store_user(DEMO_PROFILE.model_copy(deep=True))

	async def sign_out(self) -> None:
		state = await self.store.load()
		state.user = None
		await self.store.save(state)
		logger.info("user_signed_out")

	async def get_settings(self) -> SettingsRead:
		state = await self.store.load()
		return SettingsRead(language=state.language, settings=state.settings)

	async def update_settings(self, payload: SettingsUpdate) -> SettingsRead:
		state = await self.store.load()
		changes = payload.model_dump(exclude_unset=True, exclude_none=True)
		language = changes.pop("language", None)
		if language is not None:
			state.language = language
		if changes:
			state.settings = state.settings.model_copy(update=changes)
		await self.store.save(state)
		return SettingsRead(language=state.language, settings=state.settings)

	async def _store_user(self, profile: UserProfile) -> UserProfile:
		state = await self.store.load()
		state.user = profile
		await self.store.save(state)
		logger.info("user_signed_in", village=profile.village)
		return profile
