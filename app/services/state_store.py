"""Redis-backed store for the application state blob.

The whole ``AppState`` is kept as one JSON string under a single key and is
replaced wholesale on every save. A blob that fails validation is copied to
``<namespace>:corrupt`` before the default state is handed out, so the next
save cannot destroy the only copy.
"""

from __future__ import annotations

import structlog
from pydantic import ValidationError
from redis.asyncio import Redis

from app.config import get_settings
from app.schemas.state import AppState

logger = structlog.get_logger("agrisynch.state")


class StateStore:
	def __init__(self, redis_client: Redis, namespace: str | None = None):
		self.redis_client = redis_client
		self.namespace = namespace or get_settings().state_namespace

	@property
	def corrupt_key(self) -> str:
		return f"{self.namespace}:corrupt"

	async def load(self) -> AppState:
		raw = await self.redis_client.get(self.namespace)
		if raw is None:
			return AppState()
		try:
			return AppState.model_validate_json(raw)
		except ValidationError as exc:
			await self.redis_client.set(self.corrupt_key, raw)
			logger.warning(
				"state_blob_corrupt",
				namespace=self.namespace,
				backup_key=self.corrupt_key,
				error=str(exc),
			)
			return AppState()

	async def save(self, state: AppState) -> AppState:
		await self.redis_client.set(self.namespace, state.model_dump_json(by_alias=True))
		return state

	async def clear(self) -> None:
		await self.redis_client.delete(self.namespace)
