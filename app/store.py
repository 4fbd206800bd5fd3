"""Redis connection and state-store dependency."""

from __future__ import annotations

from fastapi import Request
from redis.asyncio import Redis

from app.config import get_settings
from app.services.state_store import StateStore


def create_redis() -> Redis:
    settings = get_settings()
    return Redis.from_url(settings.redis_url, decode_responses=True)


async def get_state_store(request: Request) -> StateStore:
    """FastAPI dependency — the state store bound to the app's Redis pool."""
    redis_client = getattr(request.app.state, "redis", None)
    if redis_client is None:
        raise RuntimeError("Redis is not initialised")
    return StateStore(redis_client)
