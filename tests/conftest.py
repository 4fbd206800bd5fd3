"""Shared pytest fixtures — async test client with an in-memory Redis state store."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import UTC, date, datetime
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from app.main import app
from app.services.state_store import StateStore
from app.store import get_state_store


class FakeRedis:
	"""Dict-backed stand-in for the handful of redis.asyncio calls we make."""

	def __init__(self) -> None:
		self.data: dict[str, str] = {}
		self.closed = False

	async def get(self, key: str) -> str | None:
		return self.data.get(key)

	async def set(self, key: str, value: str) -> bool:
		self.data[key] = value
		return True

	async def delete(self, key: str) -> int:
		return 1 if self.data.pop(key, None) is not None else 0

	async def ping(self) -> bool:
		return True

	async def aclose(self) -> None:
		self.closed = True


@pytest.fixture
def fake_redis() -> FakeRedis:
	return FakeRedis()


@pytest.fixture
def store(fake_redis: FakeRedis) -> StateStore:
	return StateStore(fake_redis, namespace="agrisynch_test_store")  # type: ignore[arg-type]


@pytest.fixture
async def client(store: StateStore) -> AsyncGenerator[AsyncClient, None]:
	"""HTTPX async client with lifespan disabled and the state store mocked."""

	async def override_state_store() -> StateStore:
		return store

	app.dependency_overrides[get_state_store] = override_state_store
	original_lifespan = app.router.lifespan_context

	@asynccontextmanager
	async def noop_lifespan(_: Any) -> AsyncGenerator[None, None]:
		yield

	app.router.lifespan_context = noop_lifespan

	transport = ASGITransport(app=app)
	async with AsyncClient(transport=transport, base_url="http://test") as test_client:
		yield test_client

	app.router.lifespan_context = original_lifespan
	app.dependency_overrides.clear()


@pytest.fixture
def today() -> date:
	return datetime.now(UTC).date()

