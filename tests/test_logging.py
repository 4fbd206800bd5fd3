from __future__ import annotations

import pytest
from httpx import AsyncClient

from app.middleware.logging import redact_payloads


def test_redact_payloads_shortens_media() -> None:
    event = {"event": "diagnostic_failed", "image_data": "A" * 500, "crop": "rice"}

    redacted = redact_payloads(None, "info", event)

    assert redacted["image_data"].startswith("A" * 32)
    assert redacted["image_data"].endswith("(500 chars)")
    assert redacted["crop"] == "rice"


def test_redact_payloads_leaves_short_values() -> None:
    event = {"event": "x", "audio": "UENN"}
    assert redact_payloads(None, "info", event)["audio"] == "UENN"


@pytest.mark.asyncio
async def test_request_id_is_echoed(client: AsyncClient) -> None:
    response = await client.get("/health", headers={"x-request-id": "req-123"})
    assert response.status_code == 200
    assert response.headers["x-request-id"] == "req-123"

    generated = await client.get("/health")
    assert generated.headers["x-request-id"]
