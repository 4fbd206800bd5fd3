from __future__ import annotations

import json
from datetime import date

import pytest

from app.models.enums import CropType, Language, SoilType
from app.schemas.crops import CropCreate
from app.schemas.state import AppState
from app.services.field_service import FieldService
from app.services.state_store import StateStore
from tests.factories import make_crop, make_day


@pytest.mark.asyncio
async def test_missing_key_loads_default_state(store: StateStore) -> None:
    state = await store.load()
    assert state == AppState()
    assert state.settings.font_size == 14


@pytest.mark.asyncio
async def test_save_writes_camel_case_blob(store: StateStore, fake_redis) -> None:
    state = AppState(crops=[make_crop()], weather_snapshot=[make_day(precip_chance=70)])
    await store.save(state)

    blob = json.loads(fake_redis.data["agrisynch_test_store"])
    assert blob["crops"][0]["sowingDate"] == state.crops[0].sowing_date
    assert blob["weatherSnapshot"][0]["precipChance"] == 70
    assert "criticalAlertsOnly" in blob["settings"]

    assert await store.load() == state


@pytest.mark.asyncio
async def test_loads_blob_written_by_original_client(store: StateStore, fake_redis) -> None:
    fake_redis.data["agrisynch_test_store"] = json.dumps(
        {
            "language": "mr",
            "user": None,
            "crops": [
                {
                    "id": "k3j9x0a1b",
                    "type": "cotton",
                    "sowingDate": "2026-06-15",
                    "soilType": "latrite",
                    "region": "konkan",
                    "nickname": "",
                }
            ],
            "weatherSnapshot": [],
            "isOnline": True,
            "lastSyncTime": None,
            "cachedInsights": [],
            "diagnosticHistory": [],
            "settings": {"theme": "dark", "criticalAlertsOnly": True},
        }
    )

    state = await store.load()

    assert state.language == Language.marathi
    assert state.crops[0].type == CropType.cotton
    assert state.crops[0].soil_type == SoilType.laterite
    assert state.settings.critical_alerts_only is True


@pytest.mark.asyncio
async def test_unknown_crop_type_survives_load(store: StateStore, fake_redis) -> None:
    fake_redis.data["agrisynch_test_store"] = json.dumps(
        {"crops": [{"id": "x", "type": "banana", "sowingDate": "2026-01-01", "soilType": "red"}]}
    )
    state = await store.load()
    assert state.crops[0].type == "banana"


@pytest.mark.asyncio
async def test_corrupt_blob_falls_back_to_default_and_is_backed_up(store: StateStore, fake_redis) -> None:
    fake_redis.data["agrisynch_test_store"] = "{not json"
    assert await store.load() == AppState()
    assert fake_redis.data["agrisynch_test_store:corrupt"] == "{not json"


@pytest.mark.asyncio
async def test_mutation_after_invalid_blob_keeps_backup_of_existing_crops(store: StateStore, fake_redis) -> None:
    blob = json.dumps(
        {
            "crops": [{"id": "keep1", "type": "rice", "sowingDate": "2026-06-01", "soilType": "black"}],
            "weatherSnapshot": [{"date": "2026-06-02", "temp": 30, "condition": "rainy", "precipChance": 101}],
        }
    )
    fake_redis.data["agrisynch_test_store"] = blob

    crop = await FieldService(store).register_crop(
        CropCreate(type=CropType.wheat, sowing_date=date(2026, 11, 1), soil_type=SoilType.alluvial)
    )

    saved = json.loads(fake_redis.data["agrisynch_test_store"])
    assert [item["id"] for item in saved["crops"]] == [crop.id]
    backup = json.loads(fake_redis.data["agrisynch_test_store:corrupt"])
    assert backup["crops"][0]["id"] == "keep1"
    assert fake_redis.data["agrisynch_test_store:corrupt"] == blob


@pytest.mark.asyncio
async def test_clear_removes_blob(store: StateStore, fake_redis) -> None:
    await store.save(AppState())
    await store.clear()
    assert "agrisynch_test_store" not in fake_redis.data
