from __future__ import annotations

import pytest
from httpx import AsyncClient

from app.models.enums import CropType, Drainage, GrowthStage, SoilType, WaterRetention
from app.models.reference import CROP_DATASETS, REGIONS, SOIL_PROFILES, STAGE_THRESHOLDS
from app.services.region_service import find_region, locate_region


def test_reference_tables_cover_every_enum_member() -> None:
    assert set(STAGE_THRESHOLDS) == set(CropType)
    assert set(CROP_DATASETS) == set(CropType)
    assert set(SOIL_PROFILES) == set(SoilType)
    for dataset in CROP_DATASETS.values():
        assert set(dataset.advisories) == set(GrowthStage)


def test_thresholds_are_strictly_increasing() -> None:
    for bounds in STAGE_THRESHOLDS.values():
        assert list(bounds) == sorted(set(bounds))


def test_reference_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        SOIL_PROFILES[SoilType.red] = SOIL_PROFILES[SoilType.black]  # type: ignore[index]


def test_black_soil_is_poorly_drained() -> None:
    black = SOIL_PROFILES[SoilType.black]
    assert black.drainage == Drainage.poor
    assert "poor" in black.drainage_note.lower()
    assert SOIL_PROFILES[SoilType.sandy].water_retention == WaterRetention.low


def test_find_region_inside_and_outside() -> None:
    pune = find_region(18.52, 73.85)
    assert pune is not None
    assert pune.id == "pune"
    assert find_region(51.5, -0.12) is None


def test_find_region_bounds_are_inclusive() -> None:
    konkan = next(region for region in REGIONS if region.id == "konkan")
    assert find_region(konkan.bounds.min_lat, konkan.bounds.min_lng) == konkan


def test_locate_region_validates_coordinates() -> None:
    with pytest.raises(ValueError):
        locate_region(120.0, 10.0)
    with pytest.raises(LookupError):
        locate_region(0.0, 0.0)


@pytest.mark.asyncio
async def test_reference_routes(client: AsyncClient) -> None:
    soils = await client.get("/api/v1/reference/soils")
    assert soils.status_code == 200
    assert {item["soilType"] for item in soils.json()} == {member.value for member in SoilType}

    cotton = await client.get("/api/v1/reference/crops/cotton")
    assert cotton.status_code == 200
    assert cotton.json()["name"] == "Cotton"
    assert set(cotton.json()["advisories"]) == {stage.value for stage in GrowthStage}

    every = await client.get("/api/v1/reference/crops")
    assert set(every.json()) == {member.value for member in CropType}

    unknown = await client.get("/api/v1/reference/crops/banana")
    assert unknown.status_code == 422


@pytest.mark.asyncio
async def test_region_locate_route(client: AsyncClient) -> None:
    found = await client.get("/api/v1/regions/locate", params={"lat": 30.9, "lng": 75.8})
    assert found.status_code == 200
    assert found.json()["defaultSoil"] == "alluvial"

    missing = await client.get("/api/v1/regions/locate", params={"lat": 0, "lng": 0})
    assert missing.status_code == 404

    invalid = await client.get("/api/v1/regions/locate", params={"lat": 95, "lng": 0})
    assert invalid.status_code == 400
