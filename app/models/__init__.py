"""Domain model registry — enums and static reference tables.

Application code can do::

    from app.models import CropType, SOIL_PROFILES, SoilProfile
"""

# ── Enums ───────────────────────────────────────────────────────────────────
from app.models.enums import (
    AdvisoryFrequency,
    AssistantAction,
    CropType,
    Drainage,
    GrowthStage,
    InsightCategory,
    InsightPriority,
    IrrigationMethod,
    Language,
    SoilType,
    Theme,
    UsageMode,
    WaterRetention,
    WeatherCondition,
)

# ── Reference data ──────────────────────────────────────────────────────────
from app.models.reference import (
    CROP_DATASETS,
    DEFAULT_THRESHOLD_CROP,
    REGIONS,
    SOIL_PROFILES,
    STAGE_THRESHOLDS,
    CropAdvisory,
    CropDataset,
    Region,
    RegionBounds,
    SoilProfile,
)

__all__ = [
    # Reference data
    "CROP_DATASETS",
    "DEFAULT_THRESHOLD_CROP",
    "REGIONS",
    "SOIL_PROFILES",
    "STAGE_THRESHOLDS",
    # Enums
    "AdvisoryFrequency",
    "AssistantAction",
    "CropAdvisory",
    "CropDataset",
    "CropType",
    "Drainage",
    "GrowthStage",
    "InsightCategory",
    "InsightPriority",
    "IrrigationMethod",
    "Language",
    "Region",
    "RegionBounds",
    "SoilProfile",
    "SoilType",
    "Theme",
    "UsageMode",
    "WaterRetention",
    "WeatherCondition",
]
