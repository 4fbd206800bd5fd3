"""Closed enumerations shared by the advisory core and the API schemas.

Values are the lowercase tokens persisted in the client state blob, so a
stored ``"rice"`` or ``"sunny"`` round-trips through these enums unchanged.
"""

from enum import StrEnum

# ── Crop enums ──────────────────────────────────────────────────────────────


class CropType(StrEnum):
    """Crops a farmer can register (drives thresholds and advisories)."""

    rice = "rice"
    wheat = "wheat"
    maize = "maize"
    cotton = "cotton"
    sugarcane = "sugarcane"
    pulses = "pulses"
    vegetables = "vegetables"


class GrowthStage(StrEnum):
    """Phenological stage, strictly linear from sowing to harvest."""

    sowing = "sowing"
    vegetative = "vegetative"
    flowering = "flowering"
    maturity = "maturity"
    harvest = "harvest"

    @property
    def ordinal(self) -> int:
        return list(GrowthStage).index(self)


# ── Soil enums ──────────────────────────────────────────────────────────────


class SoilType(StrEnum):
    """Soil classes with a static reference profile."""

    alluvial = "alluvial"
    black = "black"
    red = "red"
    laterite = "laterite"
    sandy = "sandy"

    @classmethod
    def _missing_(cls, value: object) -> "SoilType | None":
        # Older client blobs spell laterite without the second "e".
        if isinstance(value, str) and value.strip().lower() == "latrite":
            return cls.laterite
        return None


class WaterRetention(StrEnum):
    """Qualitative water-holding capacity of a soil."""

    low = "Low"
    medium = "Medium"
    high = "High"


class Drainage(StrEnum):
    """Qualitative drainage class of a soil."""

    poor = "poor"
    moderate = "moderate"
    good = "good"


# ── Weather enums ───────────────────────────────────────────────────────────


class WeatherCondition(StrEnum):
    sunny = "sunny"
    rainy = "rainy"
    cloudy = "cloudy"
    storm = "storm"


# ── Insight enums ───────────────────────────────────────────────────────────


class InsightPriority(StrEnum):
    critical = "critical"
    warning = "warning"
    normal = "normal"


class InsightCategory(StrEnum):
    weather = "Weather"
    soil = "Soil"
    pest = "Pest"
    fertilizer = "Fertilizer"


# ── User enums ──────────────────────────────────────────────────────────────


class Language(StrEnum):
    english = "en"
    hindi = "hi"
    marathi = "mr"


class Theme(StrEnum):
    light = "light"
    dark = "dark"
    auto = "auto"


class UsageMode(StrEnum):
    simple = "simple"
    advanced = "advanced"


class IrrigationMethod(StrEnum):
    drip = "drip"
    sprinkler = "sprinkler"
    flood = "flood"
    manual = "manual"


class AdvisoryFrequency(StrEnum):
    daily = "daily"
    weekly = "weekly"
    urgent = "urgent"


class AssistantAction(StrEnum):
    """Voice-assistant intent kinds returned by the intent parser."""

    navigate = "NAVIGATE"
    speak = "SPEAK"
    query = "QUERY"
