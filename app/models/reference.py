"""Static agronomic reference data — crop datasets, soil profiles, regions.

Everything here is immutable and loaded once at import time.  The tables are
exposed as read-only mappings so that the advisory core can be handed them
directly without any risk of a computation mutating shared reference data.

``STAGE_THRESHOLDS`` holds, per crop, the exclusive upper bound (in days since
sowing) of the sowing, vegetative, flowering and maturity stages::

    rice: (25, 60, 90, 110)
        day 0..24   -> sowing
        day 25..59  -> vegetative
        day 60..89  -> flowering
        day 90..109 -> maturity
        day 110..   -> harvest
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from app.models.enums import CropType, Drainage, GrowthStage, SoilType, WaterRetention

# ── Growth-stage thresholds ─────────────────────────────────────────────────

STAGE_THRESHOLDS: Mapping[CropType, tuple[int, int, int, int]] = MappingProxyType(
    {
        CropType.rice: (25, 60, 90, 110),
        CropType.wheat: (20, 70, 100, 125),
        CropType.sugarcane: (30, 150, 240, 330),
        CropType.cotton: (15, 60, 110, 150),
        CropType.maize: (15, 50, 80, 110),
        CropType.pulses: (15, 45, 75, 100),
        CropType.vegetables: (10, 40, 70, 90),
    }
)

# Table used for crop types with no thresholds of their own.
DEFAULT_THRESHOLD_CROP = CropType.vegetables


# ── Record types ────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class SoilProfile:
    """Agronomic reference for one soil class."""

    soil_type: SoilType
    name: str
    hindi_name: str
    marathi_name: str
    water_retention: WaterRetention
    drainage: Drainage
    drainage_note: str
    fertility: str
    action_tips: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class CropAdvisory:
    """Per-stage advisory text shown on a crop's detail view."""

    stage: GrowthStage
    fertilizer: str
    pest_alert: str
    irrigation: str
    tips: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class CropDataset:
    name: str
    hindi_name: str
    marathi_name: str
    advisories: Mapping[GrowthStage, CropAdvisory]


@dataclass(frozen=True, slots=True)
class RegionBounds:
    min_lat: float
    max_lat: float
    min_lng: float
    max_lng: float

    def contains(self, lat: float, lng: float) -> bool:
        return self.min_lat <= lat <= self.max_lat and self.min_lng <= lng <= self.max_lng


@dataclass(frozen=True, slots=True)
class Region:
    id: str
    name: str
    hindi_name: str
    marathi_name: str
    state: str
    default_soil: SoilType
    bounds: RegionBounds


# ── Soil profiles ───────────────────────────────────────────────────────────

SOIL_PROFILES: Mapping[SoilType, SoilProfile] = MappingProxyType(
    {
        SoilType.alluvial: SoilProfile(
            soil_type=SoilType.alluvial,
            name="Alluvial Soil",
            hindi_name="जलोढ़ मिट्टी",
            marathi_name="गाळाची माती",
            water_retention=WaterRetention.medium,
            drainage=Drainage.good,
            drainage_note="Good, well structured",
            fertility="High in potash, low in nitrogen and phosphorus",
            action_tips=(
                "Add nitrogen in split doses",
                "Incorporate crop residue to build organic matter",
            ),
        ),
        SoilType.black: SoilProfile(
            soil_type=SoilType.black,
            name="Black Cotton Soil",
            hindi_name="काली मिट्टी",
            marathi_name="काळी माती",
            water_retention=WaterRetention.high,
            drainage=Drainage.poor,
            drainage_note="Poor, heavy cracking",
            fertility="Rich in calcium, magnesium and lime; low in nitrogen",
            action_tips=(
                "Keep field drainage channels open before rain",
                "Avoid tillage when the soil is wet and sticky",
            ),
        ),
        SoilType.red: SoilProfile(
            soil_type=SoilType.red,
            name="Red Soil",
            hindi_name="लाल मिट्टी",
            marathi_name="तांबडी माती",
            water_retention=WaterRetention.low,
            drainage=Drainage.good,
            drainage_note="Good, porous",
            fertility="Low in nitrogen, phosphorus and humus",
            action_tips=(
                "Mulch to conserve moisture",
                "Apply farmyard manure before sowing",
            ),
        ),
        SoilType.laterite: SoilProfile(
            soil_type=SoilType.laterite,
            name="Laterite Soil",
            hindi_name="लेटराइट मिट्टी",
            marathi_name="जांभी माती",
            water_retention=WaterRetention.low,
            drainage=Drainage.good,
            drainage_note="Good, nutrients leach quickly",
            fertility="Acidic; low in nitrogen, potash and lime",
            action_tips=(
                "Lime the field to correct acidity",
                "Use organic manure to hold nutrients",
            ),
        ),
        SoilType.sandy: SoilProfile(
            soil_type=SoilType.sandy,
            name="Sandy Soil",
            hindi_name="रेतीली मिट्टी",
            marathi_name="वाळूमय माती",
            water_retention=WaterRetention.low,
            drainage=Drainage.good,
            drainage_note="Excessive, dries quickly",
            fertility="Low organic matter and nutrient holding",
            action_tips=(
                "Irrigate little and often",
                "Add compost to improve water holding",
            ),
        ),
    }
)


# ── Crop datasets ───────────────────────────────────────────────────────────


def _advisories(
    rows: dict[GrowthStage, tuple[str, str, str, tuple[str, ...]]],
) -> Mapping[GrowthStage, CropAdvisory]:
    return MappingProxyType(
        {
            stage: CropAdvisory(
                stage=stage,
                fertilizer=fertilizer,
                pest_alert=pest_alert,
                irrigation=irrigation,
                tips=tips,
            )
            for stage, (fertilizer, pest_alert, irrigation, tips) in rows.items()
        }
    )


CROP_DATASETS: Mapping[CropType, CropDataset] = MappingProxyType(
    {
        CropType.rice: CropDataset(
            name="Rice",
            hindi_name="धान",
            marathi_name="भात",
            advisories=_advisories(
                {
                    GrowthStage.sowing: (
                        "Apply basal DAP at transplanting",
                        "Watch for stem borer egg masses in the nursery",
                        "Keep 2-3 cm standing water",
                        ("Use 25-30 day old seedlings",),
                    ),
                    GrowthStage.vegetative: (
                        "Top-dress urea at tillering",
                        "Scout for leaf folder and brown planthopper",
                        "Maintain 5 cm standing water",
                        ("Remove weeds before the second urea dose",),
                    ),
                    GrowthStage.flowering: (
                        "Apply potash if leaves show yellow margins",
                        "Blast risk rises in humid weather",
                        "Never let the field dry during flowering",
                        ("Avoid spraying during anthesis hours",),
                    ),
                    GrowthStage.maturity: (
                        "No further fertilizer needed",
                        "Watch for grain-sucking rice bugs",
                        "Drain the field 10 days before harvest",
                        ("Check grain hardness daily",),
                    ),
                    GrowthStage.harvest: (
                        "Plan green manure for the next season",
                        "Store grain below 14% moisture to avoid weevils",
                        "No irrigation required",
                        ("Harvest when 80% of panicles turn golden",),
                    ),
                }
            ),
        ),
        CropType.wheat: CropDataset(
            name="Wheat",
            hindi_name="गेहूं",
            marathi_name="गहू",
            advisories=_advisories(
                {
                    GrowthStage.sowing: (
                        "Apply half nitrogen with full phosphorus at sowing",
                        "Treat seed against termites",
                        "Pre-sowing irrigation for good germination",
                        ("Sow in rows 20 cm apart",),
                    ),
                    GrowthStage.vegetative: (
                        "Second nitrogen dose at crown root initiation",
                        "Watch for aphids on young leaves",
                        "Irrigate at crown root initiation (21 days)",
                        ("Control broadleaf weeds early",),
                    ),
                    GrowthStage.flowering: (
                        "Foliar zinc if deficiency appears",
                        "Yellow rust risk in cool humid weather",
                        "Irrigate at flowering; avoid water stress",
                        ("Avoid irrigation in strong wind to prevent lodging",),
                    ),
                    GrowthStage.maturity: (
                        "No further fertilizer needed",
                        "Protect ears from birds",
                        "Last irrigation at dough stage",
                        ("Stop irrigation once grains harden",),
                    ),
                    GrowthStage.harvest: (
                        "Test soil before the next crop",
                        "Dry grain well before storage",
                        "No irrigation required",
                        ("Harvest when grains are hard and straw is dry",),
                    ),
                }
            ),
        ),
        CropType.maize: CropDataset(
            name="Maize",
            hindi_name="मक्का",
            marathi_name="मका",
            advisories=_advisories(
                {
                    GrowthStage.sowing: (
                        "Basal NPK with zinc sulphate",
                        "Fall armyworm scouting from emergence",
                        "Light irrigation after sowing",
                        ("Maintain 60 x 20 cm spacing",),
                    ),
                    GrowthStage.vegetative: (
                        "Top-dress nitrogen at knee-high stage",
                        "Check whorls for fall armyworm frass",
                        "Irrigate every 7-10 days without rain",
                        ("Earth up plants after top-dressing",),
                    ),
                    GrowthStage.flowering: (
                        "Final nitrogen dose at tasseling",
                        "Watch for stem borer dead hearts",
                        "Critical stage: do not skip irrigation",
                        ("Moisture stress at silking cuts yield sharply",),
                    ),
                    GrowthStage.maturity: (
                        "No further fertilizer needed",
                        "Cob borer may attack developing grains",
                        "Reduce irrigation as husks dry",
                        ("Check black layer at the kernel base",),
                    ),
                    GrowthStage.harvest: (
                        "Return stalks to the soil",
                        "Dry cobs before shelling",
                        "No irrigation required",
                        ("Harvest when husks turn brown",),
                    ),
                }
            ),
        ),
        CropType.cotton: CropDataset(
            name="Cotton",
            hindi_name="कपास",
            marathi_name="कापूस",
            advisories=_advisories(
                {
                    GrowthStage.sowing: (
                        "Basal phosphorus and potash",
                        "Treat seed against sucking pests",
                        "Sow after the first good monsoon shower",
                        ("Gap-fill within 10 days of sowing",),
                    ),
                    GrowthStage.vegetative: (
                        "Split nitrogen at squaring",
                        "Whitefly and jassid scouting twice a week",
                        "Irrigate at 10-12 day intervals",
                        ("Install yellow sticky traps",),
                    ),
                    GrowthStage.flowering: (
                        "Foliar DAP spray at flowering",
                        "Pink bollworm: use pheromone traps",
                        "Avoid water stress during boll formation",
                        ("Remove rosette flowers",),
                    ),
                    GrowthStage.maturity: (
                        "No further fertilizer needed",
                        "Watch for boll rot after rain",
                        "Stop irrigation once bolls open",
                        ("Pick only fully opened bolls",),
                    ),
                    GrowthStage.harvest: (
                        "Uproot stalks to break pest cycle",
                        "Store kapas dry and clean",
                        "No irrigation required",
                        ("Pick in the morning to avoid trash",),
                    ),
                }
            ),
        ),
        CropType.sugarcane: CropDataset(
            name="Sugarcane",
            hindi_name="गन्ना",
            marathi_name="ऊस",
            advisories=_advisories(
                {
                    GrowthStage.sowing: (
                        "Basal NPK in furrows",
                        "Treat setts against termites",
                        "Irrigate immediately after planting",
                        ("Use three-bud setts from healthy cane",),
                    ),
                    GrowthStage.vegetative: (
                        "Nitrogen in three splits up to 120 days",
                        "Early shoot borer: remove dead hearts",
                        "Irrigate every 7-10 days in summer",
                        ("Earth up at 90 days",),
                    ),
                    GrowthStage.flowering: (
                        "Potash to improve sucrose",
                        "Watch for woolly aphids",
                        "Maintain steady moisture during grand growth",
                        ("Prop canes against lodging",),
                    ),
                    GrowthStage.maturity: (
                        "No further fertilizer needed",
                        "Internode borer check",
                        "Withhold irrigation 2-3 weeks before harvest",
                        ("Check brix with a hand refractometer",),
                    ),
                    GrowthStage.harvest: (
                        "Plan ratoon fertilization",
                        "Crush within 24 hours of cutting",
                        "Irrigate ratoon after stubble shaving",
                        ("Cut close to the ground",),
                    ),
                }
            ),
        ),
        CropType.pulses: CropDataset(
            name="Pulses",
            hindi_name="दालें",
            marathi_name="कडधान्ये",
            advisories=_advisories(
                {
                    GrowthStage.sowing: (
                        "Rhizobium seed treatment, basal phosphorus",
                        "Watch for cutworms at emergence",
                        "Sow on residual moisture",
                        ("Avoid waterlogged patches",),
                    ),
                    GrowthStage.vegetative: (
                        "No nitrogen needed with good nodulation",
                        "Aphid and thrips scouting",
                        "One light irrigation if dry",
                        ("Weed at 20-25 days",),
                    ),
                    GrowthStage.flowering: (
                        "Foliar 2% urea if flowers drop",
                        "Pod borer: install bird perches",
                        "Irrigate at flowering if soil is dry",
                        ("Avoid excess water; it causes flower drop",),
                    ),
                    GrowthStage.maturity: (
                        "No further fertilizer needed",
                        "Pod fly check",
                        "No irrigation at pod maturity",
                        ("Harvest when 80% pods turn brown",),
                    ),
                    GrowthStage.harvest: (
                        "Leave roots to enrich soil nitrogen",
                        "Store seed with neem leaves against bruchids",
                        "No irrigation required",
                        ("Thresh on dry days",),
                    ),
                }
            ),
        ),
        CropType.vegetables: CropDataset(
            name="Vegetables",
            hindi_name="सब्जियां",
            marathi_name="भाजीपाला",
            advisories=_advisories(
                {
                    GrowthStage.sowing: (
                        "Well-rotted compost in the bed",
                        "Damping-off risk in the nursery",
                        "Light, frequent irrigation",
                        ("Raise seedlings on raised beds",),
                    ),
                    GrowthStage.vegetative: (
                        "Nitrogen top-dress at 20-25 days",
                        "Leaf miner and aphid scouting",
                        "Drip irrigation every 2-3 days",
                        ("Stake climbing plants",),
                    ),
                    GrowthStage.flowering: (
                        "Calcium and boron for fruit set",
                        "Fruit borer: remove damaged fruit",
                        "Keep moisture steady to avoid flower drop",
                        ("Encourage pollinators; avoid midday sprays",),
                    ),
                    GrowthStage.maturity: (
                        "Potash for fruit quality",
                        "Watch for fruit fly",
                        "Reduce irrigation slightly before picking",
                        ("Pick at market maturity",),
                    ),
                    GrowthStage.harvest: (
                        "Rotate with a legume next",
                        "Grade and shade produce after picking",
                        "Irrigate after each picking",
                        ("Harvest in the cool morning hours",),
                    ),
                }
            ),
        ),
    }
)


# ── Regions ─────────────────────────────────────────────────────────────────

REGIONS: tuple[Region, ...] = (
    Region(
        id="pune",
        name="Pune",
        hindi_name="पुणे",
        marathi_name="पुणे",
        state="Maharashtra",
        default_soil=SoilType.black,
        bounds=RegionBounds(min_lat=18.0, max_lat=19.3, min_lng=73.3, max_lng=75.0),
    ),
    Region(
        id="nashik",
        name="Nashik",
        hindi_name="नासिक",
        marathi_name="नाशिक",
        state="Maharashtra",
        default_soil=SoilType.black,
        bounds=RegionBounds(min_lat=19.3, max_lat=20.9, min_lng=73.3, max_lng=74.9),
    ),
    Region(
        id="vidarbha",
        name="Vidarbha",
        hindi_name="विदर्भ",
        marathi_name="विदर्भ",
        state="Maharashtra",
        default_soil=SoilType.black,
        bounds=RegionBounds(min_lat=19.0, max_lat=21.8, min_lng=76.0, max_lng=80.9),
    ),
    Region(
        id="konkan",
        name="Konkan",
        hindi_name="कोंकण",
        marathi_name="कोकण",
        state="Maharashtra",
        default_soil=SoilType.laterite,
        bounds=RegionBounds(min_lat=15.6, max_lat=18.0, min_lng=72.6, max_lng=73.9),
    ),
    Region(
        id="punjab",
        name="Punjab Plains",
        hindi_name="पंजाब के मैदान",
        marathi_name="पंजाबचे मैदान",
        state="Punjab",
        default_soil=SoilType.alluvial,
        bounds=RegionBounds(min_lat=29.5, max_lat=32.5, min_lng=73.8, max_lng=77.0),
    ),
)
