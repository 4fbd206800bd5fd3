"""Growth-stage resolution from crop type and sowing date.

Pure functions only: the stage is always derived from (crop type, sowing
date, now) and never stored, so it cannot drift from the clock.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, date, datetime

from app.models.enums import CropType, GrowthStage
from app.models.reference import DEFAULT_THRESHOLD_CROP, STAGE_THRESHOLDS

_STAGE_ORDER: tuple[GrowthStage, ...] = tuple(GrowthStage)


@dataclass(frozen=True, slots=True)
class StageResolution:
	"""Resolved stage plus the facts it was derived from.

	``crop_known`` is False when the crop type had no threshold table and the
	default table was used; ``date_valid`` is False when the sowing date could
	not be parsed (the stage is then ``sowing``).
	"""

	stage: GrowthStage
	elapsed_days: int | None
	days_to_next_stage: int | None
	crop_known: bool
	date_valid: bool


def parse_sowing_date(value: date | datetime | str | None) -> date | None:
	"""Parse a stored sowing date; returns None instead of raising."""
	if value is None:
		return None
	if isinstance(value, datetime):
		return value.date()
	if isinstance(value, date):
		return value
	text = str(value).strip()
	if not text:
		return None
	try:
		return date.fromisoformat(text[:10])
	except ValueError:
		pass
	try:
		return datetime.fromisoformat(text).date()
	except ValueError:
		return None


def _today(now: date | datetime | None) -> date:
	if now is None:
		return datetime.now(UTC).date()
	if isinstance(now, datetime):
		return now.date()
	return now


def thresholds_for(
	crop_type: CropType | str,
	thresholds: Mapping[CropType, tuple[int, int, int, int]] = STAGE_THRESHOLDS,
) -> tuple[tuple[int, int, int, int], bool]:
	"""Return (threshold tuple, crop_known) for a crop type."""
	try:
		known = CropType(crop_type)
	except ValueError:
		return thresholds[DEFAULT_THRESHOLD_CROP], False
	if known not in thresholds:
		return thresholds[DEFAULT_THRESHOLD_CROP], False
	return thresholds[known], True


def stage_for_elapsed_days(elapsed_days: int, bounds: tuple[int, int, int, int]) -> GrowthStage:
	for stage, upper in zip(_STAGE_ORDER, bounds):
		if elapsed_days < upper:
			return stage
	return GrowthStage.harvest


def resolve_stage_detail(
	crop_type: CropType | str,
	sowing_date: date | datetime | str | None,
	now: date | datetime | None = None,
) -> StageResolution:
	bounds, crop_known = thresholds_for(crop_type)
	sown = parse_sowing_date(sowing_date)
	if sown is None:
		return StageResolution(
			stage=GrowthStage.sowing,
			elapsed_days=None,
			days_to_next_stage=None,
			crop_known=crop_known,
			date_valid=False,
		)

	elapsed = (_today(now) - sown).days
	stage = stage_for_elapsed_days(elapsed, bounds)
	days_to_next: int | None = None
	if stage != GrowthStage.harvest:
		days_to_next = bounds[stage.ordinal] - elapsed

	return StageResolution(
		stage=stage,
		elapsed_days=elapsed,
		days_to_next_stage=days_to_next,
		crop_known=crop_known,
		date_valid=True,
	)


def resolve_stage(
	crop_type: CropType | str,
	sowing_date: date | datetime | str | None,
	now: date | datetime | None = None,
) -> GrowthStage:
	"""Map a crop type and sowing date to its growth stage on ``now``.

	Never raises: a future sowing date resolves to ``sowing``, an unparseable
	one too, and an unknown crop type uses the vegetables thresholds.
	"""
	return resolve_stage_detail(crop_type, sowing_date, now).stage
