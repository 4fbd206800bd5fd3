"""Offline coordinate → region mapping against bundled bounding boxes."""

from __future__ import annotations

from collections.abc import Iterable

from app.models.reference import REGIONS, Region


def find_region(lat: float, lng: float, regions: Iterable[Region] = REGIONS) -> Region | None:
	"""First region whose box contains the point (edges inclusive), else None."""
	for region in regions:
		if region.bounds.contains(lat, lng):
			return region
	return None


def locate_region(lat: float, lng: float) -> Region:
	if not -90.0 <= lat <= 90.0 or not -180.0 <= lng <= 180.0:
		raise ValueError("coordinates out of range")
	region = find_region(lat, lng)
	if region is None:
		raise LookupError(f"No bundled region covers ({lat}, {lng})")
	return region
