"""Simulated short-range weather forecast provider."""

from __future__ import annotations

import random
from datetime import date, timedelta
from typing import Protocol

from app.models.enums import WeatherCondition
from app.schemas.state import WeatherDay

_CONDITIONS: tuple[WeatherCondition, ...] = (
	WeatherCondition.sunny,
	WeatherCondition.cloudy,
	WeatherCondition.rainy,
	WeatherCondition.storm,
)


class WeatherProvider(Protocol):
	def forecast(self, today: date) -> list[WeatherDay]:
		...


class SimulatedWeatherProvider:
	"""Random forecast starting at ``today`` (index 0) for ``days`` days.

	Temperatures are drawn from 28..35 °C, precipitation chance from 0..99.
	Pass ``seed`` for a reproducible sequence.
	"""

	def __init__(self, days: int = 4, seed: int | None = None):
		if days < 1:
			raise ValueError("forecast must cover at least one day")
		self.days = days
		self._rng = random.Random(seed)

	def forecast(self, today: date) -> list[WeatherDay]:
		return [
			WeatherDay(
				date=(today + timedelta(days=offset)).isoformat(),
				temp=28 + self._rng.randint(0, 7),
				condition=self._rng.choice(_CONDITIONS),
				precip_chance=self._rng.randint(0, 99),
			)
			for offset in range(self.days)
		]
