"""Weather collaborator. Only a mock source exists; no real weather service is called."""

from __future__ import annotations

import asyncio
import logging
import random
from typing import Any, Callable, Dict, Optional, Protocol, Tuple

from src.api.core.errors import DomainError
from src.api.schemas.common import iso_timestamp, utc_now

logger = logging.getLogger(__name__)

WEATHER_SERVICE_ERROR = "WEATHER_SERVICE_ERROR"

# (condition, weatherType) pairs; the label always matches the type.
CONDITIONS: Tuple[Tuple[str, str], ...] = (
    ("Sunny", "sunny"),
    ("Clear Skies", "sunny"),
    ("Partly Cloudy", "cloudy"),
    ("Overcast", "cloudy"),
    ("Light Rain", "rainy"),
    ("Heavy Rain", "rainy"),
    ("Light Snow", "snowy"),
    ("Snow Showers", "snowy"),
)


class WeatherSource(Protocol):
    """Async weather collaborator: a raw WeatherInfo-shaped mapping, None when unavailable, or a raised failure."""

    async def fetch(self) -> Optional[Dict[str, Any]]: ...


class MockWeatherSource:
    """
    Randomized weather readings.

    - raises the 503 WEATHER_SERVICE_ERROR domain error with probability ``failure_rate``
    - returns None with probability ``unavailable_rate``
    - otherwise returns a reading with a consistent condition/weatherType pair
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        failure_rate: float = 0.1,
        unavailable_rate: float = 0.0,
        latency_ms: int = 0,
        clock: Optional[Callable] = None,
    ):
        self._rng = rng or random.Random()
        self._failure_rate = failure_rate
        self._unavailable_rate = unavailable_rate
        self._latency_ms = latency_ms
        self._clock = clock or utc_now

    async def fetch(self) -> Optional[Dict[str, Any]]:
        if self._latency_ms > 0:
            await asyncio.sleep(self._latency_ms / 1000.0)

        if self._rng.random() < self._failure_rate:
            logger.warning("Mock weather service simulated an outage")
            raise DomainError("Weather service temporarily unavailable", WEATHER_SERVICE_ERROR, 503)

        if self._rng.random() < self._unavailable_rate:
            return None

        condition, weather_type = self._rng.choice(CONDITIONS)
        return {
            "temperature": round(self._rng.uniform(15.0, 30.0), 1),
            "condition": condition,
            "weatherType": weather_type,
            "humidity": self._rng.randint(30, 90),
            "lastUpdated": iso_timestamp(self._clock()),
        }
