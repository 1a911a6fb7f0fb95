from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional

from src.api.core.errors import DomainError
from src.api.core.guards import is_defined
from src.api.services.validation import ensure_valid
from src.api.state import AppState

logger = logging.getLogger(__name__)

WEATHER_SERVICE_TIMEOUT = "WEATHER_SERVICE_TIMEOUT"


# PUBLIC_INTERFACE
async def fetch_weather(state: AppState) -> Optional[Dict[str, Any]]:
    """
    Fetch current weather and return a validated WeatherInfo dict, or None when unavailable.

    The fetch is bounded by ``weather_timeout_sec``; a timeout surfaces as a 503 domain error.
    Cancellation of the request cancels the pending fetch.
    """
    timeout = state.config.weather_timeout_sec
    try:
        info = await asyncio.wait_for(state.weather_source.fetch(), timeout=timeout)
    except asyncio.TimeoutError:
        logger.warning("Weather fetch timed out after %.1fs", timeout)
        raise DomainError("Weather service timed out", WEATHER_SERVICE_TIMEOUT, 503) from None

    if not is_defined(info):
        logger.info("Weather source reported no reading")
        return None
    # Validate the raw reading; nothing is coerced before the schema sees it.
    return ensure_valid("weather_info", info)
