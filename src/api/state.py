from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from fastapi import FastAPI

from src.api.config import DashboardConfig
from src.api.core.envelope import Clock, EnvelopeBuilder
from src.api.schemas.common import utc_now
from src.api.sources.metrics import MetricsSource
from src.api.sources.weather import WeatherSource


@dataclass
class AppState:
    """Typed app.state container for config and injected collaborators (read-only per request)."""

    config: DashboardConfig
    metrics_source: MetricsSource
    weather_source: WeatherSource
    clock: Clock = utc_now
    envelopes: EnvelopeBuilder = field(init=False)

    def __post_init__(self) -> None:
        self.envelopes = EnvelopeBuilder(self.clock)


# PUBLIC_INTERFACE
def init_state(
    app: FastAPI,
    config: DashboardConfig,
    metrics_source: MetricsSource,
    weather_source: WeatherSource,
    clock: Optional[Clock] = None,
) -> AppState:
    """Initialize app.state with config, collaborators and the timestamp clock."""
    state = AppState(
        config=config,
        metrics_source=metrics_source,
        weather_source=weather_source,
        clock=clock or utc_now,
    )
    app.state.state = state
    return state


# PUBLIC_INTERFACE
def get_state(app: FastAPI) -> AppState:
    """Fetch typed AppState from a FastAPI app."""
    return app.state.state  # type: ignore[attr-defined]
