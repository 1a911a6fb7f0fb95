from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.config import DashboardConfig, load_config
from src.api.core.envelope import Clock
from src.api.error_handlers import register_error_handlers
from src.api.routers import health, system, weather
from src.api.routing import RouteSpec, add_routes
from src.api.sources.metrics import MetricsSource, PsutilMetricsSource
from src.api.sources.weather import MockWeatherSource, WeatherSource
from src.api.state import init_state

openapi_tags = [
    {"name": "Health", "description": "Service health and liveness."},
    {"name": "System", "description": "Host CPU, memory, disk and uptime metrics."},
    {"name": "Weather", "description": "Current weather (mock data source)."},
]

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


# PUBLIC_INTERFACE
def default_routes() -> List[RouteSpec]:
    """Routes served by the dashboard API."""
    return [*health.routes, *system.routes, *weather.routes]


def _default_weather_source(config: DashboardConfig) -> MockWeatherSource:
    return MockWeatherSource(
        rng=random.Random(config.weather_seed),
        failure_rate=config.weather_failure_rate,
        unavailable_rate=config.weather_unavailable_rate,
        latency_ms=config.weather_latency_ms,
    )


# PUBLIC_INTERFACE
def create_app(
    config: Optional[DashboardConfig] = None,
    *,
    metrics_source: Optional[MetricsSource] = None,
    weather_source: Optional[WeatherSource] = None,
    clock: Optional[Clock] = None,
    routes: Optional[Sequence[RouteSpec]] = None,
) -> FastAPI:
    """
    Build a fresh FastAPI app from an explicit list of route descriptors.

    Collaborators and the clock default to the real implementations; tests pass fakes.
    """
    config = config or load_config()

    app = FastAPI(
        title="System Dashboard API",
        description=(
            "Reports host system metrics (CPU, memory, disk, uptime) and mock weather data. "
            "Every response uses a uniform success/error envelope and outbound payloads are schema-validated."
        ),
        version="0.1.0",
        openapi_tags=openapi_tags,
    )

    init_state(
        app,
        config,
        metrics_source=metrics_source or PsutilMetricsSource(),
        weather_source=weather_source or _default_weather_source(config),
        clock=clock,
    )

    # Registered first so CORS wraps the error middleware.
    register_error_handlers(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.cors_allow_origins),
        allow_credentials=config.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    add_routes(app, default_routes() if routes is None else routes)
    return app


# PUBLIC_INTERFACE
def configure_logging(level: str) -> None:
    """Configure root logging for the service process."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)


# PUBLIC_INTERFACE
def run() -> None:
    """CLI entrypoint: load config, configure logging and serve with uvicorn."""
    config = load_config()
    configure_logging(config.log_level)
    logger.info("Starting System Dashboard API on %s:%s", config.host, config.port)
    uvicorn.run(create_app(config), host=config.host, port=config.port, log_level=config.log_level)


app = create_app()


if __name__ == "__main__":
    run()
