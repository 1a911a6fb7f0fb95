from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
import pytest

from src.api.config import DashboardConfig
from src.api.core.errors import DomainError
from src.api.main import create_app
from tests.fakes import FakeMetricsSource, FakeWeatherSource, fixed_clock, sample_weather


@pytest.fixture
def anyio_backend() -> str:
    """The app is asyncio-based (asyncio.wait_for); run async tests on asyncio only."""
    return "asyncio"


@pytest.fixture
def config() -> DashboardConfig:
    """Deterministic config; disk placeholder is 500 GiB total, 250 GiB used."""
    return DashboardConfig(weather_timeout_sec=1.0, weather_failure_rate=0.0)


@pytest.fixture
def metrics_source() -> FakeMetricsSource:
    return FakeMetricsSource()


@pytest.fixture
def weather_source() -> FakeWeatherSource:
    return FakeWeatherSource(reading=sample_weather())


@pytest.fixture
def app(config: DashboardConfig, metrics_source: FakeMetricsSource, weather_source: FakeWeatherSource):
    """FastAPI app built with fake collaborators and a fixed clock."""
    return create_app(
        config,
        metrics_source=metrics_source,
        weather_source=weather_source,
        clock=fixed_clock,
    )


@pytest.fixture
async def async_client(app) -> AsyncIterator[httpx.AsyncClient]:
    """
    Async HTTP client bound to the FastAPI ASGI app.

    App exceptions are not re-raised into the test so the catch-all handler's response is observable.
    """
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def weather_outage() -> DomainError:
    return DomainError("Weather service temporarily unavailable", "WEATHER_SERVICE_ERROR", 503)
