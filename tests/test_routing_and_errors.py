from __future__ import annotations

import httpx
import pytest
from fastapi import Query

from src.api.config import DashboardConfig
from src.api.core.errors import DomainError
from src.api.main import create_app, default_routes
from src.api.routers import health
from src.api.routing import RouteSpec
from tests.fakes import FIXED_TIMESTAMP, FakeMetricsSource, FakeWeatherSource, fixed_clock


async def _explode() -> dict:
    raise RuntimeError("handler bug")


async def _teapot() -> dict:
    raise DomainError("I refuse", "TEAPOT", 418)


async def _paged(page: int = Query(...)) -> dict:
    return {"page": page}


def _client(routes) -> httpx.AsyncClient:
    app = create_app(
        DashboardConfig(),
        metrics_source=FakeMetricsSource(),
        weather_source=FakeWeatherSource(),
        clock=fixed_clock,
        routes=routes,
    )
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    return httpx.AsyncClient(transport=transport, base_url="http://test")


@pytest.mark.anyio
async def test_unknown_route_is_not_found_envelope(async_client: httpx.AsyncClient):
    res = await async_client.get("/unknown-path")
    assert res.status_code == 404
    assert res.json() == {
        "success": False,
        "error": {"message": "Route not found", "code": "NOT_FOUND"},
        "timestamp": FIXED_TIMESTAMP,
    }


@pytest.mark.anyio
async def test_wrong_method_is_method_not_allowed_envelope(async_client: httpx.AsyncClient):
    res = await async_client.post("/api/system")
    assert res.status_code == 405
    assert res.json()["error"]["code"] == "METHOD_NOT_ALLOWED"


@pytest.mark.anyio
async def test_uncaught_fault_goes_through_global_handler():
    async with _client([RouteSpec("GET", "/boom", _explode)]) as client:
        res = await client.get("/boom")

    assert res.status_code == 500
    assert res.json() == {
        "success": False,
        "error": {"message": "handler bug", "code": "INTERNAL_ERROR"},
        "timestamp": FIXED_TIMESTAMP,
    }


@pytest.mark.anyio
async def test_uncaught_fault_envelope_carries_cors_headers():
    app = create_app(
        DashboardConfig(),
        metrics_source=FakeMetricsSource(),
        weather_source=FakeWeatherSource(),
        clock=fixed_clock,
        routes=[RouteSpec("GET", "/boom", _explode)],
    )
    # Default transport re-raises app exceptions, so nothing may escape the app.
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        res = await client.get("/boom", headers={"Origin": "http://localhost:3000"})

    assert res.status_code == 500
    assert res.headers["access-control-allow-origin"] == "http://localhost:3000"
    assert res.json()["error"] == {"message": "handler bug", "code": "INTERNAL_ERROR"}


@pytest.mark.anyio
async def test_uncaught_domain_error_keeps_its_status():
    async with _client([RouteSpec("GET", "/teapot", _teapot)]) as client:
        res = await client.get("/teapot")

    assert res.status_code == 418
    assert res.json()["error"] == {"message": "I refuse", "code": "TEAPOT"}


@pytest.mark.anyio
async def test_request_validation_error_is_400_envelope():
    async with _client([RouteSpec("GET", "/paged", _paged)]) as client:
        res = await client.get("/paged", params={"page": "first"})

    assert res.status_code == 400
    body = res.json()
    assert body["success"] is False
    assert body["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.anyio
async def test_app_serves_only_the_routes_it_was_given():
    async with _client(health.routes) as client:
        assert (await client.get("/health")).status_code == 200
        assert (await client.get("/api/system")).status_code == 404


def test_default_routes():
    paths = {(r.method, r.path) for r in default_routes()}
    assert paths == {("GET", "/"), ("GET", "/health"), ("GET", "/api/system"), ("GET", "/api/weather")}


def test_openapi_documents_the_envelope():
    app = create_app(
        DashboardConfig(),
        metrics_source=FakeMetricsSource(),
        weather_source=FakeWeatherSource(),
    )
    spec = app.openapi()
    weather = spec["paths"]["/api/weather"]["get"]
    assert weather["operationId"] == "get_weather"
    assert "503" in weather["responses"]
