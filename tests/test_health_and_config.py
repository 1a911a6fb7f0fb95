from __future__ import annotations

import httpx
import pytest

from src.api.config import load_config

from tests.fakes import FIXED_TIMESTAMP


@pytest.mark.anyio
async def test_health_ok(async_client: httpx.AsyncClient):
    res = await async_client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok", "timestamp": FIXED_TIMESTAMP}


def test_load_config_defaults(monkeypatch: pytest.MonkeyPatch):
    for name in [
        "DASHBOARD_PORT",
        "DASHBOARD_LOG_LEVEL",
        "FRONTEND_URL",
        "CORS_ALLOW_ORIGINS",
        "WEATHER_TIMEOUT_SEC",
        "WEATHER_FAILURE_RATE",
        "WEATHER_SEED",
        "DISK_TOTAL_BYTES",
        "DISK_USED_BYTES",
    ]:
        monkeypatch.delenv(name, raising=False)

    cfg = load_config()
    assert cfg.port == 3000
    assert cfg.log_level == "info"
    assert cfg.weather_timeout_sec == 5.0
    assert cfg.weather_failure_rate == 0.1
    assert cfg.weather_seed is None
    assert cfg.disk_used_bytes <= cfg.disk_total_bytes
    assert cfg.cors_allow_origins == ["http://localhost:3000", "http://127.0.0.1:3000"]


def test_load_config_parses_and_clamps_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("DASHBOARD_PORT", "not-a-number")
    monkeypatch.setenv("DASHBOARD_LOG_LEVEL", "LOUD")
    monkeypatch.setenv("WEATHER_TIMEOUT_SEC", "500")
    monkeypatch.setenv("WEATHER_FAILURE_RATE", "-3")
    monkeypatch.setenv("WEATHER_SEED", "42")
    monkeypatch.setenv("DISK_TOTAL_BYTES", "1000")
    monkeypatch.setenv("DISK_USED_BYTES", "5000")
    monkeypatch.setenv("FRONTEND_URL", "https://dash.example.com")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "https://a.example.com, ,http://localhost:3000")

    cfg = load_config()
    assert cfg.port == 3000
    assert cfg.log_level == "info"
    assert cfg.weather_timeout_sec == 60.0
    assert cfg.weather_failure_rate == 0.0
    assert cfg.weather_seed == 42
    assert cfg.disk_total_bytes == 1000
    assert cfg.disk_used_bytes == 1000
    assert cfg.cors_allow_origins == [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "https://dash.example.com",
        "https://a.example.com",
    ]


def test_malformed_seed_is_ignored(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("WEATHER_SEED", "abc")
    assert load_config().weather_seed is None


def test_non_finite_floats_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("WEATHER_FAILURE_RATE", "nan")
    monkeypatch.setenv("WEATHER_UNAVAILABLE_RATE", "inf")
    monkeypatch.setenv("WEATHER_TIMEOUT_SEC", "-inf")

    cfg = load_config()
    assert cfg.weather_failure_rate == 0.1
    assert cfg.weather_unavailable_rate == 0.0
    assert cfg.weather_timeout_sec == 5.0


@pytest.mark.anyio
async def test_root_serves_health(async_client: httpx.AsyncClient):
    res = await async_client.get("/")
    assert res.status_code == 200
    assert res.json() == {"status": "ok", "timestamp": FIXED_TIMESTAMP}
