from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass, field
from typing import List, Optional

logger = logging.getLogger(__name__)

_GIB = 1024 * 1024 * 1024
_LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


def _env_int(name: str, default: int) -> int:
    """Parse an int env var with a default."""
    try:
        return int(os.getenv(name, str(default)))
    except Exception:
        return int(default)


def _env_float(name: str, default: float) -> float:
    """Parse a finite float env var with a default (nan/inf fall back too)."""
    try:
        value = float(os.getenv(name, str(default)))
    except Exception:
        return float(default)
    if not math.isfinite(value):
        logger.warning("Ignoring non-finite %s=%r", name, os.getenv(name))
        return float(default)
    return value


def _env_optional_int(name: str) -> Optional[int]:
    """Parse an optional int env var; unset or malformed means None."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring malformed %s=%r", name, raw)
        return None


def _env_bool(name: str, default: bool = False) -> bool:
    """Parse a bool env var (true/false/1/0/yes/no/on/off)."""
    raw = os.getenv(name)
    if raw is None:
        return bool(default)
    val = raw.strip().lower()
    if val in ("1", "true", "yes", "y", "on"):
        return True
    if val in ("0", "false", "no", "n", "off"):
        return False
    return bool(default)


def _env_list(name: str) -> List[str]:
    """Parse a comma-separated env var into a list of non-empty items."""
    raw = os.getenv(name) or ""
    return [p.strip() for p in raw.split(",") if p.strip()]


def _clamp_int(v: int, lo: int, hi: int) -> int:
    """Clamp integer to [lo, hi]."""
    return max(lo, min(hi, int(v)))


def _clamp_float(v: float, lo: float, hi: float) -> float:
    """Clamp float to [lo, hi]."""
    return max(lo, min(hi, float(v)))


@dataclass(frozen=True)
class DashboardConfig:
    """Runtime configuration loaded from env."""

    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "info"

    # Browser origins allowed by CORS (local frontend plus FRONTEND_URL / CORS_ALLOW_ORIGINS).
    cors_allow_origins: List[str] = field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"]
    )
    cors_allow_credentials: bool = True

    # Weather collaborator (mock) tuning.
    weather_timeout_sec: float = 5.0
    weather_failure_rate: float = 0.1
    weather_unavailable_rate: float = 0.0
    weather_latency_ms: int = 0
    weather_seed: Optional[int] = None

    # Disk figures are placeholders; no real probing.
    disk_total_bytes: int = 500 * _GIB
    disk_used_bytes: int = 250 * _GIB


# PUBLIC_INTERFACE
def load_config() -> DashboardConfig:
    """Load DashboardConfig from env vars, clamping values to sane bounds."""
    host = os.getenv("DASHBOARD_HOST", "0.0.0.0")
    port = _clamp_int(_env_int("DASHBOARD_PORT", 3000), 1, 65535)
    log_level = (os.getenv("DASHBOARD_LOG_LEVEL") or "info").strip().lower()
    if log_level not in _LOG_LEVELS:
        log_level = "info"

    origins: List[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]
    frontend_url = os.getenv("FRONTEND_URL")
    if frontend_url:
        origins.append(frontend_url)
    origins.extend(_env_list("CORS_ALLOW_ORIGINS"))

    # De-dupe while preserving order
    _seen = set()
    origins = [o for o in origins if not (o in _seen or _seen.add(o))]

    cors_allow_credentials = _env_bool("CORS_ALLOW_CREDENTIALS", True)

    weather_timeout_sec = _clamp_float(_env_float("WEATHER_TIMEOUT_SEC", 5.0), 0.1, 60.0)
    weather_failure_rate = _clamp_float(_env_float("WEATHER_FAILURE_RATE", 0.1), 0.0, 1.0)
    weather_unavailable_rate = _clamp_float(_env_float("WEATHER_UNAVAILABLE_RATE", 0.0), 0.0, 1.0)
    weather_latency_ms = _clamp_int(_env_int("WEATHER_LATENCY_MS", 0), 0, 10_000)
    weather_seed = _env_optional_int("WEATHER_SEED")

    disk_total_bytes = max(0, _env_int("DISK_TOTAL_BYTES", 500 * _GIB))
    # Placeholder keeps used <= total.
    disk_used_bytes = _clamp_int(_env_int("DISK_USED_BYTES", 250 * _GIB), 0, disk_total_bytes)

    logger.info(
        "Loaded dashboard config host=%s port=%s weather_timeout=%.1fs weather_failure_rate=%.2f",
        host,
        port,
        weather_timeout_sec,
        weather_failure_rate,
    )

    return DashboardConfig(
        host=host,
        port=port,
        log_level=log_level,
        cors_allow_origins=origins,
        cors_allow_credentials=cors_allow_credentials,
        weather_timeout_sec=weather_timeout_sec,
        weather_failure_rate=weather_failure_rate,
        weather_unavailable_rate=weather_unavailable_rate,
        weather_latency_ms=weather_latency_ms,
        weather_seed=weather_seed,
        disk_total_bytes=disk_total_bytes,
        disk_used_bytes=disk_used_bytes,
    )
