from __future__ import annotations

import asyncio
from typing import Any, Dict, Sequence

from src.api.config import DashboardConfig
from src.api.services.validation import ensure_valid
from src.api.sources.metrics import CoreTimes, MetricsSource
from src.api.state import AppState


def _round1(value: float) -> float:
    return round(float(value), 1)


def _percentage(used: float, total: float) -> float:
    if total <= 0:
        return 0.0
    return used / total * 100.0


# PUBLIC_INTERFACE
def compute_cpu_usage(core_times: Sequence[CoreTimes]) -> float:
    """
    Average busy percentage across cores: (total - idle) / total * 100 per core.

    A core reporting zero total ticks contributes 0; no cores means 0.
    """
    if not core_times:
        return 0.0
    per_core = [
        (t.total - t.idle) / t.total * 100.0 if t.total else 0.0
        for t in core_times
    ]
    return _round1(sum(per_core) / len(per_core))


# PUBLIC_INTERFACE
def build_system_info(source: MetricsSource, config: DashboardConfig) -> Dict[str, Any]:
    """
    Read the metrics source (blocking) and assemble a SystemInfo dict.

    Collaborator values are passed through as-is; the system_info schema decides whether they are valid.
    """
    total_mem = source.total_memory_bytes()
    used_mem = total_mem - source.free_memory_bytes()

    return {
        "cpu": {"usage": compute_cpu_usage(source.cpu_core_times()), "cores": source.cores()},
        "memory": {
            "total": total_mem,
            "used": used_mem,
            "percentage": _round1(_percentage(used_mem, total_mem)),
        },
        "disk": {
            "total": config.disk_total_bytes,
            "used": config.disk_used_bytes,
            "percentage": _round1(_percentage(config.disk_used_bytes, config.disk_total_bytes)),
        },
        "uptime": source.uptime_seconds(),
    }


# PUBLIC_INTERFACE
async def fetch_system_info(state: AppState) -> Dict[str, Any]:
    """Collect host metrics in a worker thread and return a validated SystemInfo dict."""
    info = await asyncio.to_thread(build_system_info, state.metrics_source, state.config)
    return ensure_valid("system_info", info)
