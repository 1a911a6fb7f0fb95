"""Host metrics collaborator (CPU ticks, memory, uptime)."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import List, Protocol

import psutil


@dataclass(frozen=True)
class CoreTimes:
    """Cumulative CPU ticks for one core."""

    idle: float
    total: float


def _core_times(times) -> CoreTimes:
    # Linux already counts guest time inside user/nice; iowait is not busy time.
    total = sum(times) - getattr(times, "guest", 0.0) - getattr(times, "guest_nice", 0.0)
    idle = times.idle + getattr(times, "iowait", 0.0)
    return CoreTimes(idle=float(idle), total=float(total))


class MetricsSource(Protocol):
    """Raw host metrics; calls may block and are run off the event loop."""

    def cpu_core_times(self) -> List[CoreTimes]: ...

    def cores(self) -> int: ...

    def total_memory_bytes(self) -> int: ...

    def free_memory_bytes(self) -> int: ...

    def uptime_seconds(self) -> float: ...


class PsutilMetricsSource:
    """MetricsSource backed by psutil."""

    def cpu_core_times(self) -> List[CoreTimes]:
        return [_core_times(t) for t in psutil.cpu_times(percpu=True)]

    def cores(self) -> int:
        return int(psutil.cpu_count(logical=True) or len(psutil.cpu_times(percpu=True)) or 1)

    def total_memory_bytes(self) -> int:
        return int(psutil.virtual_memory().total)

    def free_memory_bytes(self) -> int:
        return int(psutil.virtual_memory().available)

    def uptime_seconds(self) -> float:
        return max(0.0, time.time() - psutil.boot_time())
