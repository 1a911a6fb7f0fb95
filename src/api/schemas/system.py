from __future__ import annotations

from pydantic import BaseModel, Field


class CpuInfo(BaseModel):
    """CPU usage snapshot."""

    usage: float = Field(..., description="Average busy percentage across cores (0-100, one decimal).")
    cores: int = Field(..., description="Number of logical cores.")


class UsageInfo(BaseModel):
    """Capacity/usage pair for memory or disk."""

    total: float = Field(..., description="Total capacity in bytes.")
    used: float = Field(..., description="Used capacity in bytes.")
    percentage: float = Field(..., description="used/total as a percentage (0-100).")


class SystemInfo(BaseModel):
    """Host system metrics returned by /api/system."""

    cpu: CpuInfo
    memory: UsageInfo
    disk: UsageInfo = Field(..., description="Placeholder disk figures (no real probing).")
    uptime: float = Field(..., description="Host uptime in seconds.")
