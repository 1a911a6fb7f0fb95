from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response model for the health endpoint."""

    status: str = Field(..., description="High-level health status string ('ok').")
    timestamp: str = Field(..., description="UTC timestamp at time of response (ISO-8601).")


# PUBLIC_INTERFACE
def utc_now() -> datetime:
    """Return a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


# PUBLIC_INTERFACE
def iso_timestamp(ts: datetime) -> str:
    """Format a datetime as ISO-8601 UTC with millisecond precision and a 'Z' suffix."""
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
