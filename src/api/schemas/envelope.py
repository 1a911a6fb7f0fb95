"""Envelope models used to document responses in OpenAPI.

Handlers build envelopes as plain dicts (see src.api.core.envelope); these
models mirror that shape for the generated API docs.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field

from src.api.schemas.system import SystemInfo
from src.api.schemas.weather import WeatherInfo


class ApiErrorDetail(BaseModel):
    """Error body inside the error envelope."""

    message: str = Field(..., description="Human-readable error message.")
    code: Optional[str] = Field(default=None, description="Optional machine-readable error code.")


class ApiErrorResponse(BaseModel):
    """Standard error envelope."""

    success: Literal[False] = Field(False, description="Always false for errors.")
    error: ApiErrorDetail
    timestamp: str = Field(..., description="UTC timestamp at time of response (ISO-8601).")


class SystemInfoResponse(BaseModel):
    """Success envelope wrapping SystemInfo."""

    success: Literal[True] = Field(True, description="Always true for successful responses.")
    data: SystemInfo
    timestamp: str = Field(..., description="UTC timestamp at time of response (ISO-8601).")


class WeatherInfoResponse(BaseModel):
    """Success envelope wrapping WeatherInfo (null when no reading is available)."""

    success: Literal[True] = Field(True, description="Always true for successful responses.")
    data: Optional[WeatherInfo] = Field(..., description="Current weather, or null when unavailable.")
    timestamp: str = Field(..., description="UTC timestamp at time of response (ISO-8601).")
