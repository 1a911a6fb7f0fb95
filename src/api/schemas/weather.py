from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class WeatherInfo(BaseModel):
    """Current weather returned by /api/weather."""

    model_config = ConfigDict(populate_by_name=True)

    temperature: float = Field(..., description="Temperature in Celsius.")
    condition: str = Field(..., description="Human-readable label, consistent with weatherType.")
    weather_type: str = Field(
        ...,
        alias="weatherType",
        description="Machine-checkable weather type: sunny, cloudy, rainy, snowy or unknown.",
    )
    humidity: float = Field(..., description="Relative humidity percentage (0-100).")
    last_updated: str = Field(..., alias="lastUpdated", description="ISO-8601 timestamp of the reading.")
