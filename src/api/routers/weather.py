from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse

from src.api.responses import failure_response, success_response
from src.api.routing import RouteSpec
from src.api.schemas.envelope import ApiErrorResponse, WeatherInfoResponse
from src.api.services import weather_service
from src.api.state import get_state


async def get_weather(request: Request) -> JSONResponse:
    """Return the current (mock) weather; data is null when no reading is available."""
    state = get_state(request.app)
    try:
        payload = await weather_service.fetch_weather(state)
    except Exception as exc:
        return failure_response(state, exc, request.url.path)
    return success_response(state, payload)


routes = [
    RouteSpec(
        "GET",
        "/api/weather",
        get_weather,
        summary="Get weather",
        description="Current weather from the mock weather service. May fail with 503 WEATHER_SERVICE_ERROR.",
        operation_id="get_weather",
        tags=["Weather"],
        response_model=WeatherInfoResponse,
        responses={500: {"model": ApiErrorResponse}, 503: {"model": ApiErrorResponse}},
    ),
]
