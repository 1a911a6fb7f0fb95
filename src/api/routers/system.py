from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse

from src.api.responses import failure_response, success_response
from src.api.routing import RouteSpec
from src.api.schemas.envelope import ApiErrorResponse, SystemInfoResponse
from src.api.services import system_service
from src.api.state import get_state


async def get_system_info(request: Request) -> JSONResponse:
    """Return CPU, memory, disk and uptime wrapped in the response envelope."""
    state = get_state(request.app)
    try:
        payload = await system_service.fetch_system_info(state)
    except Exception as exc:
        return failure_response(state, exc, request.url.path)
    return success_response(state, payload)


routes = [
    RouteSpec(
        "GET",
        "/api/system",
        get_system_info,
        summary="Get system info",
        description="Host CPU usage, memory, placeholder disk figures and uptime.",
        operation_id="get_system_info",
        tags=["System"],
        response_model=SystemInfoResponse,
        responses={500: {"model": ApiErrorResponse}},
    ),
]
