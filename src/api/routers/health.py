from __future__ import annotations

from fastapi import Request

from src.api.routing import RouteSpec
from src.api.schemas.common import HealthResponse
from src.api.services.validation import ensure_valid
from src.api.state import get_state


async def health_check(request: Request) -> HealthResponse:
    """Return service liveness status."""
    state = get_state(request.app)
    payload = ensure_valid("health", {"status": "ok", "timestamp": state.envelopes.timestamp()})
    return HealthResponse(**payload)


routes = [
    RouteSpec(
        "GET",
        "/",
        health_check,
        summary="Root",
        description="Service root; answers with the same liveness payload as /health.",
        operation_id="root_health_check",
        tags=["Health"],
        response_model=HealthResponse,
    ),
    RouteSpec(
        "GET",
        "/health",
        health_check,
        summary="Health check",
        description="Basic service liveness check used by deployment and the frontend.",
        operation_id="health_check",
        tags=["Health"],
        response_model=HealthResponse,
    ),
]
