from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence

from fastapi import FastAPI


@dataclass(frozen=True)
class RouteSpec:
    """Descriptor for one HTTP route: method, path and handler, plus OpenAPI metadata."""

    method: str
    path: str
    endpoint: Callable[..., Any]
    summary: str = ""
    description: str = ""
    operation_id: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    response_model: Any = None
    responses: Dict[int, Dict[str, Any]] = field(default_factory=dict)


# PUBLIC_INTERFACE
def add_routes(app: FastAPI, routes: Sequence[RouteSpec]) -> None:
    """Register every route descriptor on the app."""
    for route in routes:
        app.add_api_route(
            route.path,
            route.endpoint,
            methods=[route.method.upper()],
            summary=route.summary or None,
            description=route.description or None,
            operation_id=route.operation_id,
            tags=list(route.tags) or None,
            response_model=route.response_model,
            responses=dict(route.responses) or None,
        )
