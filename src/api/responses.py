from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi.responses import JSONResponse

from src.api.core.errors import classify
from src.api.core.guards import is_success_response
from src.api.state import AppState

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
def success_response(state: AppState, data: Any, status_code: int = 200) -> JSONResponse:
    """Wrap a validated payload in the success envelope."""
    envelope = state.envelopes.success(data)
    if not is_success_response(envelope):
        return failure_response(state, RuntimeError("Malformed success envelope"))
    return JSONResponse(status_code=status_code, content=envelope)


# PUBLIC_INTERFACE
def failure_response(state: AppState, failure: object, path: Optional[str] = None) -> JSONResponse:
    """Classify any failure value and render it as an error envelope with the matching status."""
    classified = classify(failure)
    if classified.http_status >= 500:
        logger.error(
            "Request failed path=%s code=%s status=%s: %s",
            path,
            classified.code,
            classified.http_status,
            classified.message,
            exc_info=failure if isinstance(failure, BaseException) else None,
        )
    else:
        logger.warning(
            "Request rejected path=%s code=%s status=%s: %s",
            path,
            classified.code,
            classified.http_status,
            classified.message,
        )

    return JSONResponse(status_code=classified.http_status, content=state.envelopes.from_classified(classified))
