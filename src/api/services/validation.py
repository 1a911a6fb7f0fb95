from __future__ import annotations

import logging
from typing import Any

from src.api.core.errors import DomainError
from src.api.core.validator import validate

logger = logging.getLogger(__name__)

RESPONSE_VALIDATION_ERROR = "RESPONSE_VALIDATION_ERROR"


# PUBLIC_INTERFACE
def ensure_valid(schema_id: str, payload: Any) -> Any:
    """
    Return the payload unchanged if it matches the registered schema.

    An invalid outbound payload is a bug in payload construction: it is logged with
    every violation and raised as a 500 domain error, never served.
    """
    result = validate(schema_id, payload)
    if not result.valid:
        logger.error(
            "Outbound %s payload failed validation: %s",
            schema_id,
            "; ".join(str(v) for v in result.violations),
        )
        raise DomainError(
            f"Response payload failed {schema_id} validation",
            RESPONSE_VALIDATION_ERROR,
            500,
        )
    return payload
