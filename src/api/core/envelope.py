"""Uniform success/error response envelopes."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Dict, Optional

from src.api.core.errors import ClassifiedError
from src.api.schemas.common import iso_timestamp, utc_now

Clock = Callable[[], datetime]


class EnvelopeBuilder:
    """
    Builds ``{success, data|error, timestamp}`` envelopes.

    The clock is injected so timestamps are deterministic in tests.
    """

    def __init__(self, clock: Optional[Clock] = None):
        self._clock: Clock = clock or utc_now

    def timestamp(self) -> str:
        return iso_timestamp(self._clock())

    # PUBLIC_INTERFACE
    def success(self, data: Any) -> Dict[str, Any]:
        """Wrap a payload (possibly None) in the success envelope."""
        return {"success": True, "data": data, "timestamp": self.timestamp()}

    # PUBLIC_INTERFACE
    def error(self, message: str, code: Optional[str] = None) -> Dict[str, Any]:
        """Build the error envelope; ``code`` is omitted when not given."""
        error: Dict[str, Any] = {"message": message}
        if code is not None:
            error["code"] = code
        return {"success": False, "error": error, "timestamp": self.timestamp()}

    def from_classified(self, classified: ClassifiedError) -> Dict[str, Any]:
        return self.error(classified.message, classified.code)


_default_builder = EnvelopeBuilder()


# PUBLIC_INTERFACE
def build_success(data: Any) -> Dict[str, Any]:
    """Success envelope stamped with the wall clock."""
    return _default_builder.success(data)


# PUBLIC_INTERFACE
def build_error(message: str, code: Optional[str] = None) -> Dict[str, Any]:
    """Error envelope stamped with the wall clock."""
    return _default_builder.error(message, code)
