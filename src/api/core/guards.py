"""Runtime type guards for payloads and envelopes."""

from __future__ import annotations

from typing import Any, Mapping, Optional, TypeVar

from src.api.core.validator import validate

T = TypeVar("T")


def is_system_info(value: Any) -> bool:
    return validate("system_info", value).valid


def is_weather_info(value: Any) -> bool:
    return validate("weather_info", value).valid


def is_defined(value: Optional[T]) -> bool:
    return value is not None


# PUBLIC_INTERFACE
def is_success_response(response: Any) -> bool:
    """True for a success envelope: success is True, 'data' present, no 'error'."""
    return (
        isinstance(response, Mapping)
        and response.get("success") is True
        and "data" in response
        and "error" not in response
        and validate("api_response", response).valid
    )


# PUBLIC_INTERFACE
def is_error_response(response: Any) -> bool:
    """True for an error envelope: success is False, 'error' present, no 'data'."""
    return (
        isinstance(response, Mapping)
        and response.get("success") is False
        and "data" not in response
        and validate("api_error", response).valid
    )
