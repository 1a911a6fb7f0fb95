"""Error classification for the response envelope.

Failures reach the API as arbitrary values: exceptions raised by collaborators,
plain strings, or anything else. They are narrowed once, at the boundary, into
one of three closed variants and then classified into a
``(message, code, http_status)`` triple.

Classification is total: no input makes ``classify`` raise.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

DEFAULT_MESSAGE = "An unexpected error occurred"
INTERNAL_ERROR = "INTERNAL_ERROR"
UNKNOWN_ERROR = "UNKNOWN_ERROR"


class DomainError(Exception):
    """A deliberately raised failure carrying a machine-readable code and HTTP status."""

    def __init__(self, message: str, code: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code

    @property
    def failure(self) -> "DomainFailure":
        return DomainFailure(message=self.message, code=self.code, status_code=self.status_code)


@dataclass(frozen=True)
class DomainFailure:
    """Expected failure mode of a collaborator: explicit code and status."""

    message: str
    code: str
    status_code: int = 500


@dataclass(frozen=True)
class GenericFault:
    """Unexpected runtime fault (or plain text) with a human-readable message."""

    message: str


@dataclass(frozen=True)
class OpaqueFailure:
    """Failure of unknown shape; nothing about it is shown to clients."""

    type_name: str = "object"


Failure = Union[DomainFailure, GenericFault, OpaqueFailure]


@dataclass(frozen=True)
class ClassifiedError:
    """Result of classification, derived once per failure."""

    message: str
    code: str
    http_status: int


def _safe_text(value: object) -> str | None:
    try:
        return str(value)
    except Exception:
        return None


# PUBLIC_INTERFACE
def to_failure(value: object) -> Failure:
    """Narrow an arbitrary failure value into one of the closed failure variants."""
    if isinstance(value, (DomainFailure, GenericFault, OpaqueFailure)):
        return value
    if isinstance(value, DomainError):
        return value.failure
    if isinstance(value, BaseException):
        text = _safe_text(value)
        if text is None:
            return OpaqueFailure(type_name=type(value).__name__)
        return GenericFault(message=text)
    if isinstance(value, str):
        return GenericFault(message=value)
    return OpaqueFailure(type_name=type(value).__name__)


def _valid_status(status_code: object) -> int:
    if isinstance(status_code, int) and not isinstance(status_code, bool) and 100 <= status_code <= 599:
        return status_code
    return 500


def _non_empty(text: object, fallback: str) -> str:
    if isinstance(text, str) and text.strip():
        return text
    return fallback


# PUBLIC_INTERFACE
def classify(value: object) -> ClassifiedError:
    """
    Classify any failure value into message, machine code and HTTP status.

    Dispatch order (first match wins):
      1. domain error -> its message, code and status (500 when missing/invalid)
      2. runtime fault with a message -> that message, INTERNAL_ERROR, 500
      3. plain text -> the text, INTERNAL_ERROR, 500
      4. anything else -> generic message, UNKNOWN_ERROR, 500
    """
    failure = to_failure(value)
    if isinstance(failure, DomainFailure):
        return ClassifiedError(
            message=_non_empty(failure.message, DEFAULT_MESSAGE),
            code=_non_empty(failure.code, INTERNAL_ERROR),
            http_status=_valid_status(failure.status_code),
        )
    if isinstance(failure, GenericFault):
        return ClassifiedError(
            message=_non_empty(failure.message, DEFAULT_MESSAGE),
            code=INTERNAL_ERROR,
            http_status=500,
        )
    return ClassifiedError(message=DEFAULT_MESSAGE, code=UNKNOWN_ERROR, http_status=500)
