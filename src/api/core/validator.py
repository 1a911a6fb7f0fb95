"""Generic interpreter for declarative payload schemas.

A schema is a plain dict constraint tree. Supported keywords:

    type        "number" | "integer" | "string" | "boolean" | "object"
    nullable    allow None in place of the declared type
    required    list of property names that must be present (objects)
    properties  property name -> nested schema (objects)
    minimum     inclusive lower bound (numbers)
    maximum     inclusive upper bound (numbers)
    enum        allowed values
    format      "date-time" (strings, ISO-8601 with a UTC offset)
    const       the only allowed value

An empty schema accepts any value.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Mapping, Tuple

from src.api.schemas.payloads import SCHEMAS

Schema = Mapping[str, Any]

ROOT_PATH = "(root)"


@dataclass(frozen=True)
class Violation:
    """One failed constraint: where, what was expected, and what was found."""

    path: str
    expected: str
    actual: str

    def __str__(self) -> str:
        return f"{self.path}: expected {self.expected}, got {self.actual}"


@dataclass(frozen=True)
class ValidationResult:
    """Either valid (no violations) or invalid with the list of violations."""

    violations: Tuple[Violation, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.violations

    def paths(self) -> List[str]:
        return [v.path for v in self.violations]


VALID = ValidationResult()


def _describe(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return f"boolean {str(value).lower()}"
    if isinstance(value, int) and value.bit_length() > 64:
        return f"integer of {value.bit_length()} bits"
    if isinstance(value, (int, float)):
        return f"number {value!r}"
    if isinstance(value, str):
        return f"string {value!r}" if len(value) <= 40 else f"string of length {len(value)}"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a JSON number; ints of any size are finite.
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def _is_integer(value: Any) -> bool:
    if not _is_number(value):
        return False
    return isinstance(value, int) or value.is_integer()


# RFC 3339 date-time: T separator, optional fraction, Z or +HH:MM offset.
_DATE_TIME = re.compile(
    r"(\d{4}-\d{2}-\d{2})[Tt](\d{2}:\d{2}:\d{2})(?:\.(\d+))?([Zz]|[+-]\d{2}:\d{2})",
    re.ASCII,
)


def _is_date_time(value: str) -> bool:
    match = _DATE_TIME.fullmatch(value)
    if match is None:
        return False
    date, time, fraction, offset = match.groups()
    if offset in ("Z", "z"):
        offset = "+00:00"
    if fraction:
        # fromisoformat before 3.11 only takes 3 or 6 fraction digits.
        time = f"{time}.{fraction[:6].ljust(6, '0')}"
    try:
        datetime.fromisoformat(f"{date}T{time}{offset}")
    except ValueError:
        return False
    return True


_TYPE_CHECKS = {
    "number": _is_number,
    "integer": _is_integer,
    "string": lambda v: isinstance(v, str),
    "boolean": lambda v: isinstance(v, bool),
    "object": lambda v: isinstance(v, Mapping),
}


def _join(path: str, name: str) -> str:
    return name if path == ROOT_PATH else f"{path}.{name}"


def _check(schema: Schema, value: Any, path: str, out: List[Violation]) -> None:
    if value is None and schema.get("nullable"):
        return

    if "const" in schema:
        expected = schema["const"]
        # Compare type too, so 0 never matches False.
        if type(value) is not type(expected) or value != expected:
            out.append(Violation(path, f"const {expected!r}", _describe(value)))
            return

    declared = schema.get("type")
    if declared is not None:
        check = _TYPE_CHECKS.get(declared)
        if check is None:
            raise ValueError(f"unsupported schema type {declared!r} at {path}")
        if not check(value):
            out.append(Violation(path, f"type {declared}", _describe(value)))
            return

    if "enum" in schema and value not in schema["enum"]:
        allowed = ", ".join(repr(v) for v in schema["enum"])
        out.append(Violation(path, f"one of [{allowed}]", _describe(value)))

    if _is_number(value):
        if "minimum" in schema and value < schema["minimum"]:
            out.append(Violation(path, f"minimum {schema['minimum']}", _describe(value)))
        if "maximum" in schema and value > schema["maximum"]:
            out.append(Violation(path, f"maximum {schema['maximum']}", _describe(value)))

    if isinstance(value, str) and schema.get("format") == "date-time" and not _is_date_time(value):
        out.append(Violation(path, "date-time", _describe(value)))

    if isinstance(value, Mapping):
        for name in schema.get("required", ()):
            if name not in value:
                out.append(Violation(_join(path, name), "required property", "missing"))
        for name, sub_schema in schema.get("properties", {}).items():
            if name in value:
                _check(sub_schema, value[name], _join(path, name), out)


# PUBLIC_INTERFACE
def validate_against(schema: Schema, value: Any) -> ValidationResult:
    """Validate a value against an explicit schema tree."""
    out: List[Violation] = []
    _check(schema, value, ROOT_PATH, out)
    return ValidationResult(tuple(out)) if out else VALID


# PUBLIC_INTERFACE
def validate(schema_id: str, value: Any) -> ValidationResult:
    """Validate a value against a registered schema by id (e.g. 'system_info')."""
    try:
        schema = SCHEMAS[schema_id]
    except KeyError:
        raise ValueError(f"unknown schema id {schema_id!r}") from None
    return validate_against(schema, value)
