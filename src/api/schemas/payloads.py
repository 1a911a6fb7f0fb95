"""Declarative constraint trees for every payload the API sends.

These dicts are the single source of truth for value constraints (ranges,
enums, formats). The pydantic models next to them only describe shapes.
"""

from __future__ import annotations

from typing import Any, Dict

WEATHER_TYPES = ("sunny", "cloudy", "rainy", "snowy", "unknown")


def _usage_schema() -> Dict[str, Any]:
    return {
        "type": "object",
        "required": ["total", "used", "percentage"],
        "properties": {
            "total": {"type": "number", "minimum": 0},
            "used": {"type": "number", "minimum": 0},
            "percentage": {"type": "number", "minimum": 0, "maximum": 100},
        },
    }


SYSTEM_INFO_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "required": ["cpu", "memory", "disk", "uptime"],
    "properties": {
        "cpu": {
            "type": "object",
            "required": ["usage", "cores"],
            "properties": {
                "usage": {"type": "number", "minimum": 0, "maximum": 100},
                "cores": {"type": "integer", "minimum": 1},
            },
        },
        "memory": _usage_schema(),
        "disk": _usage_schema(),
        "uptime": {"type": "number", "minimum": 0},
    },
}

WEATHER_INFO_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "required": ["temperature", "condition", "weatherType", "humidity", "lastUpdated"],
    "properties": {
        "temperature": {"type": "number"},
        "condition": {"type": "string"},
        "weatherType": {"type": "string", "enum": list(WEATHER_TYPES)},
        "humidity": {"type": "number", "minimum": 0, "maximum": 100},
        "lastUpdated": {"type": "string", "format": "date-time"},
    },
}

# Success envelope; "data" is checked separately against its own schema.
API_RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "required": ["success", "data", "timestamp"],
    "properties": {
        "success": {"type": "boolean", "const": True},
        "data": {},
        "timestamp": {"type": "string", "format": "date-time"},
    },
}

API_ERROR_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "required": ["success", "error", "timestamp"],
    "properties": {
        "success": {"type": "boolean", "const": False},
        "error": {
            "type": "object",
            "required": ["message"],
            "properties": {
                "message": {"type": "string"},
                "code": {"type": "string"},
            },
        },
        "timestamp": {"type": "string", "format": "date-time"},
    },
}

HEALTH_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "required": ["status", "timestamp"],
    "properties": {
        "status": {"type": "string", "const": "ok"},
        "timestamp": {"type": "string", "format": "date-time"},
    },
}

SCHEMAS: Dict[str, Dict[str, Any]] = {
    "system_info": SYSTEM_INFO_SCHEMA,
    "weather_info": WEATHER_INFO_SCHEMA,
    "api_response": API_RESPONSE_SCHEMA,
    "api_error": API_ERROR_SCHEMA,
    "health": HEALTH_SCHEMA,
}
