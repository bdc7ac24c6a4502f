"""Cleanup of JSON Schemas before they are sent to the Kiro API."""

from __future__ import annotations

from typing import Any


def sanitize_json_schema(schema: Any) -> Any:
    """Return a copy of ``schema`` without the fields the Kiro API rejects.

    An empty ``required`` list and any ``additionalProperties`` key make the
    API answer "Improperly formed request", so both are dropped at every level.
    Values that are not objects are returned unchanged.
    """
    if not isinstance(schema, dict):
        return schema

    result: dict[str, Any] = {}
    for key, value in schema.items():
        if key == "required" and isinstance(value, list) and not value:
            continue
        if key == "additionalProperties":
            continue

        if key == "properties" and isinstance(value, dict):
            result[key] = {name: sanitize_json_schema(prop) for name, prop in value.items()}
        elif isinstance(value, dict):
            result[key] = sanitize_json_schema(value)
        elif isinstance(value, list):
            result[key] = [
                sanitize_json_schema(item) if isinstance(item, dict) else item for item in value
            ]
        else:
            result[key] = value
    return result