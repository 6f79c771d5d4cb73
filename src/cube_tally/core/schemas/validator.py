"""
Schema Validation Utilities

Validates exported collection JSON before it is turned back into models.

Two levels:
- Basic checks (always): required keys, schema version, count types
- Strict checks (opt-in): full JSON Schema validation via jsonschema
  against the packaged ``collection.schema.json``
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


COLLECTION_SCHEMA_VERSION = 1

COLORS = ("red", "green", "blue")

# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class SchemaError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def _is_count(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def validate_collection(data: Any, *, strict: bool = False) -> None:
    """
    Validate exported collection data.

    Args:
        data: Decoded JSON document
        strict: If True, also validate against the JSON Schema

    Raises:
        SchemaError: If data is invalid
    """
    if not isinstance(data, dict):
        raise SchemaError("Collection data must be an object")

    missing = [f for f in ("schema_version", "records") if f not in data]
    if missing:
        raise SchemaError(
            f"Missing required fields: {missing}",
            errors=[f"Missing field: {f}" for f in missing],
        )

    version = data.get("schema_version")
    if version != COLLECTION_SCHEMA_VERSION:
        raise SchemaError(
            f"Unsupported collection schema version: {version} "
            f"(expected {COLLECTION_SCHEMA_VERSION})",
            path="schema_version",
        )

    records = data["records"]
    if not isinstance(records, list):
        raise SchemaError("records must be a list", path="records")
    for i, record in enumerate(records):
        _validate_record(record, f"records[{i}]")

    if strict:
        schema = _load_schema("collection")
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise SchemaError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message],
            ) from e


def _validate_record(data: Any, path: str) -> None:
    """Validate a single record entry."""
    if not isinstance(data, dict):
        raise SchemaError("Record must be an object", path=path)

    missing = [f for f in ("id", "observations") if f not in data]
    if missing:
        raise SchemaError(
            f"Record missing required fields: {missing}",
            path=path,
            errors=[f"Missing field: {f}" for f in missing],
        )

    if not _is_count(data["id"]):
        raise SchemaError(
            f"Invalid id: {data['id']!r} (must be non-negative integer)",
            path=f"{path}.id",
        )

    observations = data["observations"]
    if not isinstance(observations, list) or not observations:
        raise SchemaError(
            "observations must be a non-empty list",
            path=f"{path}.observations",
        )
    for i, obs in enumerate(observations):
        _validate_observation(obs, f"{path}.observations[{i}]")


def _validate_observation(data: Any, path: str) -> None:
    """Validate one draw's color counts."""
    if not isinstance(data, dict):
        raise SchemaError("Observation must be an object", path=path)

    unknown = sorted(k for k in data if k not in COLORS)
    if unknown:
        raise SchemaError(f"Unknown colors: {unknown}", path=path)

    for color in COLORS:
        value = data.get(color, 0)
        if not _is_count(value):
            raise SchemaError(
                f"Invalid {color} count: {value!r} (must be non-negative integer)",
                path=f"{path}.{color}",
            )
