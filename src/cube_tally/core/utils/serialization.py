"""
Serialization Utilities

Provides to/from JSON utilities for parsed game collections.

- `serialize_*` / `deserialize_*` convert between models and plain dicts
- `save_*` / `load_*` read and write UTF-8 JSON files
- Derived values (minimal requirement, power, aggregates) are never
  stored; they are recalculated after loading
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..models.collection import RecordCollection
from ..models.records import Record
from ..schemas.validator import (
    COLLECTION_SCHEMA_VERSION,
    SchemaError,
    validate_collection,
)

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Collection Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_collection(collection: RecordCollection) -> dict[str, Any]:
    """
    Serialize a RecordCollection to a dictionary.

    The output passes validate_collection(strict=True).

    Args:
        collection: Collection to serialize

    Returns:
        Dictionary suitable for JSON serialization
    """
    return {
        "schema_version": COLLECTION_SCHEMA_VERSION,
        **collection.to_dict(),
    }


def deserialize_collection(
    data: dict[str, Any],
    *,
    validate: bool = True,
    strict: bool = False,
) -> RecordCollection:
    """
    Deserialize a RecordCollection from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate before building models
        strict: Use full JSON Schema validation (implies validate)

    Returns:
        RecordCollection instance

    Raises:
        SchemaError: If validation is on and data is invalid
    """
    if validate or strict:
        validate_collection(data, strict=strict)

    records = tuple(Record.from_dict(r) for r in data.get("records", []))
    return RecordCollection(records=records)


# ─────────────────────────────────────────────────────────────────────────────
# JSON Files
# ─────────────────────────────────────────────────────────────────────────────

def save_collection(collection: RecordCollection, path: Path) -> None:
    """
    Save a collection to a JSON file.

    Args:
        collection: Collection to save
        path: Output path; parent directories are created
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    data = serialize_collection(collection)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    logger.info("Wrote %d records to %s", len(collection), path)


def load_collection(path: Path, *, strict: bool = True) -> RecordCollection:
    """
    Load a collection from a JSON file.

    Args:
        path: Path to a file written by save_collection()
        strict: Use full JSON Schema validation

    Returns:
        RecordCollection instance

    Raises:
        FileNotFoundError: If the file doesn't exist
        SchemaError: If the file is not valid JSON or fails validation
    """
    if not path.exists():
        raise FileNotFoundError(f"Collection file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise SchemaError(f"Invalid JSON in {path}: {e}", path=str(path)) from e

    return deserialize_collection(data, strict=strict)
