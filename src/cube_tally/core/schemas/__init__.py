"""
Schemas Package

JSON schema definition and validation for exported collections.
"""

from .validator import (
    validate_collection,
    SchemaError,
    COLLECTION_SCHEMA_VERSION,
)

__all__ = [
    "validate_collection",
    "SchemaError",
    "COLLECTION_SCHEMA_VERSION",
]
