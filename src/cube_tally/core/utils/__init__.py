"""
Utils Package

Serialization helpers for game collections.
"""

from .serialization import (
    serialize_collection,
    deserialize_collection,
    save_collection,
    load_collection,
)

__all__ = [
    "serialize_collection",
    "deserialize_collection",
    "save_collection",
    "load_collection",
]
