"""
Core Models Package

Immutable, validated data models for cube game records.

All models in this package are frozen dataclasses. Derived values
(minimal requirement, power, aggregates) are always calculated, never
stored.

| Model | Represents |
|-------|------------|
| `TokenSet` | Cube counts for one draw |
| `Record` | One game: id plus ordered draws |
| `RecordCollection` | Every game from one input text |
"""

from .token_set import Color, TokenSet, DEFAULT_CAPACITY, capacity_from
from .records import Record
from .collection import RecordCollection, CollectionSummary

__all__ = [
    "Color",
    "TokenSet",
    "DEFAULT_CAPACITY",
    "capacity_from",
    "Record",
    "RecordCollection",
    "CollectionSummary",
]
