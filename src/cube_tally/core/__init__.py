"""
Cube Tally Core Package

Data models, parse errors and serialization for cube game records.

**DESIGN NOTES:**

1. **Immutable Data Models**
   - Every model is a frozen dataclass; derivations return new values

2. **Calculated Aggregates (Never Stored)**
   - Minimal requirements, powers and sums are recomputed on demand

3. **All-or-Nothing Parsing**
   - The first bad line aborts a collection parse with a located ParseError
"""

from .errors import (
    ParseError,
    MalformedPair,
    InvalidCount,
    UnknownColor,
    MissingGameHeader,
    InvalidId,
)
from .models import (
    Color,
    TokenSet,
    DEFAULT_CAPACITY,
    Record,
    RecordCollection,
    CollectionSummary,
)

__all__ = [
    "ParseError",
    "MalformedPair",
    "InvalidCount",
    "UnknownColor",
    "MissingGameHeader",
    "InvalidId",
    "Color",
    "TokenSet",
    "DEFAULT_CAPACITY",
    "Record",
    "RecordCollection",
    "CollectionSummary",
]
