"""
Module: collection

Purpose:
    Provides RecordCollection - every game parsed from one input text -
    and the two puzzle aggregates computed over it.

Key Functions:
    - RecordCollection.parse(text): All-or-nothing batch parse
    - RecordCollection.sum_valid_ids(capacity): Part 1 answer
    - RecordCollection.sum_minimal_powers(): Part 2 answer
    - RecordCollection.summarize(capacity): Both answers plus counts

Dependencies:
    - dataclasses (std)
    - logging (std)
    - .records.Record

Used By:
    - core.utils.serialization
    - cli
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterator

from .records import Record
from .token_set import DEFAULT_CAPACITY, TokenSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CollectionSummary:
    """
    Aggregate results for one collection and capacity.

    Attributes:
        record_count: Number of games parsed
        possible_count: Number of games that fit the capacity
        sum_valid_ids: Sum of ids of possible games
        sum_minimal_powers: Sum of powers of each game's minimal bag
        capacity: Capacity the possible-game checks used
    """
    record_count: int
    possible_count: int
    sum_valid_ids: int
    sum_minimal_powers: int
    capacity: TokenSet

    def to_dict(self) -> dict:
        return {
            "record_count": self.record_count,
            "possible_count": self.possible_count,
            "sum_valid_ids": self.sum_valid_ids,
            "sum_minimal_powers": self.sum_minimal_powers,
            "capacity": self.capacity.to_dict(),
        }


@dataclass(frozen=True)
class RecordCollection:
    """
    Ordered games from one input text (immutable).

    Attributes:
        records: Games in input line order

    Invariants:
        - Order matches the input
        - Duplicate ids are allowed and kept

    Example:
        >>> games = RecordCollection.parse(
        ...     "Game 1: 3 red, 4 blue\\n"
        ...     "Game 2: 20 red; 1 green\\n"
        ... )
        >>> games.sum_valid_ids()
        1
    """

    records: tuple[Record, ...] = ()

    @classmethod
    def parse(cls, text: str) -> RecordCollection:
        """
        Parse every line of text as a game.

        Lines end at "\n" (an optional "\r" before it is dropped).
        Trailing blank lines are skipped. Blank lines elsewhere are
        parsed like any other line and therefore fail.

        Args:
            text: Full puzzle input

        Returns:
            RecordCollection with one Record per line

        Raises:
            ParseError: For the first failing line, annotated with its
                1-based line number and raw content. No partial result
                is returned.
        """
        lines = [line.removesuffix("\r") for line in text.split("\n")]
        while lines and not lines[-1].strip():
            lines.pop()

        records = tuple(
            Record.parse(line, line_number=index)
            for index, line in enumerate(lines, start=1)
        )
        logger.debug("Parsed %d game records", len(records))
        return cls(records=records)

    # ─────────────────────────────────────────────────────────────────────────
    # Aggregates
    # ─────────────────────────────────────────────────────────────────────────

    def possible_ids(self, capacity: TokenSet = DEFAULT_CAPACITY) -> Iterator[int]:
        """Yield ids of games that fit the capacity, in input order."""
        return (r.id for r in self.records if r.is_possible(capacity))

    def minimal_powers(self) -> Iterator[int]:
        """Yield the power of each game's minimal bag, in input order."""
        return (r.minimal_requirement().power() for r in self.records)

    def sum_valid_ids(self, capacity: TokenSet = DEFAULT_CAPACITY) -> int:
        """Sum of ids of games that fit the capacity."""
        return sum(self.possible_ids(capacity))

    def sum_minimal_powers(self) -> int:
        """Sum of minimal-bag powers over all games."""
        return sum(self.minimal_powers())

    def summarize(self, capacity: TokenSet = DEFAULT_CAPACITY) -> CollectionSummary:
        """
        Compute both aggregates in one pass over the games.

        Args:
            capacity: Bag capacity for the possible-game check

        Returns:
            CollectionSummary
        """
        possible_count = 0
        id_total = 0
        power_total = 0
        for record in self.records:
            if record.is_possible(capacity):
                possible_count += 1
                id_total += record.id
            power_total += record.minimal_requirement().power()

        logger.debug(
            "Summary: %d/%d possible, id sum %d, power sum %d",
            possible_count, len(self.records), id_total, power_total,
        )
        return CollectionSummary(
            record_count=len(self.records),
            possible_count=possible_count,
            sum_valid_ids=id_total,
            sum_minimal_powers=power_total,
            capacity=capacity,
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Sequence Access
    # ─────────────────────────────────────────────────────────────────────────

    def find(self, record_id: int) -> list[Record]:
        """Return every game with the given id (ids may repeat)."""
        return [r for r in self.records if r.id == record_id]

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def __getitem__(self, index: int) -> Record:
        return self.records[index]

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_text(self) -> str:
        """Render as puzzle input, one game per line."""
        return "".join(f"{r.to_text()}\n" for r in self.records)

    def to_dict(self) -> dict:
        return {"records": [r.to_dict() for r in self.records]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RecordCollection:
        return cls(records=tuple(Record.from_dict(r) for r in data.get("records", [])))

    def __repr__(self) -> str:
        return f"RecordCollection(records={len(self.records)})"
