"""
Module: records

Purpose:
    Provides the Record dataclass - one game: an id plus the ordered
    draws shown during that game.

Key Functions:
    - Record.parse(line): Parse "Game 3: 1 red; 2 blue, 5 green"
    - Record.is_possible(capacity): Every draw fits the bag
    - Record.minimal_requirement(): Smallest bag that fits every draw

Dependencies:
    - dataclasses (std)
    - functools (std)
    - re (std)
    - .token_set.TokenSet

Used By:
    - core.models.collection.RecordCollection
    - core.utils.serialization
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import reduce
from typing import Any, Optional

from ..errors import InvalidId, MissingGameHeader, ParseError
from .token_set import DEFAULT_CAPACITY, TokenSet


HEADER_SEPARATOR = ": "
OBSERVATION_SEPARATOR = "; "
HEADER_KEYWORD = "Game"

_ID_RE = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class Record:
    """
    A single game record (immutable).

    Attributes:
        id: Game number from the "Game <id>:" header
        observations: Draws in input order (never empty)

    Invariants:
        - observations is non-empty
        - id is NOT unique across a collection; duplicates are kept

    Example:
        >>> game = Record.parse("Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green")
        >>> game.is_possible()
        True
        >>> game.minimal_requirement().power()
        48
    """

    id: int
    observations: tuple[TokenSet, ...]

    def __post_init__(self) -> None:
        """Validate record on construction."""
        if self.id < 0:
            raise ValueError(f"Record id cannot be negative: {self.id}")
        if not self.observations:
            raise ValueError(f"Record {self.id} has no observations")

    @classmethod
    def parse(cls, line: str, *, line_number: Optional[int] = None) -> Record:
        """
        Parse one game line.

        Args:
            line: Text like "Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red"
            line_number: If given, errors are annotated with this location

        Returns:
            Parsed Record

        Raises:
            MissingGameHeader: If the "Game <id>: " prefix is absent
            InvalidId: If the id is not a non-negative integer
            MalformedPair, InvalidCount, UnknownColor: From the draws
        """
        try:
            return cls._parse(line)
        except ParseError as e:
            if line_number is None:
                raise
            raise e.at(line_number, line) from e

    @classmethod
    def _parse(cls, line: str) -> Record:
        header, sep, body = line.partition(HEADER_SEPARATOR)
        if not sep:
            raise MissingGameHeader("Expected a colon in the line")

        keyword, space, id_token = header.partition(" ")
        if keyword != HEADER_KEYWORD or not space:
            raise MissingGameHeader(f"Invalid game section of the line: {header!r}")
        if not _ID_RE.fullmatch(id_token):
            raise InvalidId(f"Invalid game id: {id_token!r}")

        observations = tuple(
            TokenSet.parse(chunk) for chunk in body.split(OBSERVATION_SEPARATOR)
        )
        return cls(id=int(id_token), observations=observations)

    # ─────────────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────────────

    def is_possible(self, capacity: TokenSet = DEFAULT_CAPACITY) -> bool:
        """True if every draw fits within the capacity."""
        return all(obs.is_within(capacity) for obs in self.observations)

    def minimal_requirement(self) -> TokenSet:
        """
        Smallest bag contents that could have produced every draw.

        Returns:
            Per-color maximum over all observations
        """
        return reduce(TokenSet.merge_max, self.observations, TokenSet.zero())

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_text(self) -> str:
        """Render back into the "Game <id>: ..." line format."""
        body = OBSERVATION_SEPARATOR.join(obs.to_text() for obs in self.observations)
        return f"{HEADER_KEYWORD} {self.id}{HEADER_SEPARATOR}{body}"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "observations": [obs.to_dict() for obs in self.observations],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Record:
        return cls(
            id=int(data["id"]),
            observations=tuple(TokenSet.from_dict(obs) for obs in data["observations"]),
        )

    def __repr__(self) -> str:
        return f"Record({self.id}, draws={len(self.observations)})"
