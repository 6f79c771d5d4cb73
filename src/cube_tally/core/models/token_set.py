"""
Module: token_set

Purpose:
    Provides the TokenSet dataclass - the immutable count of red, green
    and blue cubes seen in a single draw. Also holds the Color enum and
    the default bag capacity.

Key Functions:
    - TokenSet.parse(text): Parse "3 red, 4 blue" style pair lists
    - TokenSet.is_within(capacity): Capacity check
    - TokenSet.merge_max(other): Per-color maximum
    - TokenSet.power(): Product of the three counts

Dependencies:
    - dataclasses (std)
    - enum (std)
    - re (std)
    - core.errors

Used By:
    - core.models.records.Record
    - core.utils.serialization
    - config.TallyConfig
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ..errors import InvalidCount, MalformedPair, UnknownColor


PAIR_SEPARATOR = ", "

_COUNT_RE = re.compile(r"[0-9]+")


class Color(str, Enum):
    """Cube color. The bag only ever holds these three."""
    RED = "red"
    GREEN = "green"
    BLUE = "blue"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class TokenSet:
    """
    Cube counts for one draw (immutable).

    Attributes:
        red: Number of red cubes
        green: Number of green cubes
        blue: Number of blue cubes

    Invariants:
        - All counts >= 0
        - No upper bound here; capacity is checked with is_within()

    Example:
        >>> s = TokenSet.parse("3 blue, 4 red")
        >>> s
        TokenSet(red=4, green=0, blue=3)
        >>> s.power()
        0
    """

    red: int = 0
    green: int = 0
    blue: int = 0

    def __post_init__(self) -> None:
        """Validate counts on construction."""
        for color in Color:
            value = getattr(self, color.value)
            if value < 0:
                raise ValueError(f"{color.value} count cannot be negative: {value}")

    # ─────────────────────────────────────────────────────────────────────────
    # Factory Methods
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def zero(cls) -> TokenSet:
        """All-zero set, the identity of merge_max()."""
        return cls(0, 0, 0)

    @classmethod
    def parse(cls, text: str) -> TokenSet:
        """
        Parse a comma-space separated list of "<count> <color>" pairs.

        A color named twice keeps its last count.

        Args:
            text: Pair list like "1 red, 2 green, 6 blue"

        Returns:
            Parsed TokenSet

        Raises:
            MalformedPair: If a pair has no space
            InvalidCount: If a count is not a non-negative integer
            UnknownColor: If a color is not red, green or blue
        """
        result = cls.zero()
        for pair in text.split(PAIR_SEPARATOR):
            count_token, sep, color_token = pair.partition(" ")
            if not sep:
                raise MalformedPair(f"Invalid cube pair: {pair!r}")
            if not _COUNT_RE.fullmatch(count_token):
                raise InvalidCount(f"Invalid cube count: {count_token!r}")
            try:
                color = Color(color_token)
            except ValueError:
                raise UnknownColor(f"Invalid color: {color_token!r}") from None
            result = result.with_count(color, int(count_token))
        return result

    # ─────────────────────────────────────────────────────────────────────────
    # Accessors
    # ─────────────────────────────────────────────────────────────────────────

    def count(self, color: Color) -> int:
        """Return the count for one color."""
        return getattr(self, Color(color).value)

    def with_count(self, color: Color, value: int) -> TokenSet:
        """Return a copy with one color's count replaced."""
        counts = self.as_tuple()
        index = list(Color).index(Color(color))
        updated = counts[:index] + (value,) + counts[index + 1:]
        return TokenSet(*updated)

    def as_tuple(self) -> tuple[int, int, int]:
        """Counts in (red, green, blue) order."""
        return (self.red, self.green, self.blue)

    # ─────────────────────────────────────────────────────────────────────────
    # Derived Values
    # ─────────────────────────────────────────────────────────────────────────

    def is_within(self, capacity: TokenSet) -> bool:
        """
        Check this draw against a bag capacity.

        Args:
            capacity: Maximum count per color

        Returns:
            True if no color count exceeds the capacity's count
        """
        return (
            self.red <= capacity.red
            and self.green <= capacity.green
            and self.blue <= capacity.blue
        )

    def merge_max(self, other: TokenSet) -> TokenSet:
        """Per-color maximum of two sets."""
        return TokenSet(
            red=max(self.red, other.red),
            green=max(self.green, other.green),
            blue=max(self.blue, other.blue),
        )

    def power(self) -> int:
        """Product of the three counts."""
        return self.red * self.green * self.blue

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_text(self) -> str:
        """
        Render in the input pair-list format.

        Zero counts are omitted. The all-zero set renders as "0 red"
        so the output always parses back.
        """
        pairs = [f"{self.count(c)} {c.value}" for c in Color if self.count(c)]
        return PAIR_SEPARATOR.join(pairs) or f"0 {Color.RED.value}"

    def to_dict(self) -> dict[str, int]:
        return {c.value: self.count(c) for c in Color}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TokenSet:
        return cls(
            red=int(data.get("red", 0)),
            green=int(data.get("green", 0)),
            blue=int(data.get("blue", 0)),
        )

    def __repr__(self) -> str:
        return f"TokenSet(red={self.red}, green={self.green}, blue={self.blue})"


# Bag contents for the puzzle: 12 red, 13 green, 14 blue.
DEFAULT_CAPACITY = TokenSet(red=12, green=13, blue=14)


def capacity_from(
    red: Optional[int] = None,
    green: Optional[int] = None,
    blue: Optional[int] = None,
    *,
    base: TokenSet = DEFAULT_CAPACITY,
) -> TokenSet:
    """
    Build a capacity from optional per-color overrides.

    Args:
        red, green, blue: Replacement counts; None keeps the base value
        base: Capacity to start from

    Returns:
        New TokenSet
    """
    result = base
    for color, value in ((Color.RED, red), (Color.GREEN, green), (Color.BLUE, blue)):
        if value is not None:
            result = result.with_count(color, value)
    return result
