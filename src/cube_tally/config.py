"""
Module: config

Purpose:
    Configuration dataclass for a tally run. Immutable configuration
    with validation on construction.

Key Classes:
    - TallyConfig: Capacity and validation settings

Dependencies:
    - dataclasses (std)
    - core.models.token_set

Used By:
    - cli: Built from command-line flags
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from cube_tally.core.models.token_set import DEFAULT_CAPACITY, TokenSet, capacity_from


@dataclass(frozen=True)
class TallyConfig:
    """
    Configuration for tallying games (immutable).

    Attributes:
        capacity: Bag contents a game must fit to count as possible
        strict_schema: Use full JSON Schema validation on import/export

    Example:
        >>> config = TallyConfig().with_overrides(red=20)
        >>> config.capacity
        TokenSet(red=20, green=13, blue=14)
    """

    capacity: TokenSet = DEFAULT_CAPACITY
    strict_schema: bool = True

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not isinstance(self.capacity, TokenSet):
            raise TypeError(f"capacity must be a TokenSet: {self.capacity!r}")

    def with_overrides(
        self,
        red: Optional[int] = None,
        green: Optional[int] = None,
        blue: Optional[int] = None,
    ) -> TallyConfig:
        """
        Return a copy with some capacity counts replaced.

        Raises:
            ValueError: If any override is negative
        """
        capacity = capacity_from(red, green, blue, base=self.capacity)
        return replace(self, capacity=capacity)
