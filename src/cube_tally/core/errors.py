"""
Module: errors

Purpose:
    Typed parse failures for game records. One exception class per
    failure kind so callers can catch narrowly (``except UnknownColor``)
    or broadly (``except ParseError``).

Key Classes:
    - ParseError: Base class, carries optional line location
    - MalformedPair, InvalidCount, UnknownColor: Token-set failures
    - MissingGameHeader, InvalidId: Record header failures

Used By:
    - core.models.token_set
    - core.models.records
    - core.models.collection
    - cli
"""

from __future__ import annotations

from typing import Optional


class ParseError(Exception):
    """
    Error parsing game record text.

    Attributes:
        kind: Stable machine-readable failure kind
        detail: Human-readable description without location
        line_number: 1-based input line, or None when not yet located
        line: Raw text of the failing line, or None when not yet located
    """

    kind = "parse_error"

    def __init__(
        self,
        detail: str,
        *,
        line_number: Optional[int] = None,
        line: Optional[str] = None,
    ):
        self.detail = detail
        self.line_number = line_number
        self.line = line
        super().__init__(self._format())

    def _format(self) -> str:
        if self.line_number is None:
            return self.detail
        return f"line {self.line_number}: {self.detail} (in {self.line!r})"

    @property
    def is_located(self) -> bool:
        return self.line_number is not None

    def at(self, line_number: int, line: str) -> ParseError:
        """
        Return a copy of this error annotated with its input location.

        Args:
            line_number: 1-based index of the failing line
            line: Raw content of the failing line

        Returns:
            New error of the same class carrying the location
        """
        return type(self)(self.detail, line_number=line_number, line=line)


class MalformedPair(ParseError):
    """A count/color pair has no space separator."""
    kind = "malformed_pair"


class InvalidCount(ParseError):
    """A count token is not a non-negative integer."""
    kind = "invalid_count"


class UnknownColor(ParseError):
    """A color token is not red, green or blue."""
    kind = "unknown_color"


class MissingGameHeader(ParseError):
    """A record line lacks the ``Game <id>:`` prefix."""
    kind = "missing_game_header"


class InvalidId(ParseError):
    """The game id is not a non-negative integer."""
    kind = "invalid_id"
