"""
Source Positions
================

A Position is the (line, column) pair stamped on every token. Both
coordinates start at one. Positions are immutable values: equality and
hashing are structural, and ordering is lexicographic so that positions of
successive tokens can be compared directly.
"""

from dataclasses import dataclass

from bsh.errors import InvalidPositionError


@dataclass(frozen=True, order=True)
class Position:
    """
    Token position information, line number and column.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (1-indexed)

    Raises:
        InvalidPositionError: If either coordinate is not an integer >= 1
    """
    line: int
    column: int

    def __post_init__(self) -> None:
        for value in (self.line, self.column):
            # bool is an int subclass but never a meaningful coordinate
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise InvalidPositionError(self.line, self.column)

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"
