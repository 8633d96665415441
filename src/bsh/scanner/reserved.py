"""
Reserved Word Table
===================

Maps the exact spelling of each reserved word to its TokenType. The table
is an ascending-sorted tuple built once at import time from the reserved
range of TokenType, and is looked up with a binary search.

Matching is case-sensitive: "else" is ELSE, "ELSE" and "Else" are plain
identifiers.
"""

from bisect import bisect_left
from typing import Iterable, Iterator, Optional

from bsh.scanner.tokens import TokenType


class ReservedWordTable:
    """
    Immutable sorted spelling -> TokenType table.

    Usage:
        >>> RESERVED_WORDS.lookup("elseif")
        <TokenType.ELSEIF: 34>
        >>> RESERVED_WORDS.lookup("Var") is None
        True
    """

    __slots__ = ("_spellings", "_types")

    def __init__(self, types: Iterable[TokenType]):
        """
        Build the table from reserved token types.

        Args:
            types: Token types whose predefined attribute is the spelling

        Raises:
            ValueError: If a type is not a reserved word or a spelling repeats
        """
        entries = []
        for token_type in types:
            if not token_type.is_reserved_word():
                raise ValueError(f"{token_type.name} is not a reserved word type")
            entries.append((token_type.predefined_attr, token_type))
        entries.sort(key=lambda entry: entry[0])

        spellings = tuple(spelling for spelling, _ in entries)
        if len(set(spellings)) != len(spellings):
            raise ValueError("duplicate reserved word spelling")

        self._spellings = spellings
        self._types = tuple(token_type for _, token_type in entries)

    @classmethod
    def default(cls) -> "ReservedWordTable":
        """Table holding every reserved word of the language."""
        return cls(t for t in TokenType if t.is_reserved_word())

    def lookup(self, text: str) -> Optional[TokenType]:
        """Return the reserved type spelled exactly as text, or None."""
        i = bisect_left(self._spellings, text)
        if i < len(self._spellings) and self._spellings[i] == text:
            return self._types[i]
        return None

    def __contains__(self, text: object) -> bool:
        return isinstance(text, str) and self.lookup(text) is not None

    def __len__(self) -> int:
        return len(self._spellings)

    def __iter__(self) -> Iterator[str]:
        return iter(self._spellings)

    def __repr__(self) -> str:
        return f"ReservedWordTable({', '.join(self._spellings)})"


RESERVED_WORDS = ReservedWordTable.default()
