"""
Character Cursor
================

One character of lookahead over a text stream, plus the line and column
counters used to stamp positions on tokens.

Column Bookkeeping
------------------
The first character is read when the cursor is created, without touching
the column. After that, every ``advance()`` moves the column forward by
one, including the advance that first runs into the end of the stream.
Once at the end, further advances leave the column alone. This "sticky"
end-of-stream makes repeated EOF tokens report the same position:

    source "ab":   a@1  b@2  <end>@3  <end>@3  ...

Line changes are driven by the scanner through ``newline()``, since only
the scanner knows whether "\\r\\n" is one line break or two.
"""

from typing import Protocol

from bsh.scanner.position import Position


# End-of-stream marker returned by peek() and advance()
EOS = ""


class CharacterSource(Protocol):
    """Anything with a text-mode read(), e.g. io.StringIO or an open file."""

    def read(self, size: int = -1) -> str: ...


class CharacterCursor:
    """
    Buffered single-character lookahead with position tracking.

    The cursor never closes the stream. Errors raised by ``stream.read``
    (typically OSError) propagate to the caller unchanged, from the
    constructor as well as from ``advance()``.

    Attributes:
        line: Current line number (1-indexed)
        column: Column of the lookahead character (1-indexed)
    """

    def __init__(self, stream: CharacterSource):
        self._stream = stream
        self.line = 1
        self.column = 1
        self._seen_eos = False

        # Prime the lookahead; this does not count as an advance
        self._current = stream.read(1)

    def peek(self) -> str:
        """Return the lookahead character, or EOS at the end of the stream."""
        return self._current

    def at_end(self) -> bool:
        return self._current == EOS

    def advance(self) -> str:
        """
        Consume the lookahead character and read the next one.

        Returns:
            The character that was consumed (EOS if already at the end)
        """
        consumed = self._current
        if consumed == EOS and self._seen_eos:
            return EOS

        self._current = self._stream.read(1)
        self.column += 1
        if self._current == EOS:
            self._seen_eos = True
        return consumed

    def newline(self) -> None:
        """Move to the start of the next line."""
        self.line += 1
        self.column = 1

    def position(self) -> Position:
        """Position of the lookahead character."""
        return Position(self.line, self.column)
