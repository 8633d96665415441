"""
bsh Scanner
===========

The scanner converts a character stream into tokens, one token per call
to ``scan()``. Nothing is buffered beyond the current lexeme: the caller
pulls tokens as it needs them and stops whenever it likes.

Dispatch
--------
``scan()`` looks at the lookahead character and decides:

| Lookahead                       | Result                          |
|---------------------------------|---------------------------------|
| end of stream                   | EOF (same position every time)  |
| letter, '_' or '$'              | reserved word or IDENTIFIER     |
| '\\n', '\\r'                      | NEWLINE ('\\r\\n' is one newline) |
| other whitespace                | skipped                         |
| '0'-'9'                         | numeric literal                 |
| anything else                   | ILLEGAL, one character          |

Malformed input never raises; it comes back as an ILLEGAL token carrying
the offending text. Read errors on the stream propagate as OSError.

Example
-------
>>> scanner = Scanner.from_string("var x\\n")
>>> scanner.scan()
Token(var, @1:1)
>>> scanner.scan()
Token(IDENTIFIER=x, @1:5)
>>> scanner.scan()
Token(new line, @1:6)
>>> scanner.scan()
Token(end of input, @2:1)
"""

import io
import logging
from typing import Iterator, List

from bsh.scanner.cursor import CharacterCursor, CharacterSource
from bsh.scanner.numbers import NumericLiteralScanner, is_decimal_digit
from bsh.scanner.position import Position
from bsh.scanner.reserved import RESERVED_WORDS, ReservedWordTable
from bsh.scanner.tokens import Token, TokenType

logger = logging.getLogger(__name__)


NEWLINE_CHARS = ("\n", "\r")

# Characters accepted in identifiers besides what str.isidentifier() allows
EXTRA_IDENTIFIER_CHARS = ("$",)


def is_identifier_start(char: str) -> bool:
    """Unicode letters, letter numbers, '_' and '$'."""
    return bool(char) and (char.isidentifier() or char in EXTRA_IDENTIFIER_CHARS)


def is_identifier_part(char: str) -> bool:
    """Identifier starts plus digits, combining marks and connector punctuation."""
    return bool(char) and (("_" + char).isidentifier() or char in EXTRA_IDENTIFIER_CHARS)


# =============================================================================
# Scanner
# =============================================================================

class Scanner:
    """
    Scans the input for tokens and performs lexical analysis.

    A Scanner reads from a stream it does not own: the caller opens the
    stream before creating the scanner and closes it afterwards. Instances
    are not safe to share between threads.

    Usage:
        with open(path, encoding="utf-8", newline="") as f:
            scanner = Scanner(f)
            token = scanner.scan()
            while not token.is_end_of_input():
                ...
                token = scanner.scan()
    """

    def __init__(
        self,
        stream: CharacterSource,
        reserved: ReservedWordTable = RESERVED_WORDS,
    ):
        """
        Create a scanner over a text stream.

        Args:
            stream: Text stream to read from, one character at a time
            reserved: Reserved word table (the language's own by default)

        Raises:
            OSError: If reading the first character fails
        """
        self._cursor = CharacterCursor(stream)
        self._reserved = reserved
        self._numbers = NumericLiteralScanner()

    @classmethod
    def from_string(cls, source: str) -> "Scanner":
        """Create a scanner over an in-memory source string."""
        # newline="" keeps '\r' and '\r\n' exactly as written
        return cls(io.StringIO(source, newline=""))

    @property
    def position(self) -> Position:
        """Position of the next unconsumed character."""
        return self._cursor.position()

    def scan(self) -> Token:
        """
        Scan the source and return the next token.

        Once the end of the input is reached, every further call returns
        an EOF token at the same position.

        Raises:
            OSError: If reading the underlying stream fails
        """
        cursor = self._cursor

        while True:
            if cursor.at_end():
                return Token(TokenType.EOF, cursor.position())

            position = cursor.position()
            char = cursor.peek()

            # Identifiers first, they are the most common token
            if is_identifier_start(char):
                return self._scan_identifier_or_reserved(position)

            if char in NEWLINE_CHARS:
                return self._scan_newline(position)

            # '\n' and '\r' are already handled above
            if char.isspace():
                cursor.advance()
                continue

            if is_decimal_digit(char):
                return self._numbers.scan(cursor, position)

            cursor.advance()
            logger.debug(f"Illegal character {char!r} at {position}")
            return Token(TokenType.ILLEGAL, position, char)

    def _scan_identifier_or_reserved(self, position: Position) -> Token:
        cursor = self._cursor
        chars = [cursor.advance()]
        while is_identifier_part(cursor.peek()):
            chars.append(cursor.advance())

        text = "".join(chars)
        reserved_type = self._reserved.lookup(text)
        if reserved_type is not None:
            return Token(reserved_type, position)

        return Token(TokenType.IDENTIFIER, position, text)

    def _scan_newline(self, position: Position) -> Token:
        cursor = self._cursor
        prev = cursor.advance()
        if prev == "\r" and cursor.peek() == "\n":
            cursor.advance()

        cursor.newline()
        return Token(TokenType.NEWLINE, position)


# =============================================================================
# Convenience Functions
# =============================================================================

def iter_tokens(scanner: Scanner) -> Iterator[Token]:
    """
    Yield tokens from scanner up to and including the first EOF.

    Tokens are pulled lazily; stopping the iteration early leaves the
    scanner positioned after the last token yielded.
    """
    while True:
        token = scanner.scan()
        yield token
        if token.is_end_of_input():
            return


def tokenize(source: str) -> List[Token]:
    """
    Tokenize a source string, returning every token through EOF.

    Example:
        >>> [t.type.name for t in tokenize("if x")]
        ['IF', 'IDENTIFIER', 'EOF']
    """
    return list(iter_tokens(Scanner.from_string(source)))
