"""
Numeric Literal Scanning
========================

Delimits and classifies a numeric literal that starts with a decimal
digit. The scanner never converts the text to a number: the token
attribute is the exact source text, and numeric parsing and overflow
policy belong to the consumer.

Grammar
-------
Recognition is longest-match, left to right, in the order
prefix -> digits -> fraction/exponent -> suffix::

    Digits   : [0-9]+
    IntHex   : '0' [xX] [0-9a-fA-F]+
    IntBin   : '0' [bB] [01]+
    Integer  : Digits | IntHex | IntBin                  INTEGER
    Long     : Integer [lL]                              LONG
    Exponent : [eE] [+-]? Digits
    Real     : Digits '.' [0-9]* Exponent? | Digits Exponent
    Double   : Real [dD]? | Digits [dD]                  DOUBLE
    Float    : Real [fF] | Digits [fF]                   FLOAT

| Source   | Token            |
|----------|------------------|
| 0123     | INTEGER("0123")  |
| 0x1F     | INTEGER("0x1F")  |
| 0b101l   | LONG("0b101l")   |
| 3.       | DOUBLE("3.")     |
| 6.02E+23 | DOUBLE("6.02E+23") |
| 2.5f     | FLOAT("2.5f")    |

Malformed Literals
------------------
A prefix with no digit after it ("0x", "0b") or an exponent with no digit
after it ("1e", "1e+") produces an ILLEGAL token covering exactly the
characters scanned so far. Scanning stops there; whatever follows is left
for the next token.
"""

import logging
import string

from bsh.scanner.cursor import CharacterCursor
from bsh.scanner.position import Position
from bsh.scanner.tokens import Token, TokenType

logger = logging.getLogger(__name__)


DECIMAL_DIGITS = string.digits
HEX_DIGITS = string.hexdigits
BINARY_DIGITS = "01"

HEX_MARKERS = ("x", "X")
BINARY_MARKERS = ("b", "B")
LONG_SUFFIXES = ("l", "L")
FLOAT_SUFFIXES = ("f", "F")
DOUBLE_SUFFIXES = ("d", "D")
EXPONENT_MARKERS = ("e", "E")
EXPONENT_SIGNS = ("+", "-")


def is_decimal_digit(char: str) -> bool:
    """ASCII 0-9 only; other Unicode digits are not literal starts."""
    return bool(char) and char in DECIMAL_DIGITS


class NumericLiteralScanner:
    """
    Classifies a digit-led lexeme into INTEGER, LONG, FLOAT or DOUBLE.

    The instance holds no per-literal state; the cursor is passed in on
    every call so that all mutable scanning state stays with its owner.

    Usage:
        numbers = NumericLiteralScanner()
        token = numbers.scan(cursor, cursor.position())
    """

    def scan(self, cursor: CharacterCursor, position: Position) -> Token:
        """
        Scan one numeric literal.

        Args:
            cursor: Cursor whose lookahead is a decimal digit
            position: Position of that digit

        Returns:
            A numeric token, or ILLEGAL for a malformed prefix or exponent
        """
        text = [cursor.advance()]

        if text[0] == "0" and cursor.peek() in HEX_MARKERS:
            return self._scan_prefixed(cursor, position, text, HEX_DIGITS)
        if text[0] == "0" and cursor.peek() in BINARY_MARKERS:
            return self._scan_prefixed(cursor, position, text, BINARY_DIGITS)

        self._take_while(cursor, text, DECIMAL_DIGITS)

        if cursor.peek() in LONG_SUFFIXES:
            text.append(cursor.advance())
            return Token(TokenType.LONG, position, "".join(text))

        is_real = False

        if cursor.peek() == ".":
            text.append(cursor.advance())
            self._take_while(cursor, text, DECIMAL_DIGITS)
            is_real = True

        if cursor.peek() in EXPONENT_MARKERS:
            text.append(cursor.advance())
            if cursor.peek() in EXPONENT_SIGNS:
                text.append(cursor.advance())
            if not self._take_while(cursor, text, DECIMAL_DIGITS):
                return self._malformed(position, text, "exponent has no digits")
            is_real = True

        if cursor.peek() in FLOAT_SUFFIXES:
            text.append(cursor.advance())
            return Token(TokenType.FLOAT, position, "".join(text))

        if cursor.peek() in DOUBLE_SUFFIXES:
            text.append(cursor.advance())
            return Token(TokenType.DOUBLE, position, "".join(text))

        token_type = TokenType.DOUBLE if is_real else TokenType.INTEGER
        return Token(token_type, position, "".join(text))

    def _scan_prefixed(
        self,
        cursor: CharacterCursor,
        position: Position,
        text: list,
        digits: str,
    ) -> Token:
        """Scan the rest of a 0x/0b literal; the leading 0 is already in text."""
        text.append(cursor.advance())  # x/X or b/B

        if not self._take_while(cursor, text, digits):
            return self._malformed(position, text, f"no digits after '{''.join(text)}'")

        if cursor.peek() in LONG_SUFFIXES:
            text.append(cursor.advance())
            return Token(TokenType.LONG, position, "".join(text))

        return Token(TokenType.INTEGER, position, "".join(text))

    @staticmethod
    def _take_while(cursor: CharacterCursor, text: list, allowed: str) -> int:
        """Append characters from allowed to text; return how many were taken."""
        count = 0
        while cursor.peek() and cursor.peek() in allowed:
            text.append(cursor.advance())
            count += 1
        return count

    @staticmethod
    def _malformed(position: Position, text: list, reason: str) -> Token:
        lexeme = "".join(text)
        logger.debug(f"Malformed numeric literal {lexeme!r} at {position}: {reason}")
        return Token(TokenType.ILLEGAL, position, lexeme)
