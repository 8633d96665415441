"""
bsh Scanner
===========

The lexical front end of the bsh scripting language: it turns a character
stream into typed, position-tagged tokens for a parser.

Components
----------
- **position**: Position, an immutable 1-based (line, column) pair
- **tokens**: TokenType, the closed token vocabulary, and Token
- **reserved**: ReservedWordTable, binary-searched reserved spellings
- **cursor**: CharacterCursor, one character of lookahead with sticky EOF
- **numbers**: NumericLiteralScanner, INTEGER/LONG/FLOAT/DOUBLE literals
- **scanner**: Scanner, the pull-based ``scan()`` loop

Usage
-----
>>> from bsh.scanner import Scanner
>>> scanner = Scanner.from_string("while x")
>>> scanner.scan()
Token(while, @1:1)
"""

from bsh.scanner.position import Position
from bsh.scanner.tokens import Token, TokenType
from bsh.scanner.reserved import RESERVED_WORDS, ReservedWordTable
from bsh.scanner.cursor import EOS, CharacterCursor
from bsh.scanner.numbers import NumericLiteralScanner
from bsh.scanner.scanner import Scanner, iter_tokens, tokenize

__all__ = [
    "Position",
    "Token",
    "TokenType",
    "RESERVED_WORDS",
    "ReservedWordTable",
    "EOS",
    "CharacterCursor",
    "NumericLiteralScanner",
    "Scanner",
    "iter_tokens",
    "tokenize",
]
