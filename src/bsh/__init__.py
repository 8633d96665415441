"""
bsh - Lexical Front End for the bsh Scripting Language
======================================================

This package provides the scanner that turns bsh source text into tokens
for a parser, together with a small command-line tool for inspecting the
token stream.

Main Components
---------------
- **scanner**: Position, Token, TokenType and the Scanner itself
- **errors**: the BshError exception hierarchy
- **config**: ScannerConfig, settings for the command-line tool
- **cli**: the ``bshlex`` token dump tool

Quick Start
-----------
Scan a string:
    >>> from bsh import Scanner
    >>> scanner = Scanner.from_string("var count")
    >>> scanner.scan()
    Token(var, @1:1)

Scan a file (the caller owns the file):
    >>> with open("demo.bsh", encoding="utf-8", newline="") as f:
    ...     for token in iter_tokens(Scanner(f)):
    ...         print(token)

Or from the command line:
    $ bshlex demo.bsh
"""

__version__ = "0.1.0"

# =============================================================================
# Public API Exports
# =============================================================================

from bsh.scanner import (
    Position,
    Token,
    TokenType,
    RESERVED_WORDS,
    ReservedWordTable,
    Scanner,
    iter_tokens,
    tokenize,
)
from bsh.errors import (
    BshError,
    ContractError,
    InvalidPositionError,
    TokenAttributeError,
    LexicalError,
    IllegalTokenError,
    SourceLocation,
)
from bsh.config import ScannerConfig

__all__ = [
    # Version info
    "__version__",
    # Scanner
    "Position",
    "Token",
    "TokenType",
    "RESERVED_WORDS",
    "ReservedWordTable",
    "Scanner",
    "iter_tokens",
    "tokenize",
    # Exception hierarchy
    "BshError",
    "ContractError",
    "InvalidPositionError",
    "TokenAttributeError",
    "LexicalError",
    "IllegalTokenError",
    "SourceLocation",
    # Configuration
    "ScannerConfig",
]
