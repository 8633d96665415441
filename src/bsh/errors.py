"""
bsh Error Hierarchy
===================

This module defines the exception hierarchy for the bsh front end.
All exceptions inherit from BshError, allowing callers to catch every
front-end error with a single except clause if desired.

Exception Hierarchy
-------------------
BshError (base)
├── ContractError (also a ValueError) - programmer error at construction
│   ├── InvalidPositionError - line/column below 1
│   └── TokenAttributeError - attribute does not fit the token type
└── LexicalError - a problem in the source text, with location
    └── IllegalTokenError - built from an ILLEGAL token (strict mode)

Two Tiers
---------
The scanner itself never raises for malformed source. Malformed input
becomes an ILLEGAL token and the caller decides what to do with it.
LexicalError exists for callers (such as the bshlex tool) that want to
turn an ILLEGAL token into a hard failure.

I/O failures on the underlying stream are not wrapped: the OSError raised
by the stream reaches the caller of scan() unchanged.

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
import string
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class BshError(Exception):
    """
    Base exception for all bsh errors.

        try:
            run(path)
        except BshError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Contract Violations
# =============================================================================

class ContractError(BshError, ValueError):
    """
    A value was constructed in violation of its invariants.

    These indicate a bug in the calling code, not a problem with the
    source text being scanned. They are raised immediately and are not
    meant to be caught and retried.
    """
    pass


class InvalidPositionError(ContractError):
    """Position coordinates must be integers >= 1."""

    def __init__(self, line: object, column: object):
        self.line = line
        self.column = column
        super().__init__(
            f"invalid position {line!r}:{column!r} (line and column must be >= 1)"
        )


class TokenAttributeError(ContractError):
    """
    Token attribute does not match its type.

    Types with a predefined spelling (reserved words, symbols, EOF) must
    not be given an explicit attribute; every other type requires one.
    """
    pass


# =============================================================================
# Source Diagnostics
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A position in a named source, for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


class LexicalError(BshError):
    """
    A lexical problem in the source text.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The actual source text at the error location (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            demo.bsh:2:5: error: illegal character '@'
                var @x
                    ^
            hint: identifiers start with a letter, '_' or '$'
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            padding = " " * (4 + self.location.column - 1)
            parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class IllegalTokenError(LexicalError):
    """
    Raised by strict consumers when the scanner produced an ILLEGAL token.

    The message depends on what the scanner delimited: a single
    unrecognized character, or a numeric literal that stopped short
    (a bare "0x", "0b" or an exponent without digits).
    """

    def __init__(
        self,
        text: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.text = text

        if text[:1] and text[0] in string.digits:
            message = f"malformed numeric literal '{text}'"
            hint = _numeric_hint(text)
        else:
            message = f"illegal character {text!r}"
            hint = None

        super().__init__(message, location=location, hint=hint, source_line=source_line)


def _numeric_hint(text: str) -> Optional[str]:
    lowered = text.lower()
    if lowered == "0x":
        return "'0x' must be followed by at least one hexadecimal digit"
    if lowered == "0b":
        return "'0b' must be followed by at least one binary digit (0 or 1)"
    if "e" in lowered:
        return "an exponent needs at least one digit, e.g. 1e10 or 2.5E-3"
    return None
