# =============================================================================
# test_errors.py - Error Hierarchy Tests
# =============================================================================
# Tests for bsh.errors: the exception hierarchy, located error formatting,
# and the messages built from ILLEGAL tokens.
# =============================================================================

import pytest

from bsh.errors import (
    BshError,
    ContractError,
    IllegalTokenError,
    InvalidPositionError,
    LexicalError,
    SourceLocation,
    TokenAttributeError,
)
from bsh.scanner import Position, Token, TokenType


# =============================================================================
# Hierarchy
# =============================================================================

class TestHierarchy:
    """Every front-end error is a BshError."""

    @pytest.mark.parametrize("cls", [
        ContractError, InvalidPositionError, TokenAttributeError,
        LexicalError, IllegalTokenError,
    ])
    def test_subclasses_bsh_error(self, cls):
        assert issubclass(cls, BshError)

    def test_contract_errors_are_value_errors(self):
        assert issubclass(InvalidPositionError, ValueError)
        assert issubclass(TokenAttributeError, ValueError)
        assert not issubclass(LexicalError, ValueError)

    def test_position_raises_contract_error(self):
        with pytest.raises(ContractError):
            Position(0, 1)

    def test_token_raises_contract_error(self):
        with pytest.raises(ContractError):
            Token(TokenType.IDENTIFIER, Position(1, 1))

    def test_invalid_position_keeps_coordinates(self):
        error = InvalidPositionError(0, -3)
        assert error.line == 0
        assert error.column == -3
        assert "0:-3" in str(error)


# =============================================================================
# Source Locations
# =============================================================================

class TestSourceLocation:

    def test_str(self):
        assert str(SourceLocation("demo.bsh", 3, 14)) == "demo.bsh:3:14"

    def test_frozen(self):
        location = SourceLocation("demo.bsh", 1, 1)
        with pytest.raises(AttributeError):
            location.line = 2


# =============================================================================
# Lexical Error Formatting
# =============================================================================

class TestLexicalErrorFormat:
    """Messages read 'file:line:col: error: ...' with optional context."""

    def test_message_only(self):
        assert str(LexicalError("bad input")) == "error: bad input"

    def test_with_location(self):
        error = LexicalError("bad input", SourceLocation("a.bsh", 2, 7))
        assert str(error) == "a.bsh:2:7: error: bad input"

    def test_with_source_line_and_caret(self):
        error = LexicalError(
            "bad input",
            SourceLocation("a.bsh", 1, 5),
            source_line="var @x",
        )
        assert str(error) == (
            "a.bsh:1:5: error: bad input\n"
            "    var @x\n"
            "        ^"
        )

    def test_source_line_without_location_is_ignored(self):
        error = LexicalError("bad input", source_line="var @x")
        assert str(error) == "error: bad input"

    def test_with_hint(self):
        error = LexicalError("bad input", hint="try again")
        assert str(error) == "error: bad input\nhint: try again"

    def test_fields_are_kept(self):
        location = SourceLocation("a.bsh", 1, 1)
        error = LexicalError("bad", location, "fix it", "line")
        assert error.message == "bad"
        assert error.location is location
        assert error.hint == "fix it"
        assert error.source_line == "line"


# =============================================================================
# Illegal Token Errors
# =============================================================================

class TestIllegalTokenError:
    """Messages and hints derived from the ILLEGAL token text."""

    def test_illegal_character(self):
        error = IllegalTokenError("@", SourceLocation("demo.bsh", 2, 5), "var @x")
        assert error.text == "@"
        assert error.hint is None
        assert str(error) == (
            "demo.bsh:2:5: error: illegal character '@'\n"
            "    var @x\n"
            "        ^"
        )

    @pytest.mark.parametrize("text,fragment", [
        ("0x", "hexadecimal digit"),
        ("0X", "hexadecimal digit"),
        ("0b", "binary digit"),
        ("0B", "binary digit"),
        ("1e", "exponent"),
        ("2.5E-", "exponent"),
        ("7e+", "exponent"),
    ])
    def test_malformed_numbers(self, text, fragment):
        error = IllegalTokenError(text)
        assert error.message == f"malformed numeric literal '{text}'"
        assert fragment in error.hint
        assert str(error).endswith(f"hint: {error.hint}")

    def test_non_ascii_character_message(self):
        error = IllegalTokenError("٣")
        assert error.message == "illegal character '٣'"
        assert error.hint is None

    def test_catchable_as_lexical_error(self):
        with pytest.raises(LexicalError, match="illegal character"):
            raise IllegalTokenError("#", SourceLocation("x.bsh", 1, 1))
