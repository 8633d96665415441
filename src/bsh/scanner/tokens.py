"""
Token Definitions
=================

This module defines the closed token vocabulary of the bsh language and
the immutable Token value produced by the scanner.

Token Categories
----------------
Every TokenType falls into one of two attribute states:

- **Predefined**: symbols, operators, reserved words and EOF. The type
  itself carries the canonical spelling (``TokenType.VAR.predefined_attr``
  is ``"var"``), and tokens of these types never carry an explicit
  attribute.
- **Free**: IDENTIFIER, STRING, CHAR, LONG, INTEGER, FLOAT, DOUBLE and
  ILLEGAL. Every token of these types carries the exact lexeme.

Declaration Order
-----------------
The order of members is significant. When modifying TokenType, keep:

- reserved words contiguous from VAR to END
- numeric literals contiguous from LONG to DOUBLE

so that ``is_reserved_word()`` and ``is_number()`` stay single range
checks. Predefined attributes that are messages rather than spellings
(EOF, NEWLINE) are kept in lower case.

Example
-------
>>> Token.at(TokenType.IDENTIFIER, 1, 9, "a")
Token(IDENTIFIER=a, @1:9)
>>> Token.at(TokenType.VAR, 4, 5).attr
'var'
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from bsh.errors import TokenAttributeError
from bsh.scanner.position import Position


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """
    All token types of the bsh language.

    Members declared with a string carry that string as their predefined
    attribute. Members declared with ``()`` carry none and require an
    explicit attribute on every token.
    """

    def __new__(cls, attr: Optional[str] = None):
        # Values are declaration ordinals, used by the range predicates
        obj = object.__new__(cls)
        obj._value_ = len(cls.__members__) + 1
        obj._predefined = attr
        return obj

    # === End of input ===
    EOF = "end of input"

    # === Symbols ===
    COLON = ":"
    NEWLINE = "new line"

    # === Identifier ===
    IDENTIFIER = ()

    # === Literals ===
    STRING = ()
    CHAR = ()
    LONG = ()
    INTEGER = ()
    FLOAT = ()
    DOUBLE = ()

    # === Operators ===
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    IADD = "+="
    ISUB = "-="
    IMUL = "*="
    IDIV = "/="
    ASS = "="
    EQL = "=="
    NEQ = "!="
    LT = "<"
    LTE = "<="
    GT = ">"
    GTE = ">="
    BNOT = "~"
    BAND = "&"
    BOR = "|"
    LAND = "and"
    LOR = "or"
    LNOT = "not"

    # === Reserved words ===
    VAR = "var"
    IF = "if"
    ELSEIF = "elseif"
    ELSE = "else"
    WHILE = "while"
    TRUE = "true"
    FALSE = "false"
    NULL = "null"
    END = "end"

    # === Illegal ===
    ILLEGAL = ()

    def has_predefined_attr(self) -> bool:
        """Return True if this type carries its own spelling."""
        return self._predefined is not None

    @property
    def predefined_attr(self) -> str:
        """
        The predefined attribute of this type.

        Raises:
            TokenAttributeError: If the type has no predefined attribute;
                check has_predefined_attr() first
        """
        if self._predefined is None:
            raise TokenAttributeError(f"{self.name} has no predefined attribute")
        return self._predefined

    def is_reserved_word(self) -> bool:
        """Return True for VAR through END."""
        return TokenType.VAR.value <= self.value <= TokenType.END.value

    def is_number(self) -> bool:
        """Return True for LONG through DOUBLE."""
        return TokenType.LONG.value <= self.value <= TokenType.DOUBLE.value


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token produced by the scanner.

    Tokens of predefined-attribute types store no attribute and compare
    equal whenever type and position match. Tokens of free-attribute types
    also compare their attribute text.

    Attributes:
        type: The TokenType classification
        position: Where the first character of the lexeme was read
        attribute: The lexeme, for free-attribute types only

    Raises:
        TokenAttributeError: If an attribute is given for a predefined type,
            or missing for a free type
    """
    type: TokenType
    position: Position
    attribute: Optional[str] = None

    def __post_init__(self) -> None:
        if self.type.has_predefined_attr():
            if self.attribute is not None:
                raise TokenAttributeError(
                    f"{self.type.name} tokens take no attribute, got {self.attribute!r}"
                )
        elif not isinstance(self.attribute, str):
            raise TokenAttributeError(f"{self.type.name} tokens require a string attribute")

    @classmethod
    def at(
        cls,
        token_type: TokenType,
        line: int,
        column: int,
        attribute: Optional[str] = None,
    ) -> "Token":
        """Build a token from raw coordinates."""
        return cls(token_type, Position(line, column), attribute)

    @property
    def attr(self) -> str:
        """The lexeme, or the type's predefined spelling."""
        if self.type.has_predefined_attr():
            return self.type.predefined_attr
        return self.attribute

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column

    def is_type(self, token_type: TokenType) -> bool:
        return self.type is token_type

    def is_end_of_input(self) -> bool:
        return self.type is TokenType.EOF

    def is_number(self) -> bool:
        return self.type.is_number()

    def is_reserved_word(self) -> bool:
        return self.type.is_reserved_word()

    def is_illegal(self) -> bool:
        return self.type is TokenType.ILLEGAL

    def __repr__(self) -> str:
        """Format as Token(var, @1:1) or Token(IDENTIFIER=a, @1:1)."""
        if self.type.has_predefined_attr():
            return f"Token({self.type.predefined_attr}, @{self.position})"
        return f"Token({self.type.name}={self.attribute}, @{self.position})"
