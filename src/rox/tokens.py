"""
Rox Token Model
===============

Token kinds and the immutable token record produced by the scanner.

Token Categories
----------------
- Single-character punctuation: ( ) { } , . - + ; / *
- One or two character operators: ! != = == < <= > >=
- Literals: identifiers, strings, numbers
- Reserved words: and class else false fun for if nil or print
  return super this true var while
- EOF: always the last token of a scan

Example Usage
-------------
>>> from rox.tokens import Token, TokenKind
>>> token = Token(TokenKind.NUMBER, "10.5", 10.5, 1)
>>> print(token)
NUMBER 10.5 10.5
"""

from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType
from typing import Mapping, Optional, Union


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """
    Token kinds for the Rox language.

    The set is closed: every lexeme the scanner accepts maps to exactly
    one of these members.
    """

    # === Single-character tokens ===
    LEFT_PAREN = auto()     # (
    RIGHT_PAREN = auto()    # )
    LEFT_BRACE = auto()     # {
    RIGHT_BRACE = auto()    # }
    COMMA = auto()          # ,
    DOT = auto()            # .
    MINUS = auto()          # -
    PLUS = auto()           # +
    SEMICOLON = auto()      # ;
    SLASH = auto()          # /
    STAR = auto()           # *

    # === One or two character tokens ===
    BANG = auto()           # !
    BANG_EQUAL = auto()     # !=
    EQUAL = auto()          # =
    EQUAL_EQUAL = auto()    # ==
    GREATER = auto()        # >
    GREATER_EQUAL = auto()  # >=
    LESS = auto()           # <
    LESS_EQUAL = auto()     # <=

    # === Literals ===
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # === Keywords ===
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # === Structural ===
    EOF = auto()            # End of input


# =============================================================================
# Keyword Mapping
# =============================================================================

# Read-only and shared by every Scanner instance
KEYWORDS: Mapping[str, TokenKind] = MappingProxyType({
    "and": TokenKind.AND,
    "class": TokenKind.CLASS,
    "else": TokenKind.ELSE,
    "false": TokenKind.FALSE,
    "fun": TokenKind.FUN,
    "for": TokenKind.FOR,
    "if": TokenKind.IF,
    "nil": TokenKind.NIL,
    "or": TokenKind.OR,
    "print": TokenKind.PRINT,
    "return": TokenKind.RETURN,
    "super": TokenKind.SUPER,
    "this": TokenKind.THIS,
    "true": TokenKind.TRUE,
    "var": TokenKind.VAR,
    "while": TokenKind.WHILE,
})

KEYWORD_KINDS = frozenset(KEYWORDS.values())

LITERAL_KINDS = frozenset({TokenKind.STRING, TokenKind.NUMBER})


# =============================================================================
# Token Data Class
# =============================================================================

Literal = Union[str, float, None]


@dataclass(frozen=True)
class Token:
    """
    A single token from Rox source code.

    Tokens hold copies of their source text and no reference back to
    the scanner that produced them.

    Attributes:
        kind: The TokenKind classification
        lexeme: Exact source text of the token ("" for EOF)
        literal: Decoded value for STRING (str) and NUMBER (float) tokens
        line: Line where the token starts (1-indexed)
        column: Column where the token starts (1-indexed, 0 when unknown)
    """
    kind: TokenKind
    lexeme: str
    literal: Literal
    line: int
    column: int = 0

    def __str__(self) -> str:
        """Render as 'KIND lexeme literal'."""
        return f"{self.kind.name} {self.lexeme} {self.literal}"

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.literal is not None:
            return f"Token({self.kind.name}, {self.literal!r}, {self.line}:{self.column})"
        if self.lexeme:
            return f"Token({self.kind.name}, {self.lexeme!r}, {self.line}:{self.column})"
        return f"Token({self.kind.name}, {self.line}:{self.column})"

    def is_keyword(self) -> bool:
        """Return True if this token is a reserved word."""
        return self.kind in KEYWORD_KINDS

    def is_literal(self) -> bool:
        """Return True if this token carries a decoded literal value."""
        return self.kind in LITERAL_KINDS


def keyword_kind(text: str) -> Optional[TokenKind]:
    """Return the reserved-word kind for text, or None for identifiers."""
    return KEYWORDS.get(text)
