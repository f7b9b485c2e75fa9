"""
Rox Scanner (Tokenizer)
=======================

This module implements the scanner for the Rox language. It converts
source text into a list of tokens for a parser, in a single forward
pass with at most two characters of lookahead.

Scanning Rules
--------------
- Punctuation: ( ) { } , . - + ; * / emit immediately
- Operators: ! = < > followed by '=' form != == <= >=
- Comments: // runs to the end of the line, no block comments
- Whitespace: space, \\r and \\t are skipped, \\n also advances the line
- Strings: "double quoted", may span lines, no escape sequences
- Numbers: 123 or 12.5, a trailing '.' is not part of the number
- Identifiers: letter or '_' followed by letters, digits or '_'

Error Handling
--------------
The scanner never raises on malformed input. Unexpected characters
and unterminated strings are recorded as LexError values and scanning
carries on, so a single pass reports every lexical error in the source.

Example Usage
-------------
>>> from rox.scanner import scan
>>> tokens, errors = scan("var x = 10.5;")
>>> for token in tokens:
...     print(token)
VAR var None
IDENTIFIER x None
EQUAL = None
NUMBER 10.5 10.5
SEMICOLON ; None
EOF  None
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from rox.diagnostics import (
    LexError,
    invalid_number,
    unexpected_character,
    unterminated_string,
)
from rox.errors import InternalScannerError, ScanFailedError
from rox.tokens import KEYWORDS, Literal, Token, TokenKind

logger = logging.getLogger(__name__)


# =============================================================================
# Dispatch Tables
# =============================================================================

SINGLE_CHAR_TOKENS = {
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    "-": TokenKind.MINUS,
    "+": TokenKind.PLUS,
    ";": TokenKind.SEMICOLON,
    "*": TokenKind.STAR,
}

# Operators that become a two-character token when followed by '='
EQUAL_SUFFIX_TOKENS = {
    "!": (TokenKind.BANG, TokenKind.BANG_EQUAL),
    "=": (TokenKind.EQUAL, TokenKind.EQUAL_EQUAL),
    "<": (TokenKind.LESS, TokenKind.LESS_EQUAL),
    ">": (TokenKind.GREATER, TokenKind.GREATER_EQUAL),
}

WHITESPACE = " \r\t"


def parse_number(text: str) -> float:
    """Convert a number lexeme to its 64-bit float value."""
    return float(text)


# =============================================================================
# Scan Result
# =============================================================================

@dataclass
class ScanResult:
    """
    Tokens and diagnostics produced by one scan.

    Unpacks as a pair, so both of these work:

        result = scan(source)
        tokens, errors = scan(source)

    Attributes:
        tokens: Tokens in source order, always ending with one EOF token
        errors: Diagnostics in the order they were found
        filename: Name of the scanned source, used in detailed reports
    """
    tokens: List[Token] = field(default_factory=list)
    errors: List[LexError] = field(default_factory=list)
    filename: str = "<input>"

    def __iter__(self) -> Iterator:
        return iter((self.tokens, self.errors))

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def had_error(self) -> bool:
        return bool(self.errors)

    @property
    def had_internal_error(self) -> bool:
        return any(error.is_internal for error in self.errors)

    def raise_for_errors(self, filename: Optional[str] = None) -> None:
        """
        Raise if the scan produced any diagnostics.

        Raises:
            InternalScannerError: If any diagnostic is an internal one
            ScanFailedError: If the scan produced user-level diagnostics
        """
        if not self.errors:
            return
        name = filename or self.filename
        if self.had_internal_error:
            raise InternalScannerError(self.errors, name)
        raise ScanFailedError(self.errors, name)


# =============================================================================
# Scanner Implementation
# =============================================================================

class Scanner:
    """
    Tokenizes Rox source code.

    A Scanner is built for one source string, scans it once, and is
    then discarded. Calling scan_tokens() again returns the same result
    without rescanning.

    Usage:
        scanner = Scanner(source_text, filename)
        tokens, errors = scanner.scan_tokens()

    Attributes:
        source: The source code being tokenized
        filename: Name of the source (for error reporting)
    """

    def __init__(self, source: str, filename: str = "<input>"):
        self.source = source
        self.filename = filename

        self._tokens: List[Token] = []
        self._errors: List[LexError] = []
        self._result: Optional[ScanResult] = None

        # 0 <= _start <= _current <= len(source) between tokens
        self._start = 0
        self._current = 0
        self._line = 1

        # Position of the lexeme being scanned, for token locations
        self._start_line = 1
        self._start_column = 1

        # Offset of the first character of the current line
        self._line_start_pos = 0

    def scan_tokens(self) -> ScanResult:
        """
        Scan the whole source.

        Returns:
            ScanResult with the tokens (ending in EOF) and diagnostics
        """
        if self._result is not None:
            return self._result

        while not self._at_end():
            self._start = self._current
            self._start_line = self._line
            self._start_column = self._column()
            self._scan_token()

        self._tokens.append(
            Token(TokenKind.EOF, "", None, self._line, self._column())
        )
        logger.debug(
            f"Scanned {self.filename}: {len(self._tokens)} tokens, "
            f"{len(self._errors)} errors"
        )

        self._result = ScanResult(self._tokens, self._errors, self.filename)
        return self._result

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self._current >= len(self.source)

    def _peek(self, offset: int = 0) -> str:
        """
        Look at character at current position + offset without advancing.

        Returns empty string if past end of source.
        """
        pos = self._current + offset
        if pos >= len(self.source):
            return ""
        return self.source[pos]

    def _advance(self) -> str:
        """Consume and return the current character."""
        char = self.source[self._current]
        self._current += 1
        return char

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it equals expected."""
        if self._at_end() or self.source[self._current] != expected:
            return False
        self._current += 1
        return True

    def _newline(self) -> None:
        """Record that a '\\n' was just consumed."""
        self._line += 1
        self._line_start_pos = self._current

    def _column(self) -> int:
        return self._current - self._line_start_pos + 1

    # =========================================================================
    # Character Classes
    # =========================================================================

    @staticmethod
    def _is_digit(char: str) -> bool:
        # ASCII only; str.isdigit() also accepts superscripts
        return "0" <= char <= "9"

    @staticmethod
    def _is_alpha(char: str) -> bool:
        return char == "_" or char.isalpha()

    def _is_alpha_numeric(self, char: str) -> bool:
        return self._is_alpha(char) or self._is_digit(char)

    # =========================================================================
    # Token Creation
    # =========================================================================

    def _add_token(self, kind: TokenKind, literal: Literal = None) -> None:
        lexeme = self.source[self._start:self._current]
        self._tokens.append(
            Token(kind, lexeme, literal, self._start_line, self._start_column)
        )

    def _report(self, error: LexError) -> None:
        self._errors.append(error)
        logger.debug(f"{self.filename}: {error}")

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_token(self) -> None:
        """Scan one lexeme starting at _start."""
        char = self._advance()

        if char in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[char])
            return

        if char in EQUAL_SUFFIX_TOKENS:
            single, double = EQUAL_SUFFIX_TOKENS[char]
            self._add_token(double if self._match("=") else single)
            return

        if char == "/":
            if self._match("/"):
                # Comment runs up to, not including, the newline
                while not self._at_end() and self._peek() != "\n":
                    self._advance()
            else:
                self._add_token(TokenKind.SLASH)
            return

        if char in WHITESPACE:
            return

        if char == "\n":
            self._newline()
            return

        if char == '"':
            self._scan_string()
            return

        if self._is_digit(char):
            self._scan_number()
            return

        if self._is_alpha(char):
            self._scan_identifier()
            return

        self._report(unexpected_character(
            char,
            self._start_line,
            self._start_column,
            self._get_current_line(),
        ))

    def _scan_string(self) -> None:
        """
        Scan a double-quoted string literal.

        Strings may span lines. The literal value is the text between
        the quotes, unchanged.
        """
        while not self._at_end() and self._peek() != '"':
            if self._advance() == "\n":
                self._newline()

        if self._at_end():
            # Reported where scanning stopped, not where the string opened
            self._report(unterminated_string(
                self._line,
                self._column(),
                self._get_current_line(),
            ))
            return

        self._advance()  # consume closing "
        value = self.source[self._start + 1:self._current - 1]
        self._add_token(TokenKind.STRING, value)

    def _scan_number(self) -> None:
        """
        Scan a decimal number literal.

        A '.' belongs to the number only when a digit follows it, so
        "1." scans as NUMBER then DOT.
        """
        while self._is_digit(self._peek()):
            self._advance()

        if self._peek() == "." and self._is_digit(self._peek(1)):
            self._advance()  # consume .
            while self._is_digit(self._peek()):
                self._advance()

        text = self.source[self._start:self._current]
        try:
            value = parse_number(text)
        except ValueError:
            self._report(invalid_number(
                text,
                self._start_line,
                self._start_column,
                self._get_current_line(),
            ))
            return

        self._add_token(TokenKind.NUMBER, value)

    def _scan_identifier(self) -> None:
        """Scan an identifier, then classify it against KEYWORDS."""
        while self._is_alpha_numeric(self._peek()):
            self._advance()

        text = self.source[self._start:self._current]
        self._add_token(KEYWORDS.get(text, TokenKind.IDENTIFIER))

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def _get_current_line(self) -> str:
        """Get the current line of source text for error reporting."""
        line_end = self.source.find("\n", self._line_start_pos)
        if line_end == -1:
            line_end = len(self.source)
        return self.source[self._line_start_pos:line_end]


def scan(source: str, filename: str = "<input>") -> ScanResult:
    """
    Scan source text with a fresh Scanner.

    Args:
        source: Complete source text
        filename: Name used in diagnostics

    Returns:
        ScanResult with the tokens and diagnostics
    """
    return Scanner(source, filename).scan_tokens()
