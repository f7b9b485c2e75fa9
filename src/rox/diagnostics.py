"""
Lexical diagnostics.

The scanner reports problems as LexError values instead of raising, so
one pass over a file surfaces every lexical error it contains. Each
diagnostic renders as "[line N] Error: message".
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Optional

from rox.errors import RoxSyntaxError, SourceLocation


class LexErrorKind(Enum):
    """Categories of lexical diagnostics."""

    UNEXPECTED_CHARACTER = auto()   # character matches no token rule
    UNTERMINATED_STRING = auto()    # end of input before closing quote
    INVALID_NUMBER = auto()         # number lexeme failed float conversion


HINTS = {
    LexErrorKind.UNTERMINATED_STRING: "add closing '\"' to complete the string",
}


@dataclass(frozen=True)
class LexError:
    """
    A non-fatal lexical error.

    Attributes:
        kind: The LexErrorKind category
        message: Human-readable description
        line: Line where the problem was detected (1-indexed)
        column: Column where the problem was detected (1-indexed)
        lexeme: Offending source text, when there is any
        source_line: Text of the line at `line`, for detailed rendering
    """
    kind: LexErrorKind
    message: str
    line: int
    column: int = 0
    lexeme: str = ""
    source_line: Optional[str] = None

    def __str__(self) -> str:
        return f"[line {self.line}] Error: {self.message}"

    @property
    def is_internal(self) -> bool:
        """True when the diagnostic signals a scanner defect, not bad input."""
        return self.kind is LexErrorKind.INVALID_NUMBER

    def to_exception(self, filename: str = "<input>") -> RoxSyntaxError:
        """Convert to a RoxSyntaxError with a file location and caret."""
        return RoxSyntaxError(
            self.message,
            SourceLocation(filename, self.line, self.column),
            hint=HINTS.get(self.kind),
            source_line=self.source_line,
        )


def unexpected_character(char: str, line: int, column: int,
                         source_line: Optional[str] = None) -> LexError:
    return LexError(
        LexErrorKind.UNEXPECTED_CHARACTER,
        "Unexpected character.",
        line,
        column,
        lexeme=char,
        source_line=source_line,
    )


def unterminated_string(line: int, column: int,
                        source_line: Optional[str] = None) -> LexError:
    return LexError(
        LexErrorKind.UNTERMINATED_STRING,
        "Unterminated string.",
        line,
        column,
        source_line=source_line,
    )


def invalid_number(text: str, line: int, column: int,
                   source_line: Optional[str] = None) -> LexError:
    return LexError(
        LexErrorKind.INVALID_NUMBER,
        f"Invalid number literal '{text}'.",
        line,
        column,
        lexeme=text,
        source_line=source_line,
    )


def format_report(errors: Iterable[LexError]) -> str:
    """Join diagnostics into a report, one per line."""
    return "\n".join(str(error) for error in errors)
