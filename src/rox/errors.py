"""
Rox Error Hierarchy
===================

This module defines the exception hierarchy for the Rox toolchain.
All exceptions inherit from RoxError, allowing callers to catch all
Rox-related errors with a single except clause if desired.

Exception Hierarchy
-------------------
RoxError (base)
├── RoxSyntaxError - a single located lexical error
└── ScanFailedError - every diagnostic collected by one scan
    └── InternalScannerError - scan produced an internal-invariant diagnostic

The scanner itself never raises these for malformed input. It collects
LexError values (see rox.diagnostics) and returns them alongside the
tokens. The exceptions exist for callers that prefer to stop on failure,
such as the command-line driver.

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from rox.diagnostics import LexError


# =============================================================================
# Base Exception Class
# =============================================================================

class RoxError(Exception):
    """
    Base exception for all Rox errors.

    Catch this to handle any failure raised by the package:

        try:
            scan(source).raise_for_errors("script.rox")
        except RoxError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed, 0 when unknown)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Lexical Errors
# =============================================================================

class RoxSyntaxError(RoxError):
    """
    A single lexical error with source context.

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
            hello.rox:3:9: error: Unexpected character.
                var a @ 1;
                      ^
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class ScanFailedError(RoxError):
    """
    Aggregate error holding every diagnostic from one scan.

    The message is the short report, one "[line N] Error: ..." entry
    per diagnostic, in the order they were found.

    Attributes:
        errors: The LexError values that caused the failure
        filename: Name of the scanned source
    """

    def __init__(self, errors: Sequence["LexError"], filename: str = "<input>"):
        self.errors = list(errors)
        self.filename = filename
        super().__init__("\n".join(str(error) for error in self.errors))

    def detailed(self) -> str:
        """Return the report with file locations and caret pointers."""
        return "\n".join(
            str(error.to_exception(self.filename)) for error in self.errors
        )


class InternalScannerError(ScanFailedError):
    """
    A scan produced a diagnostic that user input alone cannot cause.

    Raised instead of ScanFailedError when a number lexeme matched the
    number grammar but could not be converted to a float.
    """
    pass
