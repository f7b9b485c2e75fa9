"""
Rox - Scanner for a Small Dynamic Language
==========================================

This package turns Rox source text into a sequence of typed tokens for
a downstream parser, reporting lexical errors without stopping.

Main Components
---------------
- **tokens**: TokenKind, Token and the reserved-word table
- **scanner**: Scanner and the scan() convenience function
- **diagnostics**: LexError values returned alongside tokens
- **errors**: exception hierarchy for callers that prefer to raise
- **cli**: the `rox` command

Quick Start
-----------
    >>> from rox import scan
    >>> tokens, errors = scan("(1+2)")
    >>> [token.kind.name for token in tokens]
    ['LEFT_PAREN', 'NUMBER', 'PLUS', 'NUMBER', 'RIGHT_PAREN', 'EOF']

Or use the command-line tool:
    $ rox hello.rox
"""

__version__ = "0.1.0"

# =============================================================================
# Public API Exports
# =============================================================================

from rox.tokens import KEYWORDS, Token, TokenKind
from rox.scanner import Scanner, ScanResult, scan
from rox.diagnostics import LexError, LexErrorKind, format_report
from rox.errors import (
    RoxError,
    RoxSyntaxError,
    ScanFailedError,
    InternalScannerError,
    SourceLocation,
)

__all__ = [
    "__version__",
    # Tokens
    "KEYWORDS",
    "Token",
    "TokenKind",
    # Scanner
    "Scanner",
    "ScanResult",
    "scan",
    # Diagnostics
    "LexError",
    "LexErrorKind",
    "format_report",
    # Exception hierarchy
    "RoxError",
    "RoxSyntaxError",
    "ScanFailedError",
    "InternalScannerError",
    "SourceLocation",
]
