"""
Unified CLI Error Handling
==========================

Provides consistent error handling and exit codes for the rox command.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click


class ExitCode(IntEnum):
    """Standard exit codes for the rox command."""
    SUCCESS = 0
    INVALID_ARGS = 2     # Invalid arguments or missing files
    LEX_ERROR = 64       # Source contained lexical errors
    INTERNAL_ERROR = 70  # Scanner invariant violated or unexpected failure


def handle_cli_exception(
    error: Exception,
    verbose: bool = False,
    detailed: bool = False,
) -> NoReturn:
    """
    Unified exception handler for the rox command.

    Formats the error message appropriately, optionally prints traceback
    in verbose mode, and exits with the correct exit code.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors
        detailed: If True, report scan failures with file locations

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    from rox.errors import InternalScannerError, RoxError, ScanFailedError

    if isinstance(error, ScanFailedError):
        # Check the subclass before the general scan failure
        click.echo(error.detailed() if detailed else str(error), err=True)
        if isinstance(error, InternalScannerError):
            sys.exit(ExitCode.INTERNAL_ERROR)
        sys.exit(ExitCode.LEX_ERROR)

    elif isinstance(error, RoxError):
        click.echo(str(error), err=True)
        sys.exit(ExitCode.LEX_ERROR)

    elif isinstance(error, (FileNotFoundError, PermissionError, UnicodeDecodeError)):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
