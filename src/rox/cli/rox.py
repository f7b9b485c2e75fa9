"""
rox - Scanner Command-Line Interface
====================================

Runs the Rox scanner over a script file or over lines typed at an
interactive prompt, printing the tokens and any lexical errors.

Usage Examples
--------------
Scan a file:
    $ rox hello.rox

Interactive prompt (end with Ctrl-D):
    $ rox

Report errors only, with file locations:
    $ rox --no-tokens --detailed-errors hello.rox

Exit Codes
----------
0 on success, 64 when the script has lexical errors, 70 when the
scanner reports an internal error.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

import click

from rox import __version__
from rox.cli.errors import handle_cli_exception
from rox.config import RunConfig
from rox.diagnostics import LexError
from rox.scanner import ScanResult, scan

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


def report(errors: Iterable[LexError], filename: str, config: RunConfig) -> None:
    """Print diagnostics to stderr."""
    for error in errors:
        if config.detailed_errors:
            click.echo(str(error.to_exception(filename)), err=True)
        else:
            click.echo(str(error), err=True)


def run(source: str, filename: str, config: RunConfig) -> ScanResult:
    """Scan source and print its tokens."""
    result = scan(source, filename)
    if config.show_tokens:
        for token in result.tokens:
            click.echo(str(token))
    return result


def run_file(path: Path, config: RunConfig) -> ScanResult:
    """
    Scan a script file.

    Raises:
        ScanFailedError: If the script has lexical errors
    """
    logger.debug(f"Reading {path}")
    source = path.read_text(encoding="utf-8")
    result = run(source, str(path), config)
    result.raise_for_errors()
    return result


def run_prompt(config: RunConfig) -> None:
    """
    Scan lines typed at a prompt until end of input.

    Each line is scanned on its own, so errors on one line are reported
    and then forgotten.
    """
    stdin = click.get_text_stream("stdin")
    while True:
        click.echo(config.prompt, nl=False)
        line = stdin.readline()
        if not line:
            click.echo()
            break
        result = run(line, "<stdin>", config)
        report(result.errors, "<stdin>", config)


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "script",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--no-tokens",
    is_flag=True,
    help="Do not print tokens, only errors",
)
@click.option(
    "--detailed-errors",
    is_flag=True,
    help="Report errors as file:line:column with the source line",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="rox")
def main(
    script: Optional[Path],
    no_tokens: bool,
    detailed_errors: bool,
    verbose: bool,
) -> None:
    """
    Scan Rox source code and print its tokens.

    SCRIPT is the source file to scan. Without it, rox reads lines
    from an interactive prompt.

    \b
    Examples:
        rox hello.rox                # Print tokens, then errors
        rox --no-tokens hello.rox    # Errors only
        rox                          # Interactive prompt
    """
    config = RunConfig.from_env()
    if no_tokens:
        config.show_tokens = False
    if detailed_errors:
        config.detailed_errors = True
    if verbose:
        config.verbose = True

    setup_logging(config.verbose)

    if script is None:
        run_prompt(config)
        return

    try:
        run_file(script, config)
    except Exception as e:
        handle_cli_exception(
            e,
            verbose=config.verbose,
            detailed=config.detailed_errors,
        )


if __name__ == "__main__":
    main()
