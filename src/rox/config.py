"""
Rox Driver Configuration
========================

Settings for the command-line driver. Configuration can come from:
- Default values (defined here)
- Environment variables
- Command-line flags (applied by the CLI on top of the above)

Environment variables (all optional):
    ROX_VERBOSE: Enable debug logging ("1", "true", "yes", "on")
    ROX_PROMPT: Prompt string for interactive mode
    ROX_DETAILED_ERRORS: Report diagnostics with file location and caret
"""

from dataclasses import dataclass
import os

TRUTHY = ("1", "true", "yes", "on")
FALSY = ("0", "false", "no", "off", "")


def _env_flag(name: str) -> bool | None:
    """Read a boolean environment variable, None if unset or malformed."""
    value = os.environ.get(name)
    if value is None:
        return None
    value = value.strip().lower()
    if value in TRUTHY:
        return True
    if value in FALSY:
        return False
    return None


@dataclass
class RunConfig:
    """
    Configuration for running the scanner from the driver.

    Attributes:
        show_tokens: Print each token after scanning (default: True)
        verbose: Enable DEBUG logging (default: False)
        prompt: Prompt printed before each interactive line (default: "> ")
        detailed_errors: Print diagnostics as file:line:col with a caret
    """
    show_tokens: bool = True
    verbose: bool = False
    prompt: str = "> "
    detailed_errors: bool = False

    @classmethod
    def from_env(cls) -> "RunConfig":
        """
        Create RunConfig from environment variables.

        Malformed values are ignored and the default is kept.
        """
        config = cls()

        if (verbose := _env_flag("ROX_VERBOSE")) is not None:
            config.verbose = verbose

        if (detailed := _env_flag("ROX_DETAILED_ERRORS")) is not None:
            config.detailed_errors = detailed

        if (prompt := os.environ.get("ROX_PROMPT")) is not None:
            config.prompt = prompt

        return config
