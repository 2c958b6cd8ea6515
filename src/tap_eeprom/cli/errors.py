"""
Unified CLI Error Handling
==========================

Provides consistent error handling and exit codes for the CLI tools.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click


class ExitCode(IntEnum):
    """Standard exit codes for CLI tools."""
    SUCCESS = 0
    DECODE_ERROR = 1     # Bad image or undecodable field
    INVALID_ARGS = 2     # Invalid arguments or unreadable files
    INTERNAL_ERROR = 3   # Unexpected internal error


def handle_cli_exception(
    error: Exception,
    verbose: bool = False,
    error_type: str | None = None
) -> NoReturn:
    """
    Unified exception handler for the CLI tools.

    Formats the error message, optionally prints a traceback in verbose
    mode, and exits with the matching exit code.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors
        error_type: Optional prefix for the error message (e.g., "Decode")

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    from tap_eeprom.errors import SubstitutionSpecError, TapEepromError

    if isinstance(error, SubstitutionSpecError):
        click.echo(f"ERROR: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    elif isinstance(error, TapEepromError):
        prefix = f"{error_type} error: " if error_type else "ERROR: "
        click.echo(f"{prefix}{error}", err=True)
        sys.exit(ExitCode.DECODE_ERROR)

    elif isinstance(error, click.BadParameter):
        click.echo(f"ERROR: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    elif isinstance(error, OSError):
        # Missing file, permission denied, directory given as file, ...
        click.echo(f"ERROR: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
