"""
tapdump - TAP EEPROM Report Command-Line Interface
==================================================

This module implements the command-line interface for the EEPROM decoder.
It reads a 256-byte TAP EEPROM image and prints the rankings, medals,
play status, seed and stored checksums it contains.

Usage Examples
--------------
Read the default image file ("eeprom" in the current directory):
    $ tapdump

Read a specific image:
    $ tapdump nvram/tap.eeprom

Show full names instead of three-letter ranking names:
    $ tapdump tap.eeprom "AAA:Alice" "BOB:Robert"

Machine-readable output:
    $ tapdump tap.eeprom --json

Environment
-----------
TAP_EEPROM_FILE          Image used when no file argument is given
TAP_EEPROM_SHOW_MEDALS   Set to 0/false/no/off to hide medals by default
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from tap_eeprom import __version__
from tap_eeprom.cli.errors import ExitCode, handle_cli_exception
from tap_eeprom.config import ReportConfig
from tap_eeprom.eeprom import (
    EepromBuffer,
    NameResolver,
    NameSubstitution,
    RecordDecoder,
    parse_substitution,
)
from tap_eeprom.errors import SubstitutionSpecError
from tap_eeprom.report import render_report, report_to_dict

logger = logging.getLogger(__name__)


# =============================================================================
# Substitution Parameter Type
# =============================================================================

class SubstitutionType(click.ParamType):
    """
    Click parameter type for "NAME:REPLACEMENT" name substitutions.

    Malformed specs are reported as bad parameters, so the tool exits
    before reading or printing anything.
    """
    name = "name_substitution"

    def convert(self, value: str, param: Optional[click.Parameter],
                ctx: Optional[click.Context]) -> NameSubstitution:
        """Convert string to NameSubstitution."""
        if isinstance(value, NameSubstitution):
            return value

        try:
            return parse_substitution(value)
        except SubstitutionSpecError as e:
            self.fail(str(e), param, ctx)


SUBSTITUTION = SubstitutionType()


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "eeprom_file",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.argument(
    "substitutions",
    nargs=-1,
    type=SUBSTITUTION,
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the report as JSON",
)
@click.option(
    "--medals/--no-medals",
    default=None,
    help="Show medals awarded in Master records (default: shown)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(__version__, "--version", "-V", prog_name="tapdump")
def main(
    eeprom_file: Optional[Path],
    substitutions: tuple[NameSubstitution, ...],
    as_json: bool,
    medals: Optional[bool],
    verbose: bool,
) -> None:
    """
    Print the records stored in a TAP EEPROM image.

    EEPROM_FILE is the 256-byte image to read (default: "eeprom").
    SUBSTITUTIONS replace three-letter ranking names with display names.

    \b
    Examples:
      tapdump
      tapdump tap.eeprom
      tapdump tap.eeprom AAA:Alice BOB:Robert
      tapdump tap.eeprom --json
    """
    setup_logging(verbose)
    config = ReportConfig.from_env()

    default_file = ""
    if eeprom_file is None:
        eeprom_file = config.eeprom_path
        default_file = "default "
    show_medals = config.show_medals if medals is None else medals

    try:
        buffer = EepromBuffer.from_file(eeprom_file)
    except OSError as e:
        logger.debug(f"Open failed: {e}")
        click.echo(
            f'ERROR: Failed opening {default_file}TAP EEPROM file "{eeprom_file}".',
            err=True,
        )
        sys.exit(ExitCode.INVALID_ARGS)
    except Exception as e:
        handle_cli_exception(e, verbose)

    try:
        image = RecordDecoder().decode(buffer)
        resolver = NameResolver(list(substitutions))
        logger.debug(f"{len(resolver.rules)} name substitution(s)")

        if as_json:
            output = json.dumps(
                report_to_dict(image, resolver, show_medals=show_medals),
                indent=2,
            )
        else:
            output = render_report(image, resolver, show_medals=show_medals)
    except Exception as e:
        handle_cli_exception(e, verbose, error_type="Decode")

    click.echo(output)


if __name__ == "__main__":
    main()
