"""
Report Configuration
====================

Settings for the report tool. Configuration can come from:
- Default values (defined here)
- Environment variables

Command-line options override both.
"""

from dataclasses import dataclass
from pathlib import Path
import os


# Name of the image file read when none is given on the command line
DEFAULT_EEPROM_FILENAME = "eeprom"

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass
class ReportConfig:
    """
    Configuration for decoding and reporting.

    Attributes:
        eeprom_path: Image file used when no file argument is given
        show_medals: Append the medal listing to Master records
    """

    eeprom_path: Path = Path(DEFAULT_EEPROM_FILENAME)
    show_medals: bool = True

    @classmethod
    def from_env(cls) -> "ReportConfig":
        """
        Create ReportConfig from environment variables.

        Environment variables (all optional):
            TAP_EEPROM_FILE: Default image file path
            TAP_EEPROM_SHOW_MEDALS: "0"/"false"/"no"/"off" hides medals

        Returns:
            ReportConfig with values from environment variables
        """
        config = cls()

        if eeprom_file := os.environ.get("TAP_EEPROM_FILE"):
            config.eeprom_path = Path(eeprom_file)

        if show_medals := os.environ.get("TAP_EEPROM_SHOW_MEDALS"):
            value = show_medals.strip().lower()
            if value in _TRUE_VALUES:
                config.show_medals = True
            elif value in _FALSE_VALUES:
                config.show_medals = False
            # Anything else keeps the default

        return config
