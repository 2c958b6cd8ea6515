"""
TAP EEPROM - Save Data Decoder for Tetris The Absolute Plus
===========================================================

This package decodes the 256-byte EEPROM image kept by the arcade game
Tetris The Absolute Plus (TAP) and prints the data it holds: Normal,
Master and Doubles rankings, Master section times, medals, play status
counters, the init seed and the stored checksums.

The image is a fixed layout of big-endian words with bit-packed fields.
It is read once, decoded once, and never written.

Main Components
---------------
- **eeprom**: Image buffer, bit-field extractors, record decoder,
  name substitution and frame-count conversion

- **report**: Text and dictionary renderings of a decoded image

- **cli**: The `tapdump` command-line tool

Quick Start
-----------
Decode an image:
    >>> from tap_eeprom import decode_eeprom_file
    >>> image = decode_eeprom_file("eeprom")
    >>> image.normal[0].name, image.normal[0].score
    ('AAA', 10000)

Print the report with a display name substitution:
    >>> from tap_eeprom import NameResolver, render_report
    >>> print(render_report(image, NameResolver.from_specs(["AAA:Alice"])))

Or use the command-line tool:
    $ tapdump eeprom AAA:Alice

Version History
---------------
1.0.0 - Initial release
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from tap_eeprom.errors import (
    TapEepromError,
    EepromError,
    SizeError,
    RangeError,
    DecodeError,
    SubstitutionSpecError,
)

from tap_eeprom.eeprom import (
    EEPROM_SIZE,
    EepromBuffer,
    GRADE_NAMES,
    grade_name,
    Medal,
    MedalSet,
    ScoreRecord,
    TimedGradeRecord,
    MasterRecord,
    DoublesLevelsRecord,
    StatusBlock,
    EepromImage,
    RecordDecoder,
    decode_eeprom,
    decode_eeprom_file,
    NameSubstitution,
    NameResolver,
    parse_substitution,
    GameTime,
    frames_to_time,
)

from tap_eeprom.config import ReportConfig
from tap_eeprom.report import render_report, report_to_dict

__all__ = [
    # Version info
    "__version__",
    # Exception hierarchy
    "TapEepromError",
    "EepromError",
    "SizeError",
    "RangeError",
    "DecodeError",
    "SubstitutionSpecError",
    # Image and records
    "EEPROM_SIZE",
    "EepromBuffer",
    "GRADE_NAMES",
    "grade_name",
    "Medal",
    "MedalSet",
    "ScoreRecord",
    "TimedGradeRecord",
    "MasterRecord",
    "DoublesLevelsRecord",
    "StatusBlock",
    "EepromImage",
    # Decoding
    "RecordDecoder",
    "decode_eeprom",
    "decode_eeprom_file",
    # Names and times
    "NameSubstitution",
    "NameResolver",
    "parse_substitution",
    "GameTime",
    "frames_to_time",
    # Configuration and reporting
    "ReportConfig",
    "render_report",
    "report_to_dict",
]
