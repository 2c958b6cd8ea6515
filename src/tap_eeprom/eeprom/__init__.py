"""
TAP EEPROM Image Handling
=========================

Decoding support for the 256-byte EEPROM image of Tetris The Absolute
Plus (TAP), the battery-backed store holding rankings, medals and play
status.

This module provides:
- **EepromBuffer**: Bounds-checked, big-endian view of the raw image
- **Bit-field extractors**: Grade, line flags, score/time, medals, levels
- **RecordDecoder**: Builds an EepromImage from a buffer
- **NameResolver**: Display-name substitution for decoded names
- **frames_to_time**: Frame count to minutes/seconds/centiseconds

Quick Start
-----------
    >>> from tap_eeprom.eeprom import decode_eeprom_file, frames_to_time
    >>> image = decode_eeprom_file("eeprom")
    >>> for record in image.master:
    ...     print(record.name, record.grade_name, frames_to_time(record.time_frames))
"""

# =============================================================================
# Public API Exports
# =============================================================================

from tap_eeprom.eeprom.buffer import EEPROM_SIZE, EepromBuffer

from tap_eeprom.eeprom.records import (
    GRADE_NAMES,
    MEDAL_CATEGORIES,
    grade_name,
    Medal,
    MedalSet,
    ScoreRecord,
    TimedGradeRecord,
    MasterRecord,
    DoublesLevelsRecord,
    StatusBlock,
    EepromImage,
)

from tap_eeprom.eeprom.bitfields import (
    BitField,
    extract_score,
    extract_time,
    extract_grade,
    extract_greenline,
    extract_orangeline,
    extract_medals,
    split_levels,
)

from tap_eeprom.eeprom.decoder import (
    RecordDecoder,
    decode_eeprom,
    decode_eeprom_file,
)

from tap_eeprom.eeprom.names import (
    NameSubstitution,
    NameResolver,
    parse_substitution,
)

from tap_eeprom.eeprom.timing import GameTime, frames_to_time

__all__ = [
    # Buffer
    "EEPROM_SIZE",
    "EepromBuffer",
    # Records
    "GRADE_NAMES",
    "MEDAL_CATEGORIES",
    "grade_name",
    "Medal",
    "MedalSet",
    "ScoreRecord",
    "TimedGradeRecord",
    "MasterRecord",
    "DoublesLevelsRecord",
    "StatusBlock",
    "EepromImage",
    # Bit fields
    "BitField",
    "extract_score",
    "extract_time",
    "extract_grade",
    "extract_greenline",
    "extract_orangeline",
    "extract_medals",
    "split_levels",
    # Decoder
    "RecordDecoder",
    "decode_eeprom",
    "decode_eeprom_file",
    # Names
    "NameSubstitution",
    "NameResolver",
    "parse_substitution",
    # Timing
    "GameTime",
    "frames_to_time",
]
