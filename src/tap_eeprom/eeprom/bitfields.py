"""
Bit-Field Extraction
====================

Pure functions that split the packed words of a TAP EEPROM image into
their fields. Each field is an explicit (width, shift) pair applied to an
integer already read big-endian from the image, so the result does not
depend on host byte order or compiler struct layout.

Record Word (32 bits)
---------------------
    Bits     Field        Notes
    ----     -----        -----
    27-31    grade        index into GRADE_NAMES
    26       greenline
    25       orangeline
    20-24    (reserved)   ignored
    0-19     score/time   points or frames, depending on the collection

Score and time share bits 0-19. Which one a word holds is decided by the
collection being decoded, never by the value.

Medal Word (16 bits)
--------------------
    Bits     Category
    ----     --------
    0-1      AC
    2-3      ST
    4-5      SK
    6-7      RE
    8-9      RO
    10-11    CO

Levels Word (32 bits)
---------------------
High 16 bits are player 1's level, low 16 bits player 2's.
"""

from dataclasses import dataclass

from tap_eeprom.eeprom.records import MEDAL_CATEGORIES, Medal, MedalSet


@dataclass(frozen=True)
class BitField:
    """
    A named field of `width` bits starting at bit `shift`.

    Example:
        >>> GRADE.extract(0xD8000032)
        27
    """
    name: str
    width: int
    shift: int

    @property
    def mask(self) -> int:
        return (1 << self.width) - 1

    def extract(self, value: int) -> int:
        return (value >> self.shift) & self.mask


# =============================================================================
# Field Tables
# =============================================================================

SCORE = BitField("score", 20, 0)
TIME = BitField("time", 20, 0)
GRADE = BitField("grade", 5, 27)
GREENLINE = BitField("greenline", 1, 26)
ORANGELINE = BitField("orangeline", 1, 25)

RECORD_FIELDS: tuple[BitField, ...] = (GRADE, GREENLINE, ORANGELINE, TIME)

MEDAL_FIELDS: tuple[BitField, ...] = tuple(
    BitField(category, 2, index * 2)
    for index, category in enumerate(MEDAL_CATEGORIES)
)

LEVEL_P1 = BitField("level_p1", 16, 16)
LEVEL_P2 = BitField("level_p2", 16, 0)


# =============================================================================
# Extractors
# =============================================================================

def extract_score(value: int) -> int:
    """Points stored in bits 0-19."""
    return SCORE.extract(value)


def extract_time(value: int) -> int:
    """Frames stored in bits 0-19."""
    return TIME.extract(value)


def extract_grade(value: int) -> int:
    return GRADE.extract(value)


def extract_greenline(value: int) -> bool:
    return bool(GREENLINE.extract(value))


def extract_orangeline(value: int) -> bool:
    return bool(ORANGELINE.extract(value))


def extract_medals(value: int) -> MedalSet:
    """Split a 16-bit medal word into a MedalSet."""
    ranks = {
        field.name.lower(): Medal(field.extract(value))
        for field in MEDAL_FIELDS
    }
    return MedalSet(**ranks)


def split_levels(value: int) -> tuple[int, int]:
    """Return (player 1 level, player 2 level) from a levels word."""
    return LEVEL_P1.extract(value), LEVEL_P2.extract(value)
