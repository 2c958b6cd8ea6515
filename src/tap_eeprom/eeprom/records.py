"""
TAP EEPROM Record Definitions
=============================

Data structures for the records stored in a TAP EEPROM image. Every record
is a frozen dataclass built once by the decoder and never modified.

Record Kinds
------------
Each collection in the image holds one kind of record; the kind is given
by where the record lives, not by anything stored in it.

    Collection              Record                 Count
    ----------              ------                 -----
    Normal                  ScoreRecord            3
    Master                  MasterRecord           3
    Master section times    TimedGradeRecord       10
    Doubles (player 1)      TimedGradeRecord       3
    Doubles (player 2)      DoublesLevelsRecord    3

Grades
------
A grade is an index into GRADE_NAMES. The stored field is 5 bits wide, so
values 20-31 are possible in corrupted images; grade_name() rejects them.

Medals
------
Master records carry six medal ranks, one per category:
AC, ST, SK, RE, RO, CO. Each is NONE, BRONZE, SILVER or GOLD.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator

from tap_eeprom.errors import DecodeError


# =============================================================================
# Lookup Tables
# =============================================================================

GRADE_NAMES: tuple[str, ...] = (
    "9", "8", "7", "6", "5", "4", "3", "2", "1",
    "S1", "S2", "S3", "S4", "S5", "S6", "S7", "S8", "S9",
    "M", "Gm",
)

# Medal categories in display order
MEDAL_CATEGORIES: tuple[str, ...] = ("AC", "ST", "SK", "RE", "RO", "CO")


def grade_name(grade: int) -> str:
    """
    Get the display name for a grade index.

    Raises:
        DecodeError: If grade is outside 0..19
    """
    if not 0 <= grade < len(GRADE_NAMES):
        raise DecodeError(
            f"grade index {grade} is outside the grade table "
            f"(0-{len(GRADE_NAMES) - 1})"
        )
    return GRADE_NAMES[grade]


# =============================================================================
# Enumeration Types
# =============================================================================

class Medal(IntEnum):
    """Medal rank, stored as a 2-bit field."""
    NONE = 0
    BRONZE = 1
    SILVER = 2
    GOLD = 3

    def get_description(self) -> str:
        """Get the lower-case display name ("" for NONE)."""
        if self is Medal.NONE:
            return ""
        return self.name.lower()


@dataclass(frozen=True)
class MedalSet:
    """
    Medals awarded for one Master record.

    Attributes are named after the category codes in MEDAL_CATEGORIES.
    """
    ac: Medal = Medal.NONE
    st: Medal = Medal.NONE
    sk: Medal = Medal.NONE
    re: Medal = Medal.NONE
    ro: Medal = Medal.NONE
    co: Medal = Medal.NONE

    def items(self) -> Iterator[tuple[str, Medal]]:
        """Yield (category, medal) pairs in display order."""
        for category in MEDAL_CATEGORIES:
            yield category, getattr(self, category.lower())

    def awarded(self) -> list[tuple[str, Medal]]:
        """Return only the categories with a medal other than NONE."""
        return [(category, medal) for category, medal in self.items()
                if medal != Medal.NONE]

    def any_awarded(self) -> bool:
        return any(medal != Medal.NONE for _, medal in self.items())


# =============================================================================
# Records
# =============================================================================

@dataclass(frozen=True)
class ScoreRecord:
    """A Normal mode ranking: name and points."""
    name: str
    score: int


@dataclass(frozen=True)
class TimedGradeRecord:
    """
    A ranking made of a grade and a completion time.

    Attributes:
        name: Player name (up to 3 characters)
        grade: Raw grade index (see grade_name())
        greenline: Greenline flag
        orangeline: Orangeline flag
        time_frames: Elapsed time in frames
    """
    name: str
    grade: int
    greenline: bool
    orangeline: bool
    time_frames: int

    @property
    def grade_name(self) -> str:
        return grade_name(self.grade)

    @property
    def line_label(self) -> str:
        """Return "Orangeline", "Greenline" or "" (orangeline wins)."""
        if self.orangeline:
            return "Orangeline"
        if self.greenline:
            return "Greenline"
        return ""


@dataclass(frozen=True)
class MasterRecord(TimedGradeRecord):
    """A Master mode ranking, with the medals awarded in that game."""
    medals: MedalSet = MedalSet()


@dataclass(frozen=True)
class DoublesLevelsRecord:
    """
    Player 2's name and both players' completion levels for a Doubles
    ranking. Player 1's name, grade and time live in the matching
    TimedGradeRecord.
    """
    name: str
    level_p1: int
    level_p2: int


@dataclass(frozen=True)
class StatusBlock:
    """
    Play status counters, the init seed and the stored checksums.

    Times are in frames. Checksums are reported as stored; they are not
    verified.
    """
    coin_count: int
    demo_wait_time: int
    game_time: int
    play_count: int
    twin_count: int
    versus_count: int
    init_seed: int
    play_status_checksum: int
    rankings_checksum: int
    program_checksum: int


@dataclass(frozen=True)
class EepromImage:
    """
    Fully decoded EEPROM image.

    `doubles` and `doubles_levels` are parallel: entry i of both describe
    the same Doubles ranking.
    """
    normal: tuple[ScoreRecord, ...]
    master: tuple[MasterRecord, ...]
    section_times: tuple[TimedGradeRecord, ...]
    doubles: tuple[TimedGradeRecord, ...]
    doubles_levels: tuple[DoublesLevelsRecord, ...]
    status: StatusBlock
