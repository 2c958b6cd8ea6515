"""
TAP EEPROM Decoder
==================

Walks the fixed layout of a TAP EEPROM image and builds an EepromImage.

Image Layout
------------
Ranking entries are 8 bytes: a 4-byte name followed by a 4-byte
big-endian data word (see bitfields). Only the first three name bytes are
used; the fourth is ignored.

    Offset  Size    Description
    ------  ----    -----------
    0x2C    4       Coin count
    0x30    4       Demo wait time (frames)
    0x34    4       Game time (frames)
    0x38    2       Play count
    0x3A    2       Twin count
    0x3C    2       Versus (Doubles) count
    0x3E    2       Init seed
    0x40    2       Play status checksum
    0x44    10 x 8  Master section times
    0x94    3 x 8   Master rankings
    0xAC    3 x 8   Normal rankings
    0xC4    3 x 8   Doubles rankings (player 1 name, grade, time)
    0xDC    3 x 8   Doubles rankings (player 2 name, both levels)
    0xF4    3 x 2   Master medals
    0xFA    2       Rankings checksum
    0xFC    2       Program checksum

No values are range-checked here. A grade outside the grade table is
stored as read and rejected when its name is looked up.

Usage Examples
--------------
    >>> from tap_eeprom.eeprom import decode_eeprom_file
    >>> image = decode_eeprom_file("eeprom")
    >>> image.normal[0].score
    10000
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Union
import logging

from tap_eeprom.eeprom.bitfields import (
    extract_grade,
    extract_greenline,
    extract_medals,
    extract_orangeline,
    extract_score,
    extract_time,
    split_levels,
)
from tap_eeprom.eeprom.buffer import EepromBuffer
from tap_eeprom.eeprom.records import (
    DoublesLevelsRecord,
    EepromImage,
    MasterRecord,
    ScoreRecord,
    StatusBlock,
    TimedGradeRecord,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Layout Constants
# =============================================================================

ENTRY_STRIDE = 8
NAME_FIELD_SIZE = 4
NAME_LENGTH = 3
MEDAL_STRIDE = 2

RANKING_COUNT = 3
SECTION_COUNT = 10


@dataclass(frozen=True)
class Collection:
    """Base offset and entry count of a ranking table."""
    name: str
    base: int
    count: int
    stride: int = ENTRY_STRIDE

    def entry_offset(self, index: int) -> int:
        return self.base + index * self.stride

    def data_offset(self, index: int) -> int:
        return self.entry_offset(index) + NAME_FIELD_SIZE


NORMAL = Collection("normal", 0xAC, RANKING_COUNT)
MASTER = Collection("master", 0x94, RANKING_COUNT)
MASTER_MEDALS = Collection("master_medals", 0xF4, RANKING_COUNT, MEDAL_STRIDE)
SECTION_TIMES = Collection("section_times", 0x44, SECTION_COUNT)
DOUBLES = Collection("doubles", 0xC4, RANKING_COUNT)
DOUBLES_LEVELS = Collection("doubles_levels", 0xDC, RANKING_COUNT)

# Status block (u32 fields)
COIN_COUNT_OFFSET = 0x2C
DEMO_WAIT_TIME_OFFSET = 0x30
GAME_TIME_OFFSET = 0x34

# Status block (u16 fields)
PLAY_COUNT_OFFSET = 0x38
TWIN_COUNT_OFFSET = 0x3A
VERSUS_COUNT_OFFSET = 0x3C
INIT_SEED_OFFSET = 0x3E

# Checksums (u16, reported but not verified)
PLAY_STATUS_CHECKSUM_OFFSET = 0x40
RANKINGS_CHECKSUM_OFFSET = 0xFA
PROGRAM_CHECKSUM_OFFSET = 0xFC


# =============================================================================
# Record Decoder
# =============================================================================

class RecordDecoder:
    """
    Decoder from an EepromBuffer to an EepromImage.

    The decoder holds no state; one instance can decode any number of
    buffers.

    Example:
        >>> buffer = EepromBuffer.load(data)
        >>> image = RecordDecoder().decode(buffer)
    """

    def decode(self, buffer: EepromBuffer) -> EepromImage:
        """Decode every collection and the status block."""
        image = EepromImage(
            normal=tuple(self._decode_normal(buffer, i)
                         for i in range(NORMAL.count)),
            master=tuple(self._decode_master(buffer, i)
                         for i in range(MASTER.count)),
            section_times=tuple(self._decode_timed(buffer, SECTION_TIMES, i)
                                for i in range(SECTION_TIMES.count)),
            doubles=tuple(self._decode_timed(buffer, DOUBLES, i)
                          for i in range(DOUBLES.count)),
            doubles_levels=tuple(self._decode_levels(buffer, i)
                                 for i in range(DOUBLES_LEVELS.count)),
            status=self._decode_status(buffer),
        )
        logger.debug(
            f"Decoded {len(image.normal)} normal, {len(image.master)} master, "
            f"{len(image.section_times)} section time and "
            f"{len(image.doubles)} doubles records"
        )
        return image

    # -------------------------------------------------------------------------
    # Field helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _read_name(buffer: EepromBuffer, offset: int) -> str:
        """Read a name field; the 4th byte and anything after a NUL are dropped."""
        raw = buffer.read_bytes(offset, NAME_FIELD_SIZE)[:NAME_LENGTH]
        return raw.split(b"\x00", 1)[0].decode("latin-1")

    # -------------------------------------------------------------------------
    # Collections
    # -------------------------------------------------------------------------

    def _decode_normal(self, buffer: EepromBuffer, index: int) -> ScoreRecord:
        word = buffer.read_u32(NORMAL.data_offset(index))
        return ScoreRecord(
            name=self._read_name(buffer, NORMAL.entry_offset(index)),
            score=extract_score(word),
        )

    def _decode_timed(
        self,
        buffer: EepromBuffer,
        collection: Collection,
        index: int,
    ) -> TimedGradeRecord:
        word = buffer.read_u32(collection.data_offset(index))
        return TimedGradeRecord(
            name=self._read_name(buffer, collection.entry_offset(index)),
            grade=extract_grade(word),
            greenline=extract_greenline(word),
            orangeline=extract_orangeline(word),
            time_frames=extract_time(word),
        )

    def _decode_master(self, buffer: EepromBuffer, index: int) -> MasterRecord:
        word = buffer.read_u32(MASTER.data_offset(index))
        medal_word = buffer.read_u16(MASTER_MEDALS.entry_offset(index))
        return MasterRecord(
            name=self._read_name(buffer, MASTER.entry_offset(index)),
            grade=extract_grade(word),
            greenline=extract_greenline(word),
            orangeline=extract_orangeline(word),
            time_frames=extract_time(word),
            medals=extract_medals(medal_word),
        )

    def _decode_levels(self, buffer: EepromBuffer, index: int) -> DoublesLevelsRecord:
        word = buffer.read_u32(DOUBLES_LEVELS.data_offset(index))
        level_p1, level_p2 = split_levels(word)
        return DoublesLevelsRecord(
            name=self._read_name(buffer, DOUBLES_LEVELS.entry_offset(index)),
            level_p1=level_p1,
            level_p2=level_p2,
        )

    def _decode_status(self, buffer: EepromBuffer) -> StatusBlock:
        return StatusBlock(
            coin_count=buffer.read_u32(COIN_COUNT_OFFSET),
            demo_wait_time=buffer.read_u32(DEMO_WAIT_TIME_OFFSET),
            game_time=buffer.read_u32(GAME_TIME_OFFSET),
            play_count=buffer.read_u16(PLAY_COUNT_OFFSET),
            twin_count=buffer.read_u16(TWIN_COUNT_OFFSET),
            versus_count=buffer.read_u16(VERSUS_COUNT_OFFSET),
            init_seed=buffer.read_u16(INIT_SEED_OFFSET),
            play_status_checksum=buffer.read_u16(PLAY_STATUS_CHECKSUM_OFFSET),
            rankings_checksum=buffer.read_u16(RANKINGS_CHECKSUM_OFFSET),
            program_checksum=buffer.read_u16(PROGRAM_CHECKSUM_OFFSET),
        )


# =============================================================================
# Convenience Functions
# =============================================================================

def decode_eeprom(data: bytes) -> EepromImage:
    """
    Decode an EEPROM image from bytes.

    Raises:
        SizeError: If data is not exactly 256 bytes
    """
    return RecordDecoder().decode(EepromBuffer.load(data))


def decode_eeprom_file(filepath: Union[str, Path]) -> EepromImage:
    """
    Read and decode an EEPROM image file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        SizeError: If the file is not exactly 256 bytes
    """
    return RecordDecoder().decode(EepromBuffer.from_file(filepath))
