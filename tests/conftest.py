"""
Shared fixtures for the EEPROM tests.

The sample image is built field by field with struct so each test can see
exactly which bytes hold which value.
"""

import struct

import pytest


EEPROM_SIZE = 0x100


def put_entry(image: bytearray, offset: int, name: bytes, word: int) -> None:
    """Write an 8-byte ranking entry: 4 name bytes and a big-endian word."""
    image[offset:offset + 4] = name.ljust(4, b"\x00")[:4]
    struct.pack_into(">I", image, offset + 4, word)


def record_word(grade: int, frames: int, greenline: bool = False,
                orangeline: bool = False) -> int:
    """Pack a grade/line/time word the way the game stores it."""
    return (grade << 27) | (int(greenline) << 26) | (int(orangeline) << 25) | frames


@pytest.fixture
def blank_image() -> bytearray:
    """An all-zero 256-byte image."""
    return bytearray(EEPROM_SIZE)


@pytest.fixture
def sample_image() -> bytes:
    """
    A populated image.

    Normal:   AAA 10000 pts, BB 5000 pts
    Master:   MST grade Gm, greenline, 30000 frames, AC gold
              ORG grade S9, orangeline + greenline, 36000 frames, ST silver
    Sections: section 0 AAA grade 1 at 1800 frames
    Doubles:  AAA/BBB grade S4 at 18000 frames, levels 300/300
    Status:   coins 42, demo wait 3690, game time 216000, play 7,
              twin 2, versus 3, seed 0xBEEF, checksums 0x1234/0xABCD/0x0F0F
    """
    image = bytearray(EEPROM_SIZE)

    put_entry(image, 0xAC, b"AAA\x00", 10000)
    put_entry(image, 0xB4, b"BB\x00\x00", 5000)

    put_entry(image, 0x94, b"MST\x00", record_word(19, 30000, greenline=True))
    put_entry(image, 0x9C, b"ORG\x00",
              record_word(17, 36000, greenline=True, orangeline=True))
    struct.pack_into(">H", image, 0xF4, 0x0003)
    struct.pack_into(">H", image, 0xF6, 0x0008)

    put_entry(image, 0x44, b"AAA\x00", record_word(8, 1800))

    put_entry(image, 0xC4, b"AAA\x00", record_word(12, 18000))
    put_entry(image, 0xDC, b"BBB\x00", (300 << 16) | 300)

    struct.pack_into(">III", image, 0x2C, 42, 3690, 216000)
    struct.pack_into(">HHHH", image, 0x38, 7, 2, 3, 0xBEEF)
    struct.pack_into(">H", image, 0x40, 0x1234)
    struct.pack_into(">H", image, 0xFA, 0xABCD)
    struct.pack_into(">H", image, 0xFC, 0x0F0F)

    return bytes(image)


@pytest.fixture
def sample_file(tmp_path, sample_image):
    """The sample image written to disk."""
    path = tmp_path / "eeprom"
    path.write_bytes(sample_image)
    return path
