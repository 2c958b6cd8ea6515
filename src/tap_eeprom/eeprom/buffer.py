"""
EEPROM Image Buffer
===================

Fixed-size, read-only view of a TAP EEPROM image with bounds-checked
big-endian integer access.

Image Format
------------
The image is exactly 256 bytes (0x00-0xFF). All multi-byte fields are
big-endian: the byte at the lower offset is the most significant.

    Width   Accessor      Layout
    -----   --------      ------
    2       read_u16()    b[0]<<8 | b[1]
    4       read_u32()    b[0]<<24 | b[1]<<16 | b[2]<<8 | b[3]
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Union
import logging
import struct

from tap_eeprom.errors import RangeError, SizeError

logger = logging.getLogger(__name__)


# Size of the TAP EEPROM image in bytes
EEPROM_SIZE = 0x100


@dataclass(frozen=True)
class EepromBuffer:
    """
    Immutable 256-byte EEPROM image.

    Use load() or from_file() rather than the constructor directly; both
    reject images that are not exactly EEPROM_SIZE bytes.

    Attributes:
        data: The raw image bytes
    """
    data: bytes = field(repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))
        if len(self.data) != EEPROM_SIZE:
            raise SizeError(len(self.data), EEPROM_SIZE)

    @classmethod
    def load(cls, data: Union[bytes, bytearray, memoryview]) -> "EepromBuffer":
        """
        Create a buffer from raw image bytes.

        Args:
            data: Exactly 256 bytes of image data

        Returns:
            An EepromBuffer holding an immutable copy of the data

        Raises:
            SizeError: If data is not exactly 256 bytes
        """
        logger.debug(f"Loading EEPROM image ({len(data)} bytes)")
        return cls(data=bytes(data))

    @classmethod
    def from_file(cls, filepath: Union[str, Path]) -> "EepromBuffer":
        """
        Read an image from disk.

        Raises:
            FileNotFoundError: If the file doesn't exist
            SizeError: If the file is not exactly 256 bytes
        """
        filepath = Path(filepath)
        # One byte past the image size is enough to reject oversized files
        with filepath.open("rb") as f:
            data = f.read(EEPROM_SIZE + 1)
        if len(data) != EEPROM_SIZE:
            raise SizeError(len(data), EEPROM_SIZE, source=str(filepath))
        return cls.load(data)

    def __len__(self) -> int:
        return len(self.data)

    def _check_range(self, offset: int, width: int) -> None:
        if offset < 0 or width < 0 or offset + width > len(self.data):
            raise RangeError(offset, width, len(self.data))

    def read_bytes(self, offset: int, length: int) -> bytes:
        """Return `length` raw bytes starting at `offset`."""
        self._check_range(offset, length)
        return self.data[offset:offset + length]

    def read_u16(self, offset: int) -> int:
        """Read a big-endian unsigned 16-bit word."""
        self._check_range(offset, 2)
        return struct.unpack_from(">H", self.data, offset)[0]

    def read_u32(self, offset: int) -> int:
        """Read a big-endian unsigned 32-bit word."""
        self._check_range(offset, 4)
        return struct.unpack_from(">I", self.data, offset)[0]
