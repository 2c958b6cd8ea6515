"""
TAP EEPROM Error Hierarchy
==========================

This module defines the exception hierarchy for the whole package.
All exceptions inherit from TapEepromError, allowing callers to catch
every decoder-related error with a single except clause if desired.

Exception Hierarchy
-------------------
TapEepromError (base)
├── EepromError (image handling)
│   ├── SizeError - image is not exactly 256 bytes
│   ├── RangeError - field access past the end of the image
│   └── DecodeError - decoded value cannot be interpreted
└── SubstitutionSpecError - malformed "NAME:REPLACEMENT" argument

Every error is terminal for a run: nothing is retried and no partial
report is produced.
"""

from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class TapEepromError(Exception):
    """
    Base exception for all TAP EEPROM errors.

        try:
            image = decode_eeprom_file("eeprom")
        except TapEepromError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# EEPROM Image Exceptions
# =============================================================================

class EepromError(TapEepromError):
    """Base exception for EEPROM image handling errors."""
    pass


class SizeError(EepromError):
    """
    EEPROM image has the wrong size.

    The image must be exactly 256 bytes. Short files are rejected instead
    of being padded, so undefined trailing content never reaches the
    decoder.
    """

    def __init__(self, actual: int, expected: int, source: Optional[str] = None):
        self.actual = actual
        self.expected = expected
        self.source = source
        where = f" in {source}" if source else ""
        found = f"more than {expected}" if actual > expected else str(actual)
        super().__init__(
            f"EEPROM image must be exactly {expected} bytes, found {found}{where}"
        )


class RangeError(EepromError):
    """
    Field access outside the EEPROM image.

    Raised by EepromBuffer when offset + width exceeds the image size or
    the offset is negative. The fixed layout never triggers this.
    """

    def __init__(self, offset: int, width: int, size: int):
        self.offset = offset
        self.width = width
        self.size = size
        super().__init__(
            f"read of {width} byte(s) at offset 0x{offset:02X} "
            f"exceeds image size ({size} bytes)"
        )


class DecodeError(EepromError):
    """
    A decoded field holds a value with no defined meaning.

    The only case is a grade index outside the 20-entry grade table,
    which can only come from corrupted or foreign images.
    """
    pass


# =============================================================================
# Name Substitution Exceptions
# =============================================================================

class SubstitutionSpecError(TapEepromError):
    """
    Malformed name substitution spec.

    Substitutions are written as "NAME:REPLACEMENT". Both sides of the
    colon must be non-empty.
    """

    def __init__(self, spec: str, reason: str):
        self.spec = spec
        self.reason = reason
        super().__init__(f'Substitution spec "{spec}" {reason}.')
