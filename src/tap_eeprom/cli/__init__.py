"""
TAP EEPROM Command-Line Interface
=================================

This package provides the command-line tool for the decoder:

- **tapdump**: Print the rankings, medals and play status stored in a
  TAP EEPROM image

The tool is a Click-based CLI application with help and error reporting.
"""

__all__ = ["tapdump"]
