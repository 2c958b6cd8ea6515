"""
Frame Count Conversion
======================

Times in the image are frame counts. They are converted the same way the
game converts them, assuming 60 frames per second. The real hardware runs
at about 61.68 Hz, so converted times do not match wall-clock time on
original hardware; that matches what the game itself shows.

Centiseconds are the leftover frames scaled by 100/60, so 30 frames reads
as 50 centiseconds.
"""

from typing import NamedTuple


FRAMES_PER_SECOND = 60
FRAMES_PER_MINUTE = FRAMES_PER_SECOND * 60


class GameTime(NamedTuple):
    """Minutes, seconds and centiseconds; str() gives "MM:SS:CC"."""
    minutes: int
    seconds: int
    centiseconds: int

    def __str__(self) -> str:
        return f"{self.minutes:02d}:{self.seconds:02d}:{self.centiseconds:02d}"


def frames_to_time(frames: int) -> GameTime:
    """
    Convert a frame count to (minutes, seconds, centiseconds).

    Example:
        >>> frames_to_time(3690)
        GameTime(minutes=1, seconds=1, centiseconds=50)
    """
    minutes, frames = divmod(frames, FRAMES_PER_MINUTE)
    seconds, frames = divmod(frames, FRAMES_PER_SECOND)
    centiseconds = (frames * 100) // FRAMES_PER_SECOND
    return GameTime(minutes, seconds, centiseconds)
