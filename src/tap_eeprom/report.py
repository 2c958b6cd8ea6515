"""
Text Report Rendering
=====================

Formats a decoded EepromImage as the plain-text report shown by the
`tapdump` tool, or as a dictionary suitable for JSON output.

The report is built completely in memory. Any error while formatting
(for example a grade outside the grade table) is raised before anything
is printed, so a failed run never produces partial output.

Report Sections
---------------
    [TAP] Normal:
       1--AAA-------------------------010000 pts @ -:--:--

    [TAP] Master:
    --1--AAA--------------------Gm - --- @ 08:20:00 - --/--/-- - *************** - Greenline; Medals: AC gold

    [TAP] Master Section Times:
    000 - 099--AAA---------------------1 @ 00:30:00 - --/--/-- - ***************

    [TAP] Doubles:
    AAA-------------------- 300 @ 05:00:00 @ 300 --------------------BBB - AAA (player 1) earned a grade of S4

    [TAP] Play Status:
    ...

    [TAP] Seed And Checksums:
    ...
"""

from typing import Any, Optional

from tap_eeprom.eeprom.names import NameResolver
from tap_eeprom.eeprom.records import (
    EepromImage,
    MasterRecord,
    TimedGradeRecord,
)
from tap_eeprom.eeprom.timing import frames_to_time


# Column widths the dash padding fills up to
NORMAL_NAME_WIDTH = 28
MASTER_NAME_WIDTH = 22
GRADE_WIDTH = 3
DOUBLES_NAME_WIDTH = 23

SECTION_LEVELS = 100


def _dashes(text: str, width: int) -> str:
    """Dashes filling `text` out to `width` characters (none if longer)."""
    return "-" * max(0, width - len(text))


def _line_suffix(record: TimedGradeRecord) -> str:
    label = record.line_label
    return f" - {label}" if label else ""


def _medal_suffix(record: MasterRecord) -> str:
    awarded = record.medals.awarded()
    if not awarded:
        return ""
    separator = "; " if record.line_label else " - "
    listing = ", ".join(
        f"{category} {medal.get_description()}" for category, medal in awarded
    )
    return f"{separator}Medals: {listing}"


# =============================================================================
# Text Report
# =============================================================================

def render_report(
    image: EepromImage,
    resolver: Optional[NameResolver] = None,
    show_medals: bool = True,
) -> str:
    """
    Render the full text report.

    Args:
        image: Decoded EEPROM image
        resolver: Display-name substitutions (none if omitted)
        show_medals: Append awarded medals to Master records

    Returns:
        The report text, without a trailing newline

    Raises:
        DecodeError: If a record's grade is outside the grade table
    """
    resolver = resolver or NameResolver()
    lines: list[str] = []

    lines.append("[TAP] Normal:")
    for place, record in enumerate(image.normal, start=1):
        name = resolver.resolve(record.name)
        lines.append(
            f"{place: 4d}--{name}{_dashes(name, NORMAL_NAME_WIDTH)}"
            f"{record.score:06d} pts @ -:--:--"
        )
    lines.append("")

    lines.append("[TAP] Master:")
    for place, record in enumerate(image.master, start=1):
        name = resolver.resolve(record.name)
        grade = record.grade_name
        line = (
            f"--{place}--{name}{_dashes(name, MASTER_NAME_WIDTH)}"
            f"{_dashes(grade, GRADE_WIDTH)}{grade} - --- @ "
            f"{frames_to_time(record.time_frames)} - --/--/-- - "
            f"***************{_line_suffix(record)}"
        )
        if show_medals:
            line += _medal_suffix(record)
        lines.append(line)
    lines.append("")

    lines.append("[TAP] Master Section Times:")
    for section, record in enumerate(image.section_times):
        name = resolver.resolve(record.name)
        grade = record.grade_name
        start = section * SECTION_LEVELS
        end = (section + 1) * SECTION_LEVELS - 1
        lines.append(
            f"{start:03d} - {end:03d}--{name}{_dashes(name, MASTER_NAME_WIDTH)}"
            f"{_dashes(grade, GRADE_WIDTH)}{grade} @ "
            f"{frames_to_time(record.time_frames)} - --/--/-- - "
            f"***************{_line_suffix(record)}"
        )
    lines.append("")

    lines.append("[TAP] Doubles:")
    for record, levels in zip(image.doubles, image.doubles_levels):
        player1 = resolver.resolve(record.name)
        player2 = resolver.resolve(levels.name)
        lines.append(
            f"{player1}{_dashes(player1, DOUBLES_NAME_WIDTH)} "
            f"{levels.level_p1:03d} @ {frames_to_time(record.time_frames)} @ "
            f"{levels.level_p2:03d} {_dashes(player2, DOUBLES_NAME_WIDTH)}{player2}"
            f" - {player1} (player 1) earned a grade of {record.grade_name}"
        )
    lines.append("")

    status = image.status
    lines.append("[TAP] Play Status:")
    lines.append(f"Coin Count: {status.coin_count}")
    lines.append(f"Demo Wait Time: {frames_to_time(status.demo_wait_time)}")
    lines.append(f"Game Time: {frames_to_time(status.game_time)}")
    lines.append(f"Play Count: {status.play_count}")
    lines.append(f"Twin Count: {status.twin_count}")
    lines.append(f"Doubles Count: {status.versus_count}")
    lines.append("")

    lines.append("[TAP] Seed And Checksums:")
    lines.append(f"Init Seed: 0x{status.init_seed:04X}")
    lines.append(f"Play Status Checksum: 0x{status.play_status_checksum:04X}")
    lines.append(f"Rankings Checksum: 0x{status.rankings_checksum:04X}")
    lines.append(f"Program Checksum: 0x{status.program_checksum:04X}")

    return "\n".join(lines)


# =============================================================================
# Dictionary Report
# =============================================================================

def _timed_dict(record: TimedGradeRecord, name: str) -> dict[str, Any]:
    return {
        "name": name,
        "grade": record.grade_name,
        "time": str(frames_to_time(record.time_frames)),
        "time_frames": record.time_frames,
        "greenline": record.greenline,
        "orangeline": record.orangeline,
    }


def report_to_dict(
    image: EepromImage,
    resolver: Optional[NameResolver] = None,
    show_medals: bool = True,
) -> dict[str, Any]:
    """
    Get the report contents as plain data.

    Names are resolved, grades are given by name and times both as frames
    and as "MM:SS:CC". Checksums are formatted as hex strings. Master
    entries carry a "medals" mapping only when show_medals is set.

    Raises:
        DecodeError: If a record's grade is outside the grade table
    """
    resolver = resolver or NameResolver()
    status = image.status

    master = []
    for record in image.master:
        entry = _timed_dict(record, resolver.resolve(record.name))
        if show_medals:
            entry["medals"] = {
                category: medal.get_description()
                for category, medal in record.medals.awarded()
            }
        master.append(entry)

    doubles = []
    for record, levels in zip(image.doubles, image.doubles_levels):
        entry = _timed_dict(record, resolver.resolve(record.name))
        entry["player2"] = resolver.resolve(levels.name)
        entry["level_p1"] = levels.level_p1
        entry["level_p2"] = levels.level_p2
        doubles.append(entry)

    return {
        "normal": [
            {"name": resolver.resolve(record.name), "score": record.score}
            for record in image.normal
        ],
        "master": master,
        "section_times": [
            _timed_dict(record, resolver.resolve(record.name))
            for record in image.section_times
        ],
        "doubles": doubles,
        "play_status": {
            "coin_count": status.coin_count,
            "demo_wait_time": str(frames_to_time(status.demo_wait_time)),
            "game_time": str(frames_to_time(status.game_time)),
            "play_count": status.play_count,
            "twin_count": status.twin_count,
            "versus_count": status.versus_count,
        },
        "seed_and_checksums": {
            "init_seed": f"0x{status.init_seed:04X}",
            "play_status_checksum": f"0x{status.play_status_checksum:04X}",
            "rankings_checksum": f"0x{status.rankings_checksum:04X}",
            "program_checksum": f"0x{status.program_checksum:04X}",
        },
    }
