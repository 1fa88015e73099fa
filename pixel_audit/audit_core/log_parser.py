"""
Canvas log parser.

Line format (one paint event per line):
    artist, x, y, r, g, b

Fields are separated by a single space and each field may carry trailing
commas, which are stripped. Any malformed line is fatal: no model can be
built from a partially understood log.
"""

import logging
import re
from pathlib import Path
from typing import Callable, Iterable

from .types import ArtistId, Canvas, Color, PaintEvent, Point

logger = logging.getLogger(__name__)

DELIMITER = " "
TRAILING = ","
NUM_FIELDS = 6
ENCODING = "utf-8"

ARTIST_MAX = 2**32 - 1
CHANNEL_MAX = 255
# Signed 32-bit: the difference of any two coordinates fits in int64
COORD_MIN = -(2**31)
COORD_MAX = 2**31 - 1

# Plain decimal digits only: no "+", no "_" separators, no whitespace
UNSIGNED = re.compile(r"[0-9]+")
SIGNED = re.compile(r"-?[0-9]+")

# (field name, role description, min, max) in line order
FIELDS = (
    ("artist", "artist id (unsigned 32-bit integer)", 0, ARTIST_MAX),
    ("x", "x coordinate (signed 32-bit integer)", COORD_MIN, COORD_MAX),
    ("y", "y coordinate (signed 32-bit integer)", COORD_MIN, COORD_MAX),
    ("red", "red channel (integer 0-255)", 0, CHANNEL_MAX),
    ("green", "green channel (integer 0-255)", 0, CHANNEL_MAX),
    ("blue", "blue channel (integer 0-255)", 0, CHANNEL_MAX),
)


class LogParseError(ValueError):
    """A log line could not be turned into a PaintEvent."""

    def __init__(self, line_number: int, field: str, role: str, detail: str):
        self.line_number = line_number
        self.field = field
        self.role = role
        self.detail = detail
        super().__init__(
            f"line {line_number}: failed to parse {field} as {role}: {detail}"
        )


def _parse_int(text: str, line_number: int, field: str, role: str,
               lo: int, hi: int) -> int:
    if lo < 0:
        pattern, kind = SIGNED, "a decimal integer"
    else:
        pattern, kind = UNSIGNED, "an unsigned decimal integer"
    if not pattern.fullmatch(text):
        raise LogParseError(line_number, field, role, f"not {kind}: {text!r}")

    value = int(text)
    if value < lo or value > hi:
        raise LogParseError(
            line_number, field, role, f"{value} outside range [{lo}, {hi}]"
        )

    return value


def split_fields(line: str) -> list[str]:
    """Split on the delimiter and strip trailing separators from each field."""
    return [part.rstrip(TRAILING) for part in line.rstrip("\r\n").split(DELIMITER)]


def parse_line(line: str, line_number: int) -> PaintEvent:
    """
    Parse one log line into a PaintEvent.

    Args:
        line: Raw text line (trailing newline allowed)
        line_number: 0-based line index, stored on the event and used in errors

    Raises:
        LogParseError: Wrong field count, non-integer field, or out-of-range value
    """
    parts = split_fields(line)
    if len(parts) != NUM_FIELDS:
        raise LogParseError(
            line_number, "line", f"{NUM_FIELDS} fields 'artist, x, y, r, g, b'",
            f"found {len(parts)} fields in {line.rstrip()!r}",
        )

    values = [
        _parse_int(text, line_number, name, role, lo, hi)
        for text, (name, role, lo, hi) in zip(parts, FIELDS)
    ]

    artist, x, y, red, green, blue = values
    return PaintEvent(
        artist=ArtistId(artist),
        coord=Point(x, y),
        color=Color(red, green, blue),
        line_number=line_number,
    )


def parse_log(lines: Iterable[str]) -> Canvas:
    """
    Parse every line in order.

    Raises:
        LogParseError: On the first malformed line
    """
    canvas = tuple(parse_line(line, lnum) for lnum, line in enumerate(lines))
    logger.info(f"{len(canvas)} pixels were painted")
    return canvas


def decode_lines(data: bytes) -> list[str]:
    """
    Split raw log bytes into text lines, decoding each as UTF-8.

    Raises:
        LogParseError: A line is not valid UTF-8
    """
    lines = []
    for line_number, raw in enumerate(data.splitlines()):
        try:
            lines.append(raw.decode(ENCODING))
        except UnicodeDecodeError as e:
            raise LogParseError(
                line_number, "line", f"{ENCODING} text",
                f"invalid byte 0x{raw[e.start]:02x} at column {e.start}",
            ) from None
    return lines


def read_log(path: Path | str) -> Canvas:
    """
    Read and parse a canvas log file.

    Raises:
        OSError: The file can't be opened (missing, a directory, no permission)
        LogParseError: Undecodable or malformed line
    """
    path = Path(path)
    lines = decode_lines(path.read_bytes())
    logger.info(f"Read {len(lines)} lines from {path}")
    return parse_log(lines)


def format_event(event: PaintEvent) -> str:
    """Serialize an event back to the log line format."""
    x, y = event.coord
    r, g, b = event.color
    return f"{event.artist}, {x}, {y}, {r}, {g}, {b}"


def format_log(canvas: Iterable[PaintEvent],
               formatter: Callable[[PaintEvent], str] = format_event) -> list[str]:
    """Serialize a canvas to lines; parse_log(format_log(c)) reproduces c's fields."""
    return [formatter(event) for event in canvas]
