"""
Core type definitions for the canvas log auditor.

A run is one immutable snapshot: parsed PaintEvents, the model derived from
them, and the CheckResults produced over that model.
"""

from dataclasses import dataclass, field
from typing import Literal, NewType

# Artist identity (unsigned 32-bit in the log)
ArtistId = NewType("ArtistId", int)

Adjacency = Literal[4, 8]
Severity = Literal["error", "advisory"]

ADJACENCY_RULES = (4, 8)
SEVERITIES = ("error", "advisory")


@dataclass(frozen=True, order=True)
class Point:
    """Canvas coordinate, ordered lexicographically by (x, y)."""
    x: int
    y: int

    def __iter__(self):
        """Allow tuple unpacking: x, y = point"""
        return iter((self.x, self.y))

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True, order=True)
class Color:
    """RGB triple, 8 bits per channel."""
    r: int
    g: int
    b: int

    def __iter__(self):
        return iter((self.r, self.g, self.b))

    def __str__(self) -> str:
        return f"({self.r}, {self.g}, {self.b})"


@dataclass(frozen=True)
class PaintEvent:
    """
    One line of the canvas log.

    line_number is the 0-based line the event was parsed from, or -1 for
    events built in memory.
    """
    artist: ArtistId
    coord: Point
    color: Color
    line_number: int = -1


Canvas = tuple[PaintEvent, ...]
OccupancyIndex = dict[ArtistId, frozenset[Point]]
ColorRegistry = dict[Color, ArtistId]


@dataclass(frozen=True)
class AuditConfig:
    """
    Knobs for one audit run.

    - expected_artist_count: distinct artists the program should have spawned
    - minimum_pixels_per_artist: every artist must paint at least this many
    - adjacency: 4 (edge-sharing) or 8 (edge or corner) for island detection
    - duplicate_write_severity: whether same-artist repeat writes fail the run
    """
    expected_artist_count: int = 54
    minimum_pixels_per_artist: int = 1
    adjacency: Adjacency = 4
    duplicate_write_severity: Severity = "advisory"

    def __post_init__(self):
        if self.expected_artist_count < 0:
            raise ValueError(
                f"expected_artist_count must be >= 0, got {self.expected_artist_count}"
            )
        if self.minimum_pixels_per_artist < 0:
            raise ValueError(
                f"minimum_pixels_per_artist must be >= 0, got {self.minimum_pixels_per_artist}"
            )
        if self.adjacency not in ADJACENCY_RULES:
            raise ValueError(
                f"adjacency must be one of {ADJACENCY_RULES}, got {self.adjacency!r}"
            )
        if self.duplicate_write_severity not in SEVERITIES:
            raise ValueError(
                f"duplicate_write_severity must be one of {SEVERITIES}, "
                f"got {self.duplicate_write_severity!r}"
            )

    def to_dict(self) -> dict:
        return {
            "expected_artist_count": self.expected_artist_count,
            "minimum_pixels_per_artist": self.minimum_pixels_per_artist,
            "adjacency": self.adjacency,
            "duplicate_write_severity": self.duplicate_write_severity,
        }


@dataclass(frozen=True)
class Violation:
    """
    One structured diagnostic from a checker.

    Carries enough context (artists, points, colors, log lines) to locate the
    offending events without re-reading the log. islands is only filled by the
    connectivity checker: one tuple of points per connected component.
    """
    check: str
    kind: str
    message: str
    artists: tuple[int, ...] = ()
    points: tuple[Point, ...] = ()
    colors: tuple[Color, ...] = ()
    lines: tuple[int, ...] = ()
    islands: tuple[tuple[Point, ...], ...] = ()
    severity: Severity = "error"

    def to_dict(self) -> dict:
        """JSON-ready form; points and colors become lists."""
        return {
            "check": self.check,
            "kind": self.kind,
            "severity": self.severity,
            "message": self.message,
            "artists": list(self.artists),
            "points": [list(p) for p in self.points],
            "colors": [list(c) for c in self.colors],
            "lines": list(self.lines),
            "islands": [[list(p) for p in island] for island in self.islands],
        }


@dataclass(frozen=True)
class CheckResult:
    """Outcome of one checker over one model."""
    name: str
    announcement: str
    violations: tuple[Violation, ...] = field(default_factory=tuple)

    @property
    def passed(self) -> bool:
        """True when no violation is error-severity (advisories don't fail)."""
        return not any(v.severity == "error" for v in self.violations)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "status": "PASS" if self.passed else "FAIL",
            "violations": [v.to_dict() for v in self.violations],
        }
