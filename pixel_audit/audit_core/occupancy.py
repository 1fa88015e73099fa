"""
Canvas model and occupancy index.

build() folds the event log once, O(events), into:
- occupancy: artist -> frozenset of painted points
- color_registry: color -> first artist seen using it
- duplicate_writes: same-artist repeat writes (advisory by default)
- shared_colors: events reusing a color another artist already claimed

Nothing here is mutated after build() returns; every checker reads the same
CanvasModel.
"""

import logging
from dataclasses import dataclass
from typing import Iterable

from .types import (
    ArtistId,
    Canvas,
    Color,
    ColorRegistry,
    OccupancyIndex,
    PaintEvent,
    Point,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DuplicateWrite:
    """An artist painted a point it had already painted."""
    artist: ArtistId
    point: Point
    first_line: int
    line: int


@dataclass(frozen=True)
class SharedColor:
    """An event used a color first claimed by a different artist."""
    color: Color
    claimant: ArtistId
    artist: ArtistId
    line: int


@dataclass(frozen=True)
class CanvasModel:
    """Immutable snapshot of one run: the log plus its derived indexes."""
    canvas: Canvas
    occupancy: OccupancyIndex
    color_registry: ColorRegistry
    duplicate_writes: tuple[DuplicateWrite, ...]
    shared_colors: tuple[SharedColor, ...]

    def artists(self) -> list[ArtistId]:
        """Artist ids in ascending order (the iteration order for all reports)."""
        return sorted(self.occupancy)

    def pixel_count(self, artist: ArtistId) -> int:
        return len(self.occupancy.get(artist, frozenset()))


def build(events: Iterable[PaintEvent], roster: Iterable[int] = ()) -> CanvasModel:
    """
    Build the canvas model in one pass over the events.

    Args:
        events: Paint events in log order
        roster: Artist ids known to exist even if they never painted; they get
            an empty occupancy set so zero-pixel artists can be reported

    Returns:
        CanvasModel with frozen per-artist point sets
    """
    canvas = tuple(events)

    points_by_artist: dict[ArtistId, dict[Point, int]] = {
        ArtistId(a): {} for a in roster
    }
    color_registry: dict[Color, ArtistId] = {}
    duplicate_writes: list[DuplicateWrite] = []
    shared_colors: list[SharedColor] = []

    logger.info("Initializing artist and color data...")
    for event in canvas:
        # Point -> first line it was painted on, for this artist
        painted = points_by_artist.setdefault(event.artist, {})
        if event.coord in painted:
            dup = DuplicateWrite(
                artist=event.artist,
                point=event.coord,
                first_line=painted[event.coord],
                line=event.line_number,
            )
            duplicate_writes.append(dup)
            logger.warning(
                f"Artist {dup.artist} already painted at position {dup.point} "
                f"(line {dup.first_line}, again on line {dup.line})"
            )
        else:
            painted[event.coord] = event.line_number

        claimant = color_registry.setdefault(event.color, event.artist)
        if claimant != event.artist:
            shared = SharedColor(
                color=event.color,
                claimant=claimant,
                artist=event.artist,
                line=event.line_number,
            )
            shared_colors.append(shared)
            logger.warning(
                f"Artist {shared.artist} uses color {shared.color} on line {shared.line}, "
                f"which is also used by artist {shared.claimant}"
            )

    occupancy: OccupancyIndex = {
        artist: frozenset(painted) for artist, painted in points_by_artist.items()
    }

    logger.info(
        f"Built occupancy for {len(occupancy)} artists over {len(canvas)} events"
    )

    return CanvasModel(
        canvas=canvas,
        occupancy=occupancy,
        color_registry=color_registry,
        duplicate_writes=tuple(duplicate_writes),
        shared_colors=tuple(shared_colors),
    )
