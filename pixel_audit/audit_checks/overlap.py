"""
Mutual exclusion: no point is painted by two different artists.

find_overlaps builds one point -> owners index in a single O(total pixels)
pass. find_overlaps_pairwise intersects every pair of sets; it is O(A^2)
and returns the same mapping.
"""

from itertools import combinations

from audit_core.occupancy import CanvasModel
from audit_core.types import ArtistId, AuditConfig, CheckResult, OccupancyIndex, Point, Violation

NO_OVERLAP = "no_overlap"

OverlapMap = dict[tuple[ArtistId, ArtistId], list[Point]]


def find_overlaps(occupancy: OccupancyIndex) -> OverlapMap:
    """
    Shared points per unordered artist pair (a < b), points sorted.

    Pairs appear in ascending (a, b) order.
    """
    owners: dict[Point, list[ArtistId]] = {}
    for artist in sorted(occupancy):
        for point in occupancy[artist]:
            owners.setdefault(point, []).append(artist)

    overlaps: OverlapMap = {}
    for point, artists in owners.items():
        if len(artists) < 2:
            continue
        # artists already ascending, so combinations yield (a, b) with a < b
        for pair in combinations(artists, 2):
            overlaps.setdefault(pair, []).append(point)

    return {pair: sorted(overlaps[pair]) for pair in sorted(overlaps)}


def find_overlaps_pairwise(occupancy: OccupancyIndex) -> OverlapMap:
    """Naive pairwise intersection; same result as find_overlaps."""
    overlaps: OverlapMap = {}
    for a, b in combinations(sorted(occupancy), 2):
        shared = occupancy[a] & occupancy[b]
        if shared:
            overlaps[(a, b)] = sorted(shared)
    return overlaps


def check_no_overlap(model: CanvasModel, config: AuditConfig) -> CheckResult:
    announcement = "Verifying that no artists paint over one another..."

    violations = []
    for (a, b), points in find_overlaps(model.occupancy).items():
        violations.append(Violation(
            check=NO_OVERLAP,
            kind="overlap",
            message=f"Artist {a} overlaps with artist {b} at {len(points)} points",
            artists=(a, b),
            points=tuple(points),
        ))

    return CheckResult(NO_OVERLAP, announcement, tuple(violations))
