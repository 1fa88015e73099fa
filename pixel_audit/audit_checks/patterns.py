"""
Duplicate-pattern check: two artists drew the same shape up to translation.

Identical shapes are evidence that artists shared (or reseeded) one random
source. Only pure translation is considered; rotations and reflections are
different shapes.

Canonicalization:
1. Anchor = lex-min point by (x, y). Both components take part in the order,
   so the anchor is unique for any non-empty set.
2. Translate anchor -> (0, 0).
3. Sort the translated points (numpy lexsort, x primary, y secondary).

Two artists share a shape iff their canonical forms are equal. Artists are
bucketed by (size, SHA-256 digest of the canonical coordinates) so only
same-key artists are compared; equality is still confirmed on the canonical
forms themselves. The digest is stable across runs and is reported with
each duplicate.
"""

import hashlib
from itertools import combinations

import numpy as np

from audit_core.occupancy import CanvasModel
from audit_core.types import ArtistId, AuditConfig, CheckResult, OccupancyIndex, Point, Violation

NO_REPEATING_PATTERNS = "no_repeating_patterns"

CanonicalShape = tuple[tuple[int, int], ...]
ShapeKey = tuple[int, str]

# Fixed little-endian int64 so digests do not depend on the host
COORD_DTYPE = np.dtype("<i8")


def anchor(points: frozenset[Point] | set[Point]) -> Point:
    """
    Lex-min point of the set.

    Raises:
        ValueError: If points is empty (no anchor exists)
    """
    if not points:
        raise ValueError("Cannot anchor an empty point set")
    return min(points)


def normalize_points(points: frozenset[Point] | set[Point]) -> CanonicalShape:
    """
    Translation-normalized, sorted form of a point set.

    Examples:
        >>> normalize_points({Point(10, 10), Point(11, 10)})
        ((0, 0), (1, 0))

    Raises:
        ValueError: If points is empty
    """
    origin = anchor(points)
    coords = np.array([(p.x, p.y) for p in points], dtype=COORD_DTYPE)
    coords -= np.array([origin.x, origin.y], dtype=COORD_DTYPE)

    # lexsort keys are given last-primary: sort by x, then y
    order = np.lexsort((coords[:, 1], coords[:, 0]))
    return tuple((int(x), int(y)) for x, y in coords[order])


def shape_digest(shape: CanonicalShape) -> str:
    """Hex SHA-256 of the canonical coordinates as little-endian int64 pairs."""
    data = np.array(shape, dtype=COORD_DTYPE).tobytes()
    return hashlib.sha256(data).hexdigest()


def shape_key(shape: CanonicalShape) -> ShapeKey:
    """Bucket key: (size, digest of canonical form)."""
    return (len(shape), shape_digest(shape))


def find_duplicate_patterns(occupancy: OccupancyIndex) -> list[tuple[ArtistId, ArtistId]]:
    """
    Unordered pairs (a < b) of artists with identical canonical shapes.

    Empty sets are skipped. Result is sorted.
    """
    shapes: dict[ArtistId, CanonicalShape] = {}
    buckets: dict[ShapeKey, list[ArtistId]] = {}

    for artist in sorted(occupancy):
        points = occupancy[artist]
        if not points:
            continue
        shape = normalize_points(points)
        shapes[artist] = shape
        buckets.setdefault(shape_key(shape), []).append(artist)

    duplicates = []
    for artists in buckets.values():
        for a, b in combinations(artists, 2):
            if shapes[a] == shapes[b]:
                duplicates.append((a, b))

    return sorted(duplicates)


def check_no_repeating_patterns(model: CanvasModel, config: AuditConfig) -> CheckResult:
    announcement = "Checking for duplicated artist patterns..."

    violations = []
    for a, b in find_duplicate_patterns(model.occupancy):
        anchor_a = anchor(model.occupancy[a])
        anchor_b = anchor(model.occupancy[b])
        digest = shape_digest(normalize_points(model.occupancy[a]))
        violations.append(Violation(
            check=NO_REPEATING_PATTERNS,
            kind="duplicate_pattern",
            message=(
                f"Duplicate pattern found! Artists {a} and {b} drew the same "
                f"{model.pixel_count(a)}-pixel shape (anchored at {anchor_a} and {anchor_b}; "
                f"shape {digest[:12]})"
            ),
            artists=(a, b),
            points=(anchor_a, anchor_b),
        ))

    return CheckResult(NO_REPEATING_PATTERNS, announcement, tuple(violations))
