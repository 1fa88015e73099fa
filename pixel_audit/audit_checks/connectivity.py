"""
No-islands check: each artist's points form one connected region.

Key principles:
1. Adjacency is 4-connected by default: (x±1, y) and (x, y±1). Diagonal-only
   contact does not connect unless the run is configured for 8-connectivity.
2. Only the artist's own points are graph nodes, so touching another
   artist's pixel never merges two islands.
3. Each point is indexed once and looks up a fixed number of neighbors, so the
   graph has O(n) edges for n points; labeling is one
   scipy.sparse.csgraph.connected_components call.

Islands are reported deterministically: points sorted within an island,
islands ordered by their lex-min point.
"""

import logging

import numpy as np
from scipy.sparse import coo_matrix
from scipy.sparse.csgraph import connected_components

from audit_core.occupancy import CanvasModel
from audit_core.types import Adjacency, AuditConfig, CheckResult, Point, Violation

logger = logging.getLogger(__name__)

NO_ISLANDS = "no_islands"


def neighbor_offsets(adjacency: Adjacency = 4) -> tuple[tuple[int, int], ...]:
    """All (dx, dy) offsets that count as adjacent under the rule."""
    if adjacency == 4:
        return ((-1, 0), (1, 0), (0, -1), (0, 1))
    if adjacency == 8:
        return tuple(
            (dx, dy)
            for dx in (-1, 0, 1)
            for dy in (-1, 0, 1)
            if (dx, dy) != (0, 0)
        )
    raise ValueError(f"adjacency must be 4 or 8, got {adjacency!r}")


def find_islands(points: frozenset[Point] | set[Point],
                 adjacency: Adjacency = 4) -> list[tuple[Point, ...]]:
    """
    Partition a point set into connected components.

    Args:
        points: One artist's occupancy set
        adjacency: 4 or 8

    Returns:
        List of islands (each a sorted tuple of points), ordered by lex-min
        point. Empty input gives an empty list.
    """
    # Forward half of the neighborhood; connected_components(directed=False)
    # supplies the reverse edges.
    forward = [offset for offset in neighbor_offsets(adjacency) if offset > (0, 0)]

    ordered = sorted(points)
    n = len(ordered)
    if n == 0:
        return []
    if n == 1:
        return [(ordered[0],)]

    index = {p: i for i, p in enumerate(ordered)}

    rows: list[int] = []
    cols: list[int] = []
    for i, (x, y) in enumerate(ordered):
        for dx, dy in forward:
            j = index.get(Point(x + dx, y + dy))
            if j is not None:
                rows.append(i)
                cols.append(j)

    data = np.ones(len(rows), dtype=np.int8)
    edges = (np.array(rows, dtype=np.int64), np.array(cols, dtype=np.int64))
    graph = coo_matrix((data, edges), shape=(n, n))
    _, labels = connected_components(graph, directed=False)

    groups: dict[int, list[Point]] = {}
    for point, label in zip(ordered, labels.tolist()):
        groups.setdefault(label, []).append(point)

    # ordered is sorted, so each group is sorted and group[0] is its lex-min
    islands = sorted((tuple(g) for g in groups.values()), key=lambda g: g[0])
    return islands


def check_no_islands(model: CanvasModel, config: AuditConfig) -> CheckResult:
    """
    Every artist must have exactly one connected component.

    Zero-pixel artists can't satisfy this and are reported as "no_pixels".
    """
    announcement = "Verifying that all pixels are connected to pixels of the same color..."

    violations = []
    for artist in model.artists():
        points = model.occupancy[artist]
        if not points:
            violations.append(Violation(
                check=NO_ISLANDS,
                kind="no_pixels",
                message=f"Artist {artist} has no pixels; connectivity is undefined.",
                artists=(artist,),
            ))
            continue

        islands = find_islands(points, config.adjacency)
        if len(islands) > 1:
            logger.debug(f"Artist {artist}: {len(islands)} islands")
            violations.append(Violation(
                check=NO_ISLANDS,
                kind="islands",
                message=(
                    f"Artist {artist} painted {len(islands)} islands "
                    f"({config.adjacency}-connected) instead of one region"
                ),
                artists=(artist,),
                islands=tuple(islands),
            ))

    return CheckResult(NO_ISLANDS, announcement, tuple(violations))
