"""
Unit tests for audit_checks/overlap.py

- One violation per unordered artist pair, citing every shared point
- Single-pass index gives the same result as pairwise intersection
"""

import random

from audit_checks.overlap import check_no_overlap, find_overlaps, find_overlaps_pairwise
from audit_core.occupancy import build
from audit_core.types import AuditConfig, Color, PaintEvent, Point


def ev(artist, x, y):
    return PaintEvent(artist=artist, coord=Point(x, y), color=Color(artist, 0, 0))


class TestOverlap:

    def test_shared_origin_one_violation(self):
        model = build([ev(1, 0, 0), ev(2, 0, 0)])
        result = check_no_overlap(model, AuditConfig())

        assert not result.passed
        assert len(result.violations) == 1
        v = result.violations[0]
        assert v.kind == "overlap"
        assert v.artists == (1, 2)
        assert v.points == (Point(0, 0),)

    def test_disjoint_sets_pass(self):
        model = build([ev(1, 0, 0), ev(1, 1, 0), ev(2, 0, 1), ev(2, 1, 1)])
        assert check_no_overlap(model, AuditConfig()).passed

    def test_three_way_overlap_reports_each_pair(self):
        model = build([ev(3, 4, 4), ev(1, 4, 4), ev(2, 4, 4), ev(2, 0, 0), ev(1, 0, 0)])

        assert find_overlaps(model.occupancy) == {
            (1, 2): [Point(0, 0), Point(4, 4)],
            (1, 3): [Point(4, 4)],
            (2, 3): [Point(4, 4)],
        }

    def test_single_pass_matches_pairwise(self):
        rng = random.Random(1234)
        events = [
            ev(rng.randrange(8), rng.randrange(12), rng.randrange(12))
            for _ in range(300)
        ]
        occupancy = build(events).occupancy

        fast = find_overlaps(occupancy)
        naive = find_overlaps_pairwise(occupancy)

        assert fast, "Random canvas this dense must contain overlaps"
        assert fast == naive, "Index-based overlap must equal pairwise intersection"
        assert list(fast) == list(naive), "Pair order must match too"
