"""
Unit tests for audit_checks/cardinality.py and audit_checks/duplicates.py
"""

from audit_checks.cardinality import artists_with_pixels, check_artist_count, check_minimum_pixels
from audit_checks.duplicates import check_duplicate_writes
from audit_core.occupancy import build
from audit_core.types import AuditConfig, Color, PaintEvent, Point


def line_of(artist, length, y=0):
    """Horizontal run of `length` points for one artist, unique color per artist."""
    return [
        PaintEvent(artist=artist, coord=Point(x, y), color=Color(artist, 0, 0))
        for x in range(length)
    ]


class TestArtistCount:

    def test_exact_count_passes(self):
        model = build(line_of(1, 2) + line_of(2, 2, y=5))
        result = check_artist_count(model, AuditConfig(expected_artist_count=2))

        assert result.passed
        assert result.violations == ()

    def test_mismatch_reports_counts(self):
        model = build(line_of(1, 2))
        result = check_artist_count(model, AuditConfig(expected_artist_count=54))

        assert not result.passed
        assert len(result.violations) == 1
        v = result.violations[0]
        assert v.kind == "artist_count"
        assert "Expected 54 artists, but found 1" in v.message


class TestMinimumPixels:

    def test_all_above_minimum(self):
        model = build(line_of(1, 3) + line_of(2, 4, y=5))
        result = check_minimum_pixels(model, AuditConfig(minimum_pixels_per_artist=3))
        assert result.passed

    def test_below_minimum_reports_each_artist(self):
        model = build(line_of(1, 1) + line_of(2, 4, y=5) + line_of(3, 2, y=9))
        result = check_minimum_pixels(model, AuditConfig(minimum_pixels_per_artist=3))

        assert [v.artists for v in result.violations] == [(1,), (3,)]
        assert all(v.kind == "too_few_pixels" for v in result.violations)
        assert "drew 1 pixels; should draw at least 3" in result.violations[0].message

    def test_zero_pixel_artist_flagged_even_with_zero_minimum(self):
        model = build(line_of(1, 2), roster=[1, 2])
        result = check_minimum_pixels(model, AuditConfig(minimum_pixels_per_artist=0))

        assert not result.passed
        assert [(v.kind, v.artists) for v in result.violations] == [("no_pixels", (2,))]

    def test_artists_with_pixels_excludes_empty(self):
        model = build(line_of(3, 1), roster=[1, 3, 5])
        assert artists_with_pixels(model) == [3]


class TestDuplicateWrites:

    def _model(self):
        events = line_of(1, 2) + [
            PaintEvent(artist=1, coord=Point(0, 0), color=Color(1, 0, 0), line_number=7)
        ]
        return build(events)

    def test_advisory_by_default(self):
        result = check_duplicate_writes(self._model(), AuditConfig())

        assert result.passed, "Advisory diagnostics must not fail the check"
        assert len(result.violations) == 1
        v = result.violations[0]
        assert v.severity == "advisory"
        assert v.points == (Point(0, 0),)
        assert v.lines == (-1, 7)

    def test_error_severity_fails(self):
        result = check_duplicate_writes(
            self._model(), AuditConfig(duplicate_write_severity="error")
        )
        assert not result.passed
        assert result.violations[0].severity == "error"
