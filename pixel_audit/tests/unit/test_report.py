"""
Unit tests for audit_report/report.py and audit_report/logs.py
"""

import json
import logging

from audit_checks.suite import AuditReport
from audit_core.types import AuditConfig, CheckResult, Color, Point, Violation
from audit_report.logs import close_logger, setup_logger
from audit_report.report import (
    build_receipt,
    format_violation,
    render_report,
    save_receipt,
    summary_stats,
)


def sample_report():
    return AuditReport((
        CheckResult("unique_colors", "Verifying that all artists use unique colors...", (
            Violation(
                check="unique_colors",
                kind="color_reused",
                message="Artist 2 uses color (1, 2, 3), which is also used by artist 1 (1 events)",
                artists=(1, 2),
                colors=(Color(1, 2, 3),),
                lines=(4,),
            ),
        )),
        CheckResult("no_islands", "Verifying that all pixels are connected...", (
            Violation(
                check="no_islands",
                kind="islands",
                message="Artist 7 painted 2 islands",
                artists=(7,),
                islands=((Point(0, 0),), (Point(5, 5), Point(5, 6))),
            ),
        )),
        CheckResult("duplicate_writes", "Checking for artists painting the same pixel twice...", (
            Violation(
                check="duplicate_writes",
                kind="duplicate_write",
                message="Artist 1 already painted at position (0, 0)!",
                artists=(1,),
                points=(Point(0, 0),),
                severity="advisory",
            ),
        )),
        CheckResult("no_overlap", "Verifying that no artists paint over one another..."),
    ))


class TestFormatting:

    def test_violation_line_carries_context(self):
        line = format_violation(sample_report().results[0].violations[0])[0]

        assert line.startswith("[ERROR] unique_colors:")
        assert "artists=[1, 2]" in line
        assert "colors=[(1, 2, 3)]" in line
        assert "lines=[4]" in line

    def test_islands_one_per_line(self):
        lines = format_violation(sample_report().results[1].violations[0])

        assert len(lines) == 3
        assert lines[1] == "    island 0: 1 pixels [(0, 0)]"
        assert lines[2] == "    island 1: 2 pixels [(5, 5), (5, 6)]"

    def test_render_report_announces_each_check_and_summarizes(self):
        lines = render_report(sample_report())

        for result in sample_report().results:
            assert result.announcement in lines
        assert "duplicate_writes: PASS (1 advisories)" in lines
        assert "no_overlap: PASS" in lines
        assert "no_islands: FAIL (1 violations)" in lines
        assert lines[-1].startswith("FAIL: 2 of 4 checks failed (unique_colors, no_islands)")


class TestReceipts:

    def test_summary_stats(self):
        stats = summary_stats(sample_report())
        assert stats["passed"] == 2 and stats["failed"] == 2
        assert stats["violations_per_check"]["no_islands"] == 1

    def test_build_and_save(self, tmp_path):
        receipt = build_receipt(
            sample_report(), AuditConfig(expected_artist_count=3), source="runs/canvas.log",
            num_events=10, num_artists=3, deterministic=True,
        )
        path = save_receipt(receipt, tmp_path / "receipts")

        assert path.name == "canvas.json"
        loaded = json.loads(path.read_text())
        assert loaded["status"] == "FAIL"
        assert loaded["deterministic"] is True
        assert loaded["config"]["expected_artist_count"] == 3
        islands = loaded["report"]["checks"][1]["violations"][0]["islands"]
        assert islands == [[[0, 0]], [[5, 5], [5, 6]]]

    def test_deterministic_omitted_when_not_checked(self):
        receipt = build_receipt(sample_report(), AuditConfig(), "c.log", 0, 0)
        assert "deterministic" not in receipt


class TestLogs:

    def test_setup_and_close_only_touch_own_handlers(self, tmp_path):
        logger = logging.getLogger("pixel_audit_test")
        foreign = logging.NullHandler()
        logger.addHandler(foreign)

        log_file = tmp_path / "logs" / "audit.log"
        setup_logger("pixel_audit_test", log_file)
        setup_logger("pixel_audit_test", log_file)
        assert len(logger.handlers) == 3, "Re-setup replaces its own handlers"

        logger.info("hello")
        close_logger("pixel_audit_test")

        assert logger.handlers == [foreign]
        assert "INFO: hello" in log_file.read_text()
        logger.removeHandler(foreign)
