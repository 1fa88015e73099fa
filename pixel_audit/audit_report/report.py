"""
Text rendering and JSON receipts for an AuditReport.

Provides:
- format_violation: One diagnostic as text (plus one line per island)
- render_result / render_report: Full textual report
- build_receipt / save_receipt: JSON receipt for the run
- summary_stats: Counts per check
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List

from audit_checks.suite import AuditReport
from audit_core.types import AuditConfig, CheckResult, Violation


def _join(items) -> str:
    return ", ".join(str(i) for i in items)


def format_violation(violation: Violation) -> List[str]:
    """
    Render one violation.

    First line: severity, check, message, then whichever of
    artists/points/colors/lines are present. Islands follow, one per line.
    """
    parts = [f"[{violation.severity.upper()}] {violation.check}: {violation.message}"]
    if violation.artists:
        parts.append(f"artists=[{_join(violation.artists)}]")
    if violation.colors:
        parts.append(f"colors=[{_join(violation.colors)}]")
    if violation.points:
        parts.append(f"points=[{_join(violation.points)}]")
    if violation.lines:
        parts.append(f"lines=[{_join(violation.lines)}]")

    lines = [" ".join(parts)]
    for i, island in enumerate(violation.islands):
        lines.append(f"    island {i}: {len(island)} pixels [{_join(island)}]")
    return lines


def status_line(result: CheckResult) -> str:
    if result.passed and result.violations:
        return f"{result.name}: PASS ({len(result.violations)} advisories)"
    if result.passed:
        return f"{result.name}: PASS"
    return f"{result.name}: FAIL ({len(result.violations)} violations)"


def render_result(result: CheckResult) -> List[str]:
    """Announcement, every violation, then PASS/FAIL for one check."""
    lines = [result.announcement]
    for violation in result.violations:
        lines.extend(format_violation(violation))

    lines.append(status_line(result))
    return lines


def render_report(report: AuditReport) -> List[str]:
    lines = []
    for result in report.results:
        lines.extend(render_result(result))

    lines.append("=" * 80)
    lines.append(summary_line(report))
    return lines


def summary_line(report: AuditReport) -> str:
    failed = [r.name for r in report.results if not r.passed]
    if failed:
        return (
            f"FAIL: {len(failed)} of {len(report.results)} checks failed "
            f"({_join(failed)}); {report.error_count} errors, "
            f"{report.violation_count} diagnostics total"
        )
    return (
        f"PASS: all {len(report.results)} checks passed "
        f"({report.violation_count} advisories)"
    )


def summary_stats(report: AuditReport) -> Dict[str, Any]:
    """Per-check violation counts plus pass/fail totals."""
    return {
        "total_checks": len(report.results),
        "passed": sum(1 for r in report.results if r.passed),
        "failed": sum(1 for r in report.results if not r.passed),
        "violations_per_check": {r.name: len(r.violations) for r in report.results},
    }


def build_receipt(
    report: AuditReport,
    config: AuditConfig,
    source: str,
    num_events: int,
    num_artists: int,
    deterministic: bool | None = None,
) -> Dict[str, Any]:
    """
    Build a receipt dictionary for one run.

    Args:
        report: Checker results
        config: Configuration the run used
        source: Log file the run read
        num_events: Events parsed
        num_artists: Distinct artists found
        deterministic: Result of the two-run comparison, if it was done
    """
    receipt = {
        "source": source,
        "timestamp": datetime.now().isoformat(),
        "status": "PASS" if report.passed else "FAIL",
        "config": config.to_dict(),
        "events": num_events,
        "artists": num_artists,
        "summary": summary_stats(report),
        "report": report.to_dict(),
    }

    if deterministic is not None:
        receipt["deterministic"] = deterministic

    return receipt


def save_receipt(receipt: Dict[str, Any], output_dir: Path) -> Path:
    """
    Save receipt to JSON file named after the log file.

    Returns:
        Path of the written receipt
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    receipt_file = output_dir / f"{Path(receipt['source']).stem}.json"

    with open(receipt_file, "w") as f:
        json.dump(receipt, f, indent=2)

    return receipt_file
