#!/usr/bin/env python3
"""
Audit a canvas log produced by concurrent artists.

Checks, in order:
- artist_count: exactly --artists distinct artists
- minimum_pixels: every artist paints at least --min-pixels points
- duplicate_writes: same artist painting a point twice (advisory by default)
- unique_colors: one artist per color
- no_overlap: no point painted by two artists
- no_islands: each artist's points form one region (--adjacency 4 or 8)
- no_repeating_patterns: no two artists with the same shape up to translation

Exit status: 0 if every check passed, 1 if any failed (or the determinism
re-run differed), 2 if the log could not be read or parsed.

Usage:
    pixel-audit canvas.log --artists 54 --min-pixels 1
    pixel-audit canvas.log --receipt-dir receipts --check-determinism
"""

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from audit_checks.suite import run_checks
from audit_core.log_parser import LogParseError, read_log
from audit_core.occupancy import build
from audit_core.types import ADJACENCY_RULES, SEVERITIES, AuditConfig, CheckResult

from .logs import close_logger, setup_logger
from .report import build_receipt, format_violation, save_receipt, status_line, summary_line

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_BAD_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Verify safety and fairness invariants of a concurrent canvas log"
    )
    parser.add_argument("log", type=Path, help="Canvas log file (artist, x, y, r, g, b per line)")
    parser.add_argument(
        "--artists",
        type=int,
        default=54,
        help="Expected number of distinct artists (default: 54)",
    )
    parser.add_argument(
        "--min-pixels",
        type=int,
        default=1,
        help="Minimum pixels each artist must paint (default: 1)",
    )
    parser.add_argument(
        "--adjacency",
        type=int,
        default=4,
        choices=ADJACENCY_RULES,
        help="Neighborhood for island detection (default: 4)",
    )
    parser.add_argument(
        "--duplicate-writes",
        type=str,
        default="advisory",
        choices=SEVERITIES,
        help="Severity of same-artist repeated writes (default: advisory)",
    )
    parser.add_argument(
        "--receipt-dir", type=Path, default=None, help="Write a JSON receipt here"
    )
    parser.add_argument(
        "--log-file", type=Path, default=None, help="Also write the report to this file"
    )
    parser.add_argument(
        "--check-determinism",
        action="store_true",
        help="Run the checks twice and require byte-identical reports",
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser


def run_audit(args: argparse.Namespace, config: AuditConfig, logger: logging.Logger) -> int:
    """Parse, build, check and report; returns the exit status."""
    logger.info("=" * 80)
    logger.info(f"Canvas audit: {args.log}")
    logger.info(f"Config: {config.to_dict()}")
    logger.info("=" * 80)

    try:
        canvas = read_log(args.log)
    except FileNotFoundError:
        logger.error(f"File {args.log} not found.")
        return EXIT_BAD_INPUT
    except OSError as e:
        logger.error(f"Cannot read {args.log}: {e.strerror or e}")
        return EXIT_BAD_INPUT
    except LogParseError as e:
        logger.error(f"Line {e.line_number}: {e.field} is not a valid {e.role} ({e.detail})")
        return EXIT_BAD_INPUT

    model = build(canvas)
    logger.info(f"Found {len(model.occupancy)} artists across {len(canvas)} events")

    def announce(name: str) -> None:
        logger.info(f"Running {name}...")

    def emit(result: CheckResult) -> None:
        logger.info(result.announcement)
        for violation in result.violations:
            level = logging.ERROR if violation.severity == "error" else logging.WARNING
            for line in format_violation(violation):
                logger.log(level, line)
        logger.log(logging.INFO if result.passed else logging.ERROR, status_line(result))

    report = run_checks(model, config, on_start=announce, on_result=emit)

    deterministic = None
    if args.check_determinism:
        logger.info("Re-running all checks for determinism...")
        deterministic = run_checks(model, config).to_bytes() == report.to_bytes()
        if deterministic:
            logger.info("Determinism check passed: reports are byte-identical")
        else:
            logger.error("Determinism check FAILED: reports differ between runs")

    logger.info("=" * 80)
    if report.passed:
        logger.info(summary_line(report))
    else:
        logger.error(summary_line(report))

    if args.receipt_dir is not None:
        receipt = build_receipt(
            report,
            config,
            source=str(args.log),
            num_events=len(canvas),
            num_artists=len(model.occupancy),
            deterministic=deterministic,
        )
        receipt_file = save_receipt(receipt, args.receipt_dir)
        logger.info(f"Receipt saved to: {receipt_file}")

    logger.info("Finished analyzing the log.")

    if not report.passed or deterministic is False:
        return EXIT_VIOLATIONS
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = AuditConfig(
            expected_artist_count=args.artists,
            minimum_pixels_per_artist=args.min_pixels,
            adjacency=args.adjacency,
            duplicate_write_severity=args.duplicate_writes,
        )
    except ValueError as e:
        parser.error(str(e))

    # Root logger: library modules log under their own module names
    logger = setup_logger(
        "", args.log_file, level=logging.DEBUG if args.verbose else logging.INFO
    )
    try:
        return run_audit(args, config, logger)
    finally:
        close_logger("")


if __name__ == "__main__":
    raise SystemExit(main())
