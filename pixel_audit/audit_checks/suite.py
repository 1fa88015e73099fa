"""
Run every checker over one CanvasModel and collect the results.

Checkers are independent and read-only, so the order below only fixes the
order of the report. A checker that raises is recorded as a failed result
with a "checker_error" violation; the rest still run.
"""

import json
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from audit_core.occupancy import CanvasModel
from audit_core.types import AuditConfig, CheckResult, Violation

from .cardinality import check_artist_count, check_minimum_pixels
from .connectivity import check_no_islands
from .duplicates import check_duplicate_writes
from .overlap import check_no_overlap
from .patterns import check_no_repeating_patterns
from .uniqueness import check_colors_unique

logger = logging.getLogger(__name__)

Checker = Callable[[CanvasModel, AuditConfig], CheckResult]

CHECKS: tuple[tuple[str, Checker], ...] = (
    ("artist_count", check_artist_count),
    ("minimum_pixels", check_minimum_pixels),
    ("duplicate_writes", check_duplicate_writes),
    ("unique_colors", check_colors_unique),
    ("no_overlap", check_no_overlap),
    ("no_islands", check_no_islands),
    ("no_repeating_patterns", check_no_repeating_patterns),
)


@dataclass(frozen=True)
class AuditReport:
    """All CheckResults of one run, in CHECKS order."""
    results: tuple[CheckResult, ...]

    @property
    def passed(self) -> bool:
        return all(r.passed for r in self.results)

    @property
    def violation_count(self) -> int:
        return sum(len(r.violations) for r in self.results)

    @property
    def error_count(self) -> int:
        return sum(
            1 for r in self.results for v in r.violations if v.severity == "error"
        )

    def to_dict(self) -> dict:
        return {
            "status": "PASS" if self.passed else "FAIL",
            "violation_count": self.violation_count,
            "error_count": self.error_count,
            "checks": [r.to_dict() for r in self.results],
        }

    def to_bytes(self) -> bytes:
        """Canonical byte form, for two-run identity checks."""
        return json.dumps(self.to_dict(), sort_keys=True, separators=(",", ":")).encode("utf-8")


def run_checks(
    model: CanvasModel,
    config: AuditConfig,
    on_start: Optional[Callable[[str], None]] = None,
    on_result: Optional[Callable[[CheckResult], None]] = None,
    checks: tuple[tuple[str, Checker], ...] = CHECKS,
) -> AuditReport:
    """
    Run each checker in turn.

    Args:
        model: Built canvas model
        config: Run configuration
        on_start: Called with the check name just before the check runs
        on_result: Called with each CheckResult as soon as its check finishes,
            so output can stream while later checks run
        checks: (name, checker) pairs to run

    Returns:
        AuditReport with one CheckResult per checker
    """
    results = []
    for name, checker in checks:
        if on_start is not None:
            on_start(name)
        try:
            result = checker(model, config)
        except Exception as e:
            logger.exception(f"Checker {name} crashed")
            result = CheckResult(
                name=name,
                announcement=f"{name} did not complete",
                violations=(Violation(
                    check=name,
                    kind="checker_error",
                    message=f"{name} raised {type(e).__name__}: {e}",
                ),),
            )

        results.append(result)
        if on_result is not None:
            on_result(result)

    return AuditReport(tuple(results))
