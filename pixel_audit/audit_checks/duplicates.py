"""
Same-artist repeated writes.

Redundant rather than unsafe: the artist painted a point it already owned.
Severity comes from config.duplicate_write_severity so a run can treat it as
advisory (default) or as a failure.
"""

from audit_core.occupancy import CanvasModel
from audit_core.types import AuditConfig, CheckResult, Violation

DUPLICATE_WRITES = "duplicate_writes"


def check_duplicate_writes(model: CanvasModel, config: AuditConfig) -> CheckResult:
    announcement = "Checking for artists painting the same pixel twice..."

    violations = tuple(
        Violation(
            check=DUPLICATE_WRITES,
            kind="duplicate_write",
            message=f"Artist {dup.artist} already painted at position {dup.point}!",
            artists=(dup.artist,),
            points=(dup.point,),
            lines=(dup.first_line, dup.line),
            severity=config.duplicate_write_severity,
        )
        for dup in model.duplicate_writes
    )

    return CheckResult(DUPLICATE_WRITES, announcement, violations)
