"""
audit_checks: Invariant checkers over a CanvasModel.

Each checker is a pure function (model, config) -> CheckResult:
- cardinality.py: artist count, minimum pixels per artist
- duplicates.py: same-artist repeated writes (configurable severity)
- uniqueness.py: one artist per color
- overlap.py: no point shared by two artists
- connectivity.py: one connected region per artist (no islands)
- patterns.py: no two artists with the same shape up to translation
- suite.py: runs all of them and collects an AuditReport
"""

from .suite import CHECKS, AuditReport, run_checks

__all__ = ["CHECKS", "AuditReport", "run_checks"]
