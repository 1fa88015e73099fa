"""
audit_core: Core primitives for the canvas log auditor.

Provides:
- types: Point, Color, PaintEvent, AuditConfig, Violation, CheckResult
- log_parser: Log lines -> PaintEvents (and back)
- occupancy: CanvasModel build (occupancy index, color registry)
"""

__all__ = [
    "log_parser",
    "occupancy",
    "types",
]
