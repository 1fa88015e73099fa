"""
audit_report: Output side of an audit run.

- logs.py: Console/file logger setup
- report.py: Text rendering, JSON receipts
- cli.py: pixel-audit command
"""
