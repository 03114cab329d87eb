"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure,
implementing the scan workflow over tables of candidate algorithm names.
"""

from application.reporting import log_scan_summary
from application.scan import classify_candidates, resolve_scan_columns, select_findings, summarize_scan
from application.serialize import findings_to_records, serialize_findings

__all__ = [
    # Main workflow
    "resolve_scan_columns",
    "classify_candidates",
    "select_findings",
    "summarize_scan",
    # Output
    "findings_to_records",
    "serialize_findings",
    "log_scan_summary",
]
