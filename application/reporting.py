"""Scan summary logging."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def log_scan_summary(
    summary: dict,
    n_findings: int,
    findings_path: Path,
    summary_path: Path,
) -> None:
    """
    Log a concise, human-readable scan summary.

    Args:
        summary: Counts from summarize_scan()
        n_findings: Number of reported findings
        findings_path: Path to findings JSON file
        summary_path: Path to summary JSON file
    """
    logger.info("=== Scan Summary ===")
    logger.info(
        "Candidates: %d (matched=%d, unmatched=%d)",
        summary["candidates"],
        summary["matched"],
        summary["unmatched"],
    )
    logger.info("Weak: %d, strong: %d", summary["weak"], summary["strong"])

    for category, counts in summary["by_category"].items():
        logger.info("  %s: weak=%d, strong=%d", category, counts["weak"], counts["strong"])

    if summary["weak_algorithms"]:
        logger.info("Weak algorithms found: %s", summary["weak_algorithms"])
    else:
        logger.info("No weak algorithms found.")

    logger.info("--- Artifacts ---")
    logger.info("Findings JSON (%d findings): %s", n_findings, findings_path)
    logger.info("Summary JSON: %s", summary_path)
