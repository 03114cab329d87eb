"""Finding serialization utilities."""

import logging
from pathlib import Path

import pandas as pd

from application.constants import (
    CANONICAL_NAME_COL,
    CANONICAL_NAME_KEY,
    CATEGORY_COL,
    CATEGORY_KEY,
    IS_WEAK_COL,
    IS_WEAK_KEY,
    MESSAGE_COL,
    MESSAGE_KEY,
    RAW_NAME_KEY,
)
from infrastructure.io import write_json

logger = logging.getLogger(__name__)


def findings_to_records(findings_df: pd.DataFrame, name_col: str, location_cols: list[str]) -> list[dict]:
    """Convert finding rows into JSON-ready records."""
    records: list[dict] = []
    for _, row in findings_df.iterrows():
        record: dict[str, object] = {
            RAW_NAME_KEY: row[name_col],
            CATEGORY_KEY: row[CATEGORY_COL],
            CANONICAL_NAME_KEY: row[CANONICAL_NAME_COL],
            IS_WEAK_KEY: bool(row[IS_WEAK_COL]),
            MESSAGE_KEY: row[MESSAGE_COL],
        }
        # Location columns (file, line, ...) keep their table header as key
        for col in location_cols:
            record[col] = row[col]
        records.append(record)
    return records


def serialize_findings(
    findings_df: pd.DataFrame,
    name_col: str,
    location_cols: list[str],
    findings_path: Path,
) -> Path:
    """Write findings_path as a JSON list of finding records."""
    records = findings_to_records(findings_df, name_col, location_cols)
    write_json(findings_path, records)
    logger.info("Saved %d findings to %s", len(records), findings_path)
    return findings_path
