"""Application-level constants."""

# Columns added to the candidate table by the scan
CATEGORY_COL = "algorithm_category"
CANONICAL_NAME_COL = "algorithm_name"
IS_WEAK_COL = "algorithm_is_weak"
MATCHED_COL = "algorithm_matched"
MESSAGE_COL = "finding_message"

# Keys for serialization
RAW_NAME_KEY = "name"
CATEGORY_KEY = "category"
CANONICAL_NAME_KEY = "canonical_name"
IS_WEAK_KEY = "is_weak"
MESSAGE_KEY = "message"

# Output filenames
FINDINGS_FILENAME = "findings.json"
SUMMARY_FILENAME = "summary.json"
CONFIG_SNAPSHOT_FILENAME = "config.resolved.json"
LOG_FILENAME = "run.log"
