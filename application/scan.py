"""Scan workflow: classify a table of candidate algorithm names."""

import logging
from collections.abc import Sequence

import pandas as pd

from application.constants import CANONICAL_NAME_COL, CATEGORY_COL, IS_WEAK_COL, MATCHED_COL, MESSAGE_COL
from domain.algorithms import CATEGORY_ORDER, AlgorithmCategory, Classifier
from infrastructure.config.models import ScanConfig

logger = logging.getLogger(__name__)


def resolve_scan_columns(cfg: ScanConfig, df: pd.DataFrame) -> tuple[str, list[str]]:
    """
    Resolve the name column (required) and the location columns (optional) for the candidate table.

    Returns:
        Tuple of (name_col, location_cols) where location_cols only lists columns present in df

    Raises:
        KeyError: If configured name column not found in DataFrame
    """
    name_col = cfg.columns.name_col
    if name_col not in df.columns:
        raise KeyError(f"Configured name_col='{name_col}' not found in candidate table columns: {list(df.columns)}")

    location_cols: list[str] = []
    for col in cfg.columns.location_cols():
        if col in df.columns:
            location_cols.append(col)
        else:
            logger.warning("Configured location column '%s' not found in candidate table; ignoring it.", col)

    return name_col, location_cols


def classify_candidates(classifier: Classifier, df: pd.DataFrame, name_col: str) -> pd.DataFrame:
    """
    Classify every value of `name_col` and attach the result columns.

    Unmatched rows get algorithm_matched=False and None in the other result columns.
    """
    categories: list[str | None] = []
    names: list[str | None] = []
    weak_flags: list[bool | None] = []
    messages: list[str | None] = []

    for raw in df[name_col]:
        identity = classifier.classify("" if pd.isna(raw) else str(raw))
        if identity is None:
            categories.append(None)
            names.append(None)
            weak_flags.append(None)
            messages.append(None)
            continue
        categories.append(identity.category.value)
        names.append(identity.name)
        weak_flags.append(identity.is_weak)
        messages.append(f"Use of {identity.describe()}")

    out = df.copy()
    out[CATEGORY_COL] = pd.Series(categories, index=out.index, dtype=object)
    out[CANONICAL_NAME_COL] = pd.Series(names, index=out.index, dtype=object)
    out[IS_WEAK_COL] = pd.Series(weak_flags, index=out.index, dtype=object)
    out[MESSAGE_COL] = pd.Series(messages, index=out.index, dtype=object)
    out[MATCHED_COL] = out[CANONICAL_NAME_COL].notna()

    logger.info("Classified %d candidates: %d matched", len(out), int(out[MATCHED_COL].sum()))
    return out


def select_findings(
    df: pd.DataFrame,
    weak_only: bool = True,
    categories: Sequence[AlgorithmCategory] | None = None,
) -> pd.DataFrame:
    """Return the matched rows to report, optionally only weak ones and only from `categories`."""
    mask = df[MATCHED_COL].astype(bool)
    if weak_only:
        mask = mask & df[IS_WEAK_COL].eq(True)
    if categories:
        mask = mask & df[CATEGORY_COL].isin([c.value for c in categories])
    return df[mask]


def summarize_scan(df: pd.DataFrame) -> dict:
    """Count candidates by outcome, category, and weak canonical name."""
    matched = df[MATCHED_COL].astype(bool)
    weak = df[IS_WEAK_COL].eq(True)
    strong = df[IS_WEAK_COL].eq(False)

    by_category: dict[str, dict[str, int]] = {}
    for category in CATEGORY_ORDER:
        in_cat = df[CATEGORY_COL].eq(category.value)
        by_category[category.value] = {
            "weak": int((in_cat & weak).sum()),
            "strong": int((in_cat & strong).sum()),
        }

    weak_counts = df.loc[weak, CANONICAL_NAME_COL].value_counts()

    return {
        "candidates": int(len(df)),
        "matched": int(matched.sum()),
        "unmatched": int((~matched).sum()),
        "weak": int(weak.sum()),
        "strong": int(strong.sum()),
        "by_category": by_category,
        "weak_algorithms": {str(name): int(count) for name, count in weak_counts.items()},
    }
